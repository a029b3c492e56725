# tests/test_config.py - JSON config manager
import io
import json

import pytest
from rich.console import Console

from trie_predictor.utils.config_manager import Config


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text())["log_level"] == "INFO"
    assert cfg["echo_log"] is False


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"prompt": "?", "show_timing": True}))
    cfg = Config(str(path))
    assert cfg.get("prompt") == "?"
    assert cfg["show_timing"] is True
    assert cfg["encoding"] == "utf-8"


def test_unknown_and_corrupt_files_are_logged(tmp_path, isolated_log):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    cfg = Config(str(path))
    assert cfg["log_level"] == "INFO"

    path.write_text(json.dumps({"colour": "blue"}))
    Config(str(path))

    with open(isolated_log.path, encoding="utf-8") as f:
        text = f.read()
    assert "unreadable, using defaults" in text
    assert "ignoring unknown key 'colour'" in text


@pytest.mark.parametrize("raw, expected", [("yes", True), ("0", False), ("True", True), ("off", False)])
def test_set_coerces_bool(tmp_path, raw, expected):
    cfg = Config(str(tmp_path / "c.json"))
    cfg.set("echo_log", raw)
    assert cfg["echo_log"] is expected
    assert Config(str(tmp_path / "c.json"))["echo_log"] is expected


def test_set_rejects_bad_values(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("show_timing", "maybe")


def test_show_lists_keys(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    buf = io.StringIO()
    cfg.show(Console(file=buf, width=120))
    out = buf.getvalue()
    assert "log_level" in out and "INFO" in out


def test_file_values_are_coerced(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"echo_log": "false", "show_timing": "yes", "log_level": "debug"}))
    cfg = Config(str(path))
    assert cfg["echo_log"] is False
    assert cfg["show_timing"] is True
    assert cfg["log_level"] == "DEBUG"


@pytest.mark.parametrize("bad", ["LOUD", 5, None])
def test_invalid_level_in_file_keeps_default(tmp_path, isolated_log, bad):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": bad, "echo_log": "maybe"}))
    cfg = Config(str(path))
    assert cfg["log_level"] == "INFO"
    assert cfg["echo_log"] is False

    with open(isolated_log.path, encoding="utf-8") as f:
        text = f.read()
    assert "bad value for 'log_level'" in text
    assert "bad value for 'echo_log'" in text


def test_set_log_level_is_validated(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    cfg.set("log_level", "warn")
    assert cfg["log_level"] == "WARNING"
    with pytest.raises(ValueError):
        cfg.set("log_level", "LOUD")
