# tests/conftest.py - keep log output out of the working directory
import pytest

from trie_predictor.utils.logger_utils import log


@pytest.fixture(autouse=True)
def isolated_log(tmp_path):
    saved = (log.path, log.level, log.echo)
    log.path = str(tmp_path / "logs" / "test.log")
    log.level = "DEBUG"
    log.echo = False
    yield log
    log.path, log.level, log.echo = saved


@pytest.fixture
def write_lines(tmp_path):
    """Write lines to a file under tmp_path and return its path."""
    def _write(name, lines):
        p = tmp_path / name
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(p)
    return _write
