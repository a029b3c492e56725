# config_manager.py - JSON config manager

import json
import os

from rich.console import Console
from rich.table import Table
from rich import box

from trie_predictor.utils.logger_utils import check_level, log

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = {
            "log_level": "INFO",
            "echo_log": False,
            "log_path": "",  # empty -> logger default
            "encoding": "utf-8",  # corpus/command file encoding
            "prompt": ">>",
            "show_timing": False,
        }
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                log.warning(f"config {self.path} unreadable, using defaults: {e}")
                return
            if not isinstance(loaded, dict):
                log.warning(f"config {self.path} is not a JSON object, using defaults")
                return
            for key, val in loaded.items():
                if key not in self.data:
                    log.warning(f"config {self.path}: ignoring unknown key {key!r}")
                    continue
                try:
                    self.data[key] = self._coerce(key, val)
                except (TypeError, ValueError) as e:
                    log.warning(
                        f"config {self.path}: bad value for {key!r} ({e}), keeping {self.data[key]!r}"
                    )
        else:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def show(self, console=None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        console.print(table)

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = self._coerce(key, val)
        self.save()

    def _coerce(self, key, val):
        """Convert val to the type of the default for key."""
        current = self.data[key]
        if isinstance(current, bool):
            return _to_bool(val)
        if key == "log_level":
            return check_level(val)
        return type(current)(val)


def _to_bool(val):
    if isinstance(val, bool):
        return val
    text = str(val).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {val!r}")
