# logger_utils.py - logging messages and timing metrics for the predictor

import os
import time
from datetime import datetime
from typing import Optional

from rich.console import Console

# Directory where log files are stored, overridable for tests/deployments
LOG_DIR = os.environ.get("TRIE_PREDICTOR_LOG_DIR", "logs")

# Path to the default log file, can be overriden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "trie_predictor.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    STYLES = {
        "DEBUG": "bright_black",
        "INFO": "blue",
        "WARNING": "yellow",
        "ERROR": "bold red",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        echo: bool = False,
        console: Optional[Console] = None,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.level = check_level(level)
        self.echo = echo
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def configure(
        self,
        path: Optional[str] = None,
        level: Optional[str] = None,
        echo: Optional[bool] = None,
    ) -> None:
        """Update settings in place (used by the CLI once Config is loaded)."""
        if path:
            self.path = path
        if level is not None:
            self.level = check_level(level)
        if echo is not None:
            self.echo = echo

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Messages below the configured level are dropped.
        """
        level = check_level(level)
        if not self.enabled(level):
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if self.echo:
            self.console.print(line, style=self.STYLES[level], markup=False)

    # Public logging methods
    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts).
        Example line: [2026-10-19 12:45:02] INFO    | build_trie done: 0.123s
        """
        self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("build_trie"):
                do_some_work()
        The duration is recorded as a metric when the block exits.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, logger: Log, label: str):
        self.logger = logger
        self.label = label
        self.start = time.perf_counter()
        self.duration = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.duration = round(time.perf_counter() - self.start, 3)
        self.logger.metric(f"{self.label} done", self.duration, "s")


def check_level(level: str) -> str:
    name = str(level).upper()
    if name == "WARN":
        name = "WARNING"
    if name not in LEVELS:
        raise ValueError(f"unknown log level: {level!r}")
    return name


# shared instance used across the package
log = Log()
