# trie_predictor/utils/__init__.py
# logging and configuration shared by the core and the CLI

from .logger_utils import Log, log
from .config_manager import Config

__all__ = ["Log", "log", "Config"]
