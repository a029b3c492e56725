# errors.py - exceptions raised by the predictor
#
# A word missing from a trie is not an error: lookups return None for that.


class TriePredictorError(Exception):
    """Base class for errors raised by trie_predictor."""


class UnreadableSourceError(TriePredictorError, OSError):
    """A corpus or command file could not be opened or read."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Unable to open file {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
