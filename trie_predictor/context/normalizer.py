# trie_predictor/context/normalizer.py
import re

# the trie only stores ascii a-z, so anything else is dropped before insertion
_strip_re = re.compile(r"[^a-z\s]")
_letters_re = re.compile(r"[^a-z]")


def normalize_text(s: str) -> str:
    """
    Lowercase a phrase and drop every character that is neither a letter
    nor whitespace. Runs of whitespace collapse to a single space.
    """
    if not s:
        return ""
    s = _strip_re.sub("", s.lower())
    return " ".join(s.split())


def normalize_word(s: str) -> str:
    """Lowercase a single word and keep letters only ("Don't!" -> "dont")."""
    if not s:
        return ""
    return _letters_re.sub("", s.lower())
