# trie_predictor/context/__init__.py
# text normalization applied before words reach the trie

from .normalizer import normalize_text, normalize_word  # lowercase + strip non-letters
from .tokenizer import simple_tokenize  # split a normalized phrase into words

__all__ = [
    "normalize_text",
    "normalize_word",
    "simple_tokenize",
]
