# trie_predictor/context/tokenizer.py
# whitespace tokenizer over normalized text

from typing import List

from .normalizer import normalize_text


def simple_tokenize(s: str) -> List[str]:
    """
    Return the list of words in a phrase after normalization.
    Tabs and newlines separate words the same way spaces do.
    """
    if not s:
        return []
    return normalize_text(s).split()
