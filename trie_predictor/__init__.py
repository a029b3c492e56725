"""
trie_predictor

Word-level predictive text built on a trie whose word nodes carry a nested
trie of the words that followed them in the corpus.
"""

from .core import (
    LookupResult,
    MarkovPredictor,
    TrieNode,
    UnreadableSourceError,
    build_trie,
    build_trie_from_file,
    collect_words,
    find_node,
    lookup,
    predict,
)

__all__ = [
    "LookupResult",
    "MarkovPredictor",
    "TrieNode",
    "UnreadableSourceError",
    "build_trie",
    "build_trie_from_file",
    "collect_words",
    "find_node",
    "lookup",
    "predict",
]

__version__ = "0.1.0"
