"""
trie_predictor.core

The trie-of-tries model and the algorithms that build and walk it:
 - TrieNode, find_node, lookup, collect_words (trie.py)
 - insert_word, insert_phrase, build_trie (trie_builder.py)
 - most_frequent_word, predict, MarkovPredictor (markov_predictor.py)
"""

from .errors import TriePredictorError, UnreadableSourceError
from .trie import TrieNode, LookupResult, find_node, lookup, collect_words, all_words
from .trie_builder import insert_word, insert_phrase, build_trie, build_trie_from_file
from .markov_predictor import MarkovPredictor, most_frequent_word, predict

__all__ = [
    "TriePredictorError",
    "UnreadableSourceError",
    "TrieNode",
    "LookupResult",
    "find_node",
    "lookup",
    "collect_words",
    "all_words",
    "insert_word",
    "insert_phrase",
    "build_trie",
    "build_trie_from_file",
    "MarkovPredictor",
    "most_frequent_word",
    "predict",
]
