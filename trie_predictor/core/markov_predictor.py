# markov_predictor.py
# first-order Markov next-word prediction over a trie of follow tries.

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional

from trie_predictor.core.trie import (
    Candidate,
    LookupResult,
    TrieNode,
    collect_words,
    find_node,
    lookup,
    word_count,
)
from trie_predictor.core.trie_builder import (
    build_trie_from_file,
    insert_phrase,
)
from trie_predictor.utils.logger_utils import log


def most_frequent_word(node: Optional[TrieNode]) -> Optional[Candidate]:
    """
    Best follower of the word ending at `node`: highest count in its follow
    trie. Only a strictly greater count replaces the current best, and the
    walk is alphabetical, so ties go to the alphabetically first word.
    Returns None when the node has no follow trie.
    """
    if node is None or node.follow is None:
        return None

    best: Optional[Candidate] = None
    for word, count in collect_words(node.follow):
        if best is None or count > best[1]:
            best = (word, count)
    return best


def predict(root: Optional[TrieNode], seed: str, steps: int) -> List[str]:
    """
    Chain up to `steps` words after `seed`, each the best follower of the
    previous one. Every predicted word is looked up again in `root` so its
    own follow trie drives the next step.
    Stops early (shorter list, not an error) when the seed is unknown or a
    word has no followers.
    """
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")

    out: List[str] = []
    node = find_node(root, seed)
    while node is not None and len(out) < steps:
        best = most_frequent_word(node)
        if best is None:
            break
        out.append(best[0])
        node = find_node(root, best[0])
    return out


class MarkovPredictor:
    """
    Predictive-text model built from a corpus.
      - train_sentence / train_many / train_file ingest lines
      - lookup(word) -> LookupResult or None
      - predict(seed, steps) -> list of words
      - top_next(prev, topn) -> ranked followers
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    @property
    def root(self) -> TrieNode:
        return self._root

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train_sentence(self, text: str) -> int:
        return insert_phrase(self._root, text)

    def train_many(self, sentences: Iterable[str]) -> int:
        total = 0
        for s in sentences:
            total += self.train_sentence(s)
        return total

    def train_file(self, path: str, encoding: str = "utf-8") -> None:
        """Replace the model with one built from `path`."""
        self._root = build_trie_from_file(path, encoding=encoding)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def lookup(self, word: str) -> Optional[LookupResult]:
        res = lookup(self._root, word)
        if res is None:
            log.debug(f"lookup miss: {word!r}")
        return res

    def predict(self, seed: str, steps: int) -> List[str]:
        words = predict(self._root, seed, steps)
        log.debug(f"predict {seed!r} x{steps} -> {words}")
        return words

    def top_next(self, prev: str, topn: int = 5) -> List[Candidate]:
        """Followers of `prev` ranked by count, then alphabetically."""
        node = find_node(self._root, prev)
        if node is None:
            return []
        ranked = sorted(collect_words(node.follow), key=lambda t: (-t[1], t[0]))
        return ranked[:topn]

    def words(self) -> Iterator[Candidate]:
        return collect_words(self._root)

    def __contains__(self, word: str) -> bool:
        node = find_node(self._root, word)
        return node is not None and node.count > 0

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def vocabulary_size(self) -> int:
        return word_count(self._root)

    def clear(self) -> None:
        """Drop the whole structure at once."""
        self._root = TrieNode()
