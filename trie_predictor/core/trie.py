# trie.py
# Letter trie where every word node can own a nested "follow" trie holding
# the words seen right after it. The nested tries are plain TrieNode roots,
# so everything here works on both levels.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from trie_predictor.context.normalizer import normalize_word

Word = str
Count = int
Candidate = Tuple[Word, Count]


class TrieNode:
    """
    A single node in the Trie.
    children: letter -> TrieNode, only "a".."z"
    count: how many times the word ending here was inserted (0 = not a word)
    follow: root of the trie of words that followed this word, or None
    """

    __slots__ = ("children", "count", "follow")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.count = 0
        self.follow: Optional[TrieNode] = None

    @property
    def is_word(self) -> bool:
        return self.count > 0

    def has_children(self) -> bool:
        return bool(self.children)

    def child_count(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return (
            f"TrieNode(count={self.count}, children={''.join(sorted(self.children))!r}, "
            f"follow={'yes' if self.follow is not None else 'no'})"
        )


@dataclass(frozen=True)
class LookupResult:
    """Answer to "does this word occur and what follows it"."""
    word: Word
    count: Count
    follows: List[Candidate] = field(default_factory=list)


# lookup -------------------------------------------------------------
def find_node(root: Optional[TrieNode], word: str) -> Optional[TrieNode]:
    """
    Walk `root` along the letters of `word` (lowercased, non-letters dropped).
    Returns the node at the end of the path, or None when any letter is
    missing or nothing is left after normalization.
    """
    if root is None or not word:
        return None
    key = normalize_word(word)
    if not key:
        return None

    node = root
    for ch in key:
        nxt = node.children.get(ch)
        if nxt is None:
            return None
        node = nxt
    return node


def lookup(root: Optional[TrieNode], word: str) -> Optional[LookupResult]:
    """
    Resolve `word` and list its followers.
    The path may end on a prefix-only node; its count is then 0 and it has
    no followers. Returns None when the path does not exist.
    """
    node = find_node(root, word)
    if node is None:
        return None
    return LookupResult(
        word=normalize_word(word),
        count=node.count,
        follows=list(collect_words(node.follow)),
    )


# traversal ---------------------------------------------------------
def collect_words(node: Optional[TrieNode], prefix: str = "") -> Iterator[Candidate]:
    """
    DFS yielding (word, count) for every word node under `node`.
    Letters are visited in ascending order so the output is sorted.
    A fresh call restarts the walk; nothing is mutated.
    """
    if node is None:
        return
    # explicit stack: word length must not be bounded by the recursion limit
    stack = [(node, prefix)]
    while stack:
        cur, word = stack.pop()
        if cur.count > 0:
            yield word, cur.count
        for ch in sorted(cur.children, reverse=True):
            stack.append((cur.children[ch], word + ch))


def all_words(root: Optional[TrieNode]) -> List[Candidate]:
    """All words of a trie with their counts, in alphabetical order."""
    return list(collect_words(root))


def word_count(root: Optional[TrieNode]) -> int:
    """Number of distinct words. (O(N) walk, for inspection)"""
    return sum(1 for _ in collect_words(root))
