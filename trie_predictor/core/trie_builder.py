# trie_builder.py
# Builds the main trie from a corpus and links each word to the words that
# follow it inside the same line.

from __future__ import annotations
from typing import Iterable, Optional

from trie_predictor.context.tokenizer import simple_tokenize
from trie_predictor.core.errors import UnreadableSourceError
from trie_predictor.core.trie import TrieNode, word_count
from trie_predictor.utils.logger_utils import log

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


def insert_word(node: Optional[TrieNode], word: str) -> Optional[TrieNode]:
    """
    Insert an already normalized word below `node`, creating missing nodes,
    and bump the count of its last node.
    Returns that terminal node, or None for a missing node or empty word.
    Raises ValueError on characters outside a-z.
    """
    if node is None or not word:
        return None

    for ch in word:
        if ch not in _LETTERS:
            raise ValueError(f"cannot insert {word!r}: {ch!r} is not a lowercase letter")
        child = node.children.get(ch)
        if child is None:
            child = node.children[ch] = TrieNode()
        node = child
    node.count += 1
    return node


def insert_phrase(root: Optional[TrieNode], phrase: str) -> int:
    """
    Insert every word of one line into `root` and record each consecutive
    pair (prev, word) in prev's follow trie.
    Returns the number of words inserted (0 for an empty/punctuation-only line).
    """
    if root is None:
        return 0

    words = simple_tokenize(phrase)
    previous: Optional[TrieNode] = None
    for word in words:
        if previous is not None:
            if previous.follow is None:
                previous.follow = TrieNode()
            insert_word(previous.follow, word)
        previous = insert_word(root, word)
    return len(words)


def build_trie(lines: Iterable[str]) -> TrieNode:
    """Create a root and feed it every line of the corpus."""
    root = TrieNode()
    phrases = 0
    tokens = 0
    with log.time_block("build_trie"):
        for line in lines:
            inserted = insert_phrase(root, line)
            if inserted:
                phrases += 1
                tokens += inserted
    log.info(f"built trie: {phrases} phrases, {tokens} words, {word_count(root)} distinct")
    return root


def build_trie_from_file(path: str, encoding: str = "utf-8") -> TrieNode:
    """
    Build a trie from a text file, one phrase per line.
    Raises UnreadableSourceError if the file cannot be opened or decoded.
    """
    log.info(f"reading corpus {path}")
    try:
        with open(path, "r", encoding=encoding) as f:
            return build_trie(f)
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"corpus {path} unreadable: {e}")
        raise UnreadableSourceError(path, str(e)) from e
