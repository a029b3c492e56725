# tests/test_trie_builder.py - insertion and corpus building
from collections import Counter

import pytest

from trie_predictor.core.errors import TriePredictorError, UnreadableSourceError
from trie_predictor.core.trie import TrieNode, all_words, find_node
from trie_predictor.core.trie_builder import (
    build_trie,
    build_trie_from_file,
    insert_phrase,
    insert_word,
)


def test_insert_word_returns_terminal_node():
    root = TrieNode()
    node = insert_word(root, "cat")
    assert node is root.children["c"].children["a"].children["t"]
    assert node.count == 1
    assert insert_word(root, "cat") is node
    assert node.count == 2


def test_insert_word_shares_prefix_nodes():
    root = TrieNode()
    insert_word(root, "car")
    insert_word(root, "cat")
    assert root.child_count() == 1
    assert root.children["c"].children["a"].child_count() == 2
    assert root.children["c"].children["a"].count == 0


def test_insert_word_empty_or_missing_node():
    assert insert_word(TrieNode(), "") is None
    assert insert_word(None, "cat") is None


@pytest.mark.parametrize("word", ["Cat", "don't", "a b", "naïve"])
def test_insert_word_rejects_unnormalized(word):
    with pytest.raises(ValueError):
        insert_word(TrieNode(), word)


def test_insert_phrase_links_followers():
    root = TrieNode()
    insert_phrase(root, "the cat sat")
    insert_phrase(root, "the dog sat")

    the = find_node(root, "the")
    assert the.count == 2
    assert all_words(the.follow) == [("cat", 1), ("dog", 1)]
    assert all_words(find_node(root, "cat").follow) == [("sat", 1)]
    assert find_node(root, "sat").follow is None


def test_insert_phrase_returns_word_count():
    root = TrieNode()
    assert insert_phrase(root, "Hello, World!") == 2
    assert all_words(find_node(root, "hello").follow) == [("world", 1)]


def test_insert_phrase_empty_is_noop():
    root = TrieNode()
    assert insert_phrase(root, "") == 0
    assert insert_phrase(root, "  ... 42 !!\n") == 0
    assert not root.has_children()


def test_insert_phrase_none_root():
    assert insert_phrase(None, "a b") == 0


def test_pairs_do_not_cross_lines():
    root = build_trie(["a b", "c d"])
    assert find_node(root, "b").follow is None
    assert all_words(find_node(root, "a").follow) == [("b", 1)]


def test_whitespace_runs_and_tabs_separate_words():
    root = build_trie(["one   two\tthree"])
    assert all_words(find_node(root, "one").follow) == [("two", 1)]
    assert all_words(find_node(root, "two").follow) == [("three", 1)]


def test_repeated_word_follows_itself():
    root = build_trie(["la la la"])
    la = find_node(root, "la")
    assert la.count == 3
    assert all_words(la.follow) == [("la", 2)]
    # follow tries are separate structures with their own followers
    assert la.follow.children["l"].children["a"].follow is None


def test_build_trie_contains_exactly_corpus_words():
    corpus = ["The quick fox", "the lazy dog.", "quick, quick!"]
    root = build_trie(corpus)
    expected = Counter(w for line in corpus for w in line.lower().replace(".", "").replace(",", "").replace("!", "").split())
    assert all_words(root) == sorted(expected.items())


def test_build_trie_from_file(write_lines):
    path = write_lines("corpus.txt", ["i like cats", "", "i like dogs"])
    root = build_trie_from_file(path)
    assert all_words(find_node(root, "like").follow) == [("cats", 1), ("dogs", 1)]


def test_build_trie_logs_summary(isolated_log):
    build_trie(["a b", "c"])
    with open(isolated_log.path, encoding="utf-8") as f:
        text = f.read()
    assert "built trie: 2 phrases, 3 words, 3 distinct" in text
    assert "build_trie done" in text


def test_build_trie_from_missing_file(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(UnreadableSourceError) as info:
        build_trie_from_file(missing)
    assert info.value.path == missing
    assert isinstance(info.value, OSError)
    assert isinstance(info.value, TriePredictorError)
    assert "Unable to open file" in str(info.value)


def test_build_trie_from_undecodable_file(tmp_path):
    p = tmp_path / "bin.txt"
    p.write_bytes(b"\xff\xfe\xfa hello")
    with pytest.raises(UnreadableSourceError):
        build_trie_from_file(str(p), encoding="utf-8")
