import random

import pytest

from dsalabs.threaded_tree import ThreadedTree
from dsalabs.tree_timing import (
    LETTERS,
    generate_word,
    time_delete,
    time_insert,
    time_maximum,
    time_search,
    time_traversal,
)


@pytest.mark.parametrize("length", [1, 5, 18])
def test_generate_word_length_and_alphabet(length):
    word = generate_word(length, random.Random(1))
    assert len(word) == length
    assert set(word) <= set(LETTERS)


def test_generate_word_is_deterministic_for_seed():
    rng = random.Random(3)
    words = [generate_word(12, rng) for _ in range(5)]
    replay = random.Random(3)
    assert [generate_word(12, replay) for _ in range(5)] == words
    assert all(len(word) == 12 for word in words)
    assert len(set(words)) > 1


def test_generated_words_never_contain_zero():
    word = generate_word(2000, random.Random(5))
    assert "0" not in word
    assert set(word) == set(LETTERS)


@pytest.mark.parametrize(
    "measure", [time_insert, time_delete, time_search, time_maximum]
)
def test_measurements_leave_tree_empty(measure):
    tree = ThreadedTree()
    tree.insert("keep", 1)
    elapsed = measure(tree, 50, 5, random.Random(2))
    assert elapsed >= 0
    assert tree.maximum() is None


def test_traversal_leaves_tree_empty():
    tree = ThreadedTree()
    elapsed = time_traversal(tree, 60, random.Random(4))
    assert elapsed >= 0
    assert tree.root is None