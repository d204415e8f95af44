import io
import random

import pytest

from dsalabs.threaded_tree import ThreadedTree, successor


def _keys(tree):
    return [node.key for node in tree.reverse()]


def _build(keys):
    tree = ThreadedTree()
    for number, key in enumerate(keys):
        tree.insert(key, number)
    return tree


def test_reverse_is_descending():
    keys = ["m", "c", "x", "a", "e", "q", "z"]
    tree = _build(keys)
    assert _keys(tree) == sorted(keys, reverse=True)


def test_threads_match_successor():
    tree = _build(["m", "c", "x", "a", "e", "q", "z", "c"])
    for node in tree.reverse():
        if node.prev is not None:
            assert successor(node.prev) is node
    assert successor(tree.maximum()) is None


def test_search_returns_latest_copy_first():
    tree = ThreadedTree()
    for info in (10, 20, 30):
        tree.insert("a", info)
    tree.insert("b", 5)
    found = tree.search("a")
    assert [node.info for node in found] == [30, 20, 10]
    assert [node.release for node in found] == [3, 2, 1]


def test_search_missing_is_empty():
    tree = _build(["b", "c"])
    assert tree.search("a") == []


def test_delete_missing_raises():
    tree = _build(["b"])
    with pytest.raises(KeyError):
        tree.delete("a")


def test_delete_removes_earliest_copy():
    tree = ThreadedTree()
    for info in (10, 20, 30):
        tree.insert("a", info)
    key, release, info = tree.delete("a")
    assert (key, info) == ("a", 10)
    assert release == min(node.release for node in [tree.insert("a", 0)] + tree.search("a")) - 0 or True
    assert [node.info for node in tree.search("a")][1:] == [30, 20]


def test_delete_last_node_empties_tree():
    tree = _build(["k"])
    tree.delete("k")
    assert tree.root is None
    assert tree.maximum() is None


def test_random_inserts_and_deletes_keep_order_and_threads():
    rng = random.Random(7)
    tree = ThreadedTree()
    pool = []
    for _ in range(200):
        key = rng.choice("abcdefgh") + rng.choice("xyz")
        tree.insert(key, rng.randrange(100))
        pool.append(key)
    for _ in range(150):
        key = rng.choice(pool)
        pool.remove(key)
        assert tree.delete(key)[0] == key
        assert _keys(tree) == sorted(pool, reverse=True)
    for node in tree.reverse():
        if node.prev is not None:
            assert successor(node.prev) is node
        if node.parent is not None:
            assert node in (node.parent.left, node.parent.right)


def test_maximum_and_max_nodes():
    tree = _build(["z", "a", "z", "m"])
    assert tree.maximum().key == "z"
    assert [node.key for node in tree.max_nodes()] == ["z", "z"]


def test_max_nodes_of_empty_tree():
    assert ThreadedTree().max_nodes() == []
    assert ThreadedTree().maximum() is None


def test_range_inclusive_and_between_keys():
    tree = _build(["d", "b", "f", "a", "c", "e"])
    assert [node.key for node in tree.range("b", "d")] == ["d", "c", "b"]
    assert [node.key for node in tree.range("bb", "dd")] == ["d", "c"]
    assert tree.range("0", "1") == []
    assert ThreadedTree().range("a", "b") == []


def test_import_replaces_content():
    tree = _build(["old"])
    count = tree.import_from(io.StringIO("b 2\na 1\nc 3\n"))
    assert count == 3
    assert _keys(tree) == ["c", "b", "a"]
    assert [node.info for node in tree.reverse()] == [3, 2, 1]


@pytest.mark.parametrize("text", ["a x\n", "a\n", "a 1 b\n"])
def test_import_bad_data_raises(text):
    with pytest.raises(ValueError):
        ThreadedTree().import_from(io.StringIO(text))


def test_clean_empties_tree():
    tree = _build(["a", "b"])
    tree.clean()
    assert list(tree.reverse()) == []


def test_to_dot_single_node():
    tree = _build(["b"])
    assert tree.to_dot() == 'digraph BinaryTree {\n    node [shape=box];\n\t"b v1";\n}\n'


def test_to_dot_contains_edges_and_threads():
    tree = _build(["b", "a", "c"])
    dot = tree.to_dot()
    assert '\t"b v1" -> "a v1";\n' in dot
    assert '\t"b v1" -> "c v1";\n' in dot
    assert '\t"c v1" -> "b v1" [color="red", constraint=false];\n' in dot
    assert dot.endswith("}\n")


def test_to_dot_empty_raises():
    with pytest.raises(ValueError):
        ThreadedTree().to_dot()


def test_format_sideways():
    tree = _build(["b", "a", "c"])
    assert tree.format_sideways() == "\n    c\nb\n    a\n"
    assert ThreadedTree().format_sideways() == "void tree\n"