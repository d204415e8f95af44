"""Height-balanced search tree of unsigned keys, each holding several infos."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TextIO

_GAP = 4
_UINT_MODULUS = 2**32


def distance(a: int, b: int) -> int:
    """Return the absolute difference of two unsigned numbers."""
    return a - b if a >= b else b - a


@dataclass(eq=False, repr=False)
class Node:
    """Tree node; ``infos`` lists the values stored under the key, newest first."""

    key: int
    infos: list[int] = field(default_factory=list)
    left: Node | None = None
    right: Node | None = None
    height: int = 1

    @property
    def count(self) -> int:
        """Number of values stored under the key."""
        return len(self.infos)

    @property
    def balance(self) -> int:
        """Height of the right subtree minus height of the left one."""
        return _height(self.right) - _height(self.left)

    def __repr__(self) -> str:
        return f"Node(key={self.key}, infos={self.infos})"


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _turn_left(axis: Node) -> Node:
    top = axis.right
    assert top is not None
    axis.right = top.left
    top.left = axis
    _update(axis)
    _update(top)
    return top


def _turn_right(axis: Node) -> Node:
    top = axis.left
    assert top is not None
    axis.left = top.right
    top.right = axis
    _update(axis)
    _update(top)
    return top


def _rebalance(node: Node) -> Node:
    _update(node)
    if node.balance > 1:
        assert node.right is not None
        if node.right.balance < 0:
            node.right = _turn_right(node.right)
        return _turn_left(node)
    if node.balance < -1:
        assert node.left is not None
        if node.left.balance > 0:
            node.left = _turn_left(node.left)
        return _turn_right(node)
    return node


class AvlTree:
    """Balanced tree; a repeated key adds another value to the existing node."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, key: int, info: int) -> Node:
        """Store ``info`` under ``key`` and return the node holding it."""
        existing = self.search(key)
        if existing is not None:
            existing.infos.insert(0, info)
            return existing
        node = Node(key, [info])
        self.root = self._insert(self.root, node)
        return node

    def _insert(self, current: Node | None, node: Node) -> Node:
        if current is None:
            return node
        if node.key < current.key:
            current.left = self._insert(current.left, node)
        else:
            current.right = self._insert(current.right, node)
        return _rebalance(current)

    def delete(self, key: int, number: int = 1) -> int:
        """Remove the ``number``-th value (from 1, newest first) stored under ``key``.

        The node goes away with its last value. Returns the removed value.
        """
        if number == 0:
            raise ValueError("version number must be positive")
        node = self.search(key)
        if node is None:
            raise KeyError(key)
        if number > node.count:
            raise ValueError(f"key {key} has only {node.count} version(s)")
        if node.count > 1:
            return node.infos.pop(number - 1)
        removed = node.infos[0]
        self.root = self._remove(self.root, key)
        return removed

    def _remove(self, node: Node | None, key: int) -> Node | None:
        if node is None:
            raise KeyError(key)
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            follower = node.right
            while follower.left is not None:
                follower = follower.left
            node.key, node.infos = follower.key, follower.infos
            node.right = self._remove_min(node.right)
        return _rebalance(node)

    def _remove_min(self, node: Node) -> Node | None:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return _rebalance(node)

    def search(self, key: int) -> Node | None:
        """Return the node with ``key``, or None."""
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def closest(self, target: int) -> Node | None:
        """Return the node whose key is nearest to ``target``.

        A node with exactly ``target`` is skipped in favour of its nearest
        neighbour, the smaller one on a tie.
        """
        node = self.root
        best: Node | None = None
        best_distance = 0
        path: list[Node] = []
        while node is not None:
            path.append(node)
            if node.key == target:
                return self._nearest_neighbour(path)
            gap = distance(node.key, target)
            if best is None or best_distance >= gap:
                best, best_distance = node, gap
            node = node.left if target < node.key else node.right
        return best

    @staticmethod
    def _nearest_neighbour(path: list[Node]) -> Node | None:
        node = path[-1]
        prev = _extreme(node.left, right=True)
        if prev is None:
            prev = _ancestor(path, from_right=True)
        following = _extreme(node.right, right=False)
        if following is None:
            following = _ancestor(path, from_right=False)
        if prev is None or following is None:
            return following if prev is None else prev
        if following.key - node.key >= node.key - prev.key:
            return prev
        return following

    def traverse(self, low: int = 0) -> Iterator[Node]:
        """Yield nodes with key not below ``low`` in descending key order."""
        pending: list[Node] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.right
            current = pending.pop()
            if current.key < low:
                return
            yield current
            node = current.left

    def clean(self) -> None:
        """Remove every node."""
        self.root = None

    def import_from(self, stream: TextIO) -> int:
        """Replace the contents with whitespace-separated key/info pairs.

        Returns the number of pairs read; raises ValueError on malformed data.
        """
        self.clean()
        tokens = iter(stream.read().split())
        count = 0
        for key_text in tokens:
            try:
                info_text = next(tokens)
            except StopIteration:
                raise ValueError(f"missing info for key {key_text!r}") from None
            try:
                key = int(key_text) % _UINT_MODULUS
                info = int(info_text) % _UINT_MODULUS
            except ValueError:
                raise ValueError(f"bad pair {key_text!r} {info_text!r}") from None
            self.insert(key, info)
            count += 1
        return count

    @staticmethod
    def _label(node: Node) -> str:
        return f'"{node.key} qty {node.count}"'

    def to_dot(self) -> str:
        """Render the tree in Graphviz dot syntax."""
        if self.root is None:
            raise ValueError("tree is empty")
        parts = [
            "digraph BinaryTree {\n",
            "    node [shape=box];\n",
            f"\t{self._label(self.root)};\n",
        ]
        pending = [self.root]
        while pending:
            node = pending.pop()
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
            for child in (node.left, node.right):
                if child is not None:
                    parts.append(f"\t{self._label(node)} -> {self._label(child)};\n")
        parts.append("}\n")
        return "".join(self._ordered_dot(parts))

    def _ordered_dot(self, parts: list[str]) -> list[str]:
        # Edges go out in the order: left edge, left subtree, right edge, right subtree.
        head, tail = parts[:3], parts[-1:]
        edges: list[str] = []

        def visit(node: Node) -> None:
            for child in (node.left, node.right):
                if child is not None:
                    edges.append(f"\t{self._label(node)} -> {self._label(child)};\n")
                    visit(child)

        assert self.root is not None
        visit(self.root)
        return head + edges + tail

    def format_sideways(self) -> str:
        """Render the tree rotated left: right subtrees above, indented by depth."""
        if self.root is None:
            return "void tree\n"
        parts = ["\n"]
        pending: list[tuple[Node, int]] = []
        node: Node | None = self.root
        depth = 0
        while pending or node is not None:
            while node is not None:
                pending.append((node, depth))
                node, depth = node.right, depth + 1
            current, depth = pending.pop()
            parts.append(" " * (depth * _GAP) + f"{current.key}\n")
            node, depth = current.left, depth + 1
        return "".join(parts)


def _extreme(node: Node | None, right: bool) -> Node | None:
    last = None
    while node is not None:
        last = node
        node = node.right if right else node.left
    return last


def _ancestor(path: list[Node], from_right: bool) -> Node | None:
    """Nearest ancestor having the last path node in its right (or left) subtree."""
    for child, parent in zip(reversed(path), reversed(path[:-1])):
        if (parent.right if from_right else parent.left) is child:
            return parent
    return None