"""Binary search tree of string keys with versions and predecessor threads."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Iterator, TextIO

_KEY_WIDTH = 255
_GAP = 4
_UINT_MODULUS = 2**32


@dataclass(eq=False, repr=False)
class Node:
    """Tree node; ``prev`` threads to the in-order predecessor."""

    key: str
    info: int
    release: int = 1
    left: Node | None = None
    right: Node | None = None
    parent: Node | None = None
    prev: Node | None = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, release={self.release}, info={self.info})"


def successor(node: Node | None) -> Node | None:
    """Return the in-order successor of ``node``, or None for the last one."""
    if node is None:
        return None
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    child, up = node, node.parent
    while up is not None and child is up.right:
        child, up = up, up.parent
    return up


class ThreadedTree:
    """Unbalanced tree allowing repeated keys, each copy numbered by release."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def _find_place(self, key: str) -> tuple[Node | None, int]:
        """Return the would-be parent of ``key`` and the release it would get."""
        node, parent = self.root, None
        release = 0
        while node is not None:
            parent = node
            if key == node.key:
                release = max(release, node.release)
            node = node.left if key < node.key else node.right
        return parent, release + 1

    def insert(self, key: str, info: int) -> Node:
        """Add a node for ``key``; equal keys go to the right of older copies."""
        parent, release = self._find_place(key)
        node = Node(key, info, release)
        if parent is None:
            self.root = node
            return node
        node.parent = parent
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node

        child, up = node, parent
        while up is not None and child is up.left:
            child, up = up, up.parent
        node.prev = up

        child, up = node, parent
        while up is not None and child is up.right:
            child, up = up, up.parent
        if up is not None:
            up.prev = node
        return node

    def search(self, key: str) -> list[Node]:
        """Return every node with ``key``, the latest in order first."""
        node, found = self.root, None
        while node is not None:
            if key == node.key:
                found = node
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                node = node.right
        return list(takewhile(lambda item: item.key == key, self._walk_back(found)))

    @staticmethod
    def _walk_back(node: Node | None) -> Iterator[Node]:
        while node is not None:
            yield node
            node = node.prev

    def delete(self, key: str) -> tuple[str, int, int]:
        """Remove the earliest copy of ``key``; return its key, release and info."""
        nodes = self.search(key)
        if not nodes:
            raise KeyError(key)
        target = nodes[-1]
        removed = (target.key, target.release, target.info)

        if target.left is None or target.right is None:
            victim = target
        else:
            victim = target.right
            while victim.left is not None:
                victim = victim.left

        following = successor(victim)
        if following is not None:
            following.prev = victim.prev

        child = victim.left if victim.left is not None else victim.right
        if child is not None:
            child.parent = victim.parent
        if victim.parent is None:
            self.root = child
        elif victim.parent.left is victim:
            victim.parent.left = child
        else:
            victim.parent.right = child

        if victim is not target:
            target.key = victim.key
            target.info = victim.info
            target.release = victim.release
        return removed

    def maximum(self) -> Node | None:
        """Return the rightmost node, or None for an empty tree."""
        node, last = self.root, None
        while node is not None:
            last = node
            node = node.right
        return last

    def max_nodes(self) -> list[Node]:
        """Return every node carrying the largest key, the latest first."""
        top = self.maximum()
        if top is None:
            return []
        return list(takewhile(lambda item: item.key == top.key, self._walk_back(top)))

    def reverse(self) -> Iterator[Node]:
        """Yield all nodes in descending key order by following the threads."""
        return self._walk_back(self.maximum())

    def range(self, first: str, last: str) -> list[Node]:
        """Return nodes with ``first <= key <= last`` in descending order."""
        if self.root is None:
            return []
        parent, _ = self._find_place(last)
        start = parent if last >= parent.key else parent.prev
        return list(takewhile(lambda item: item.key >= first, self._walk_back(start)))

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
        for key in tokens:
            if len(key) > _KEY_WIDTH:
                raise ValueError(f"key too long: {key[:20]}...")
            try:
                text = next(tokens)
            except StopIteration:
                raise ValueError(f"missing info for key {key!r}") from None
            try:
                info = int(text) % _UINT_MODULUS
            except ValueError:
                raise ValueError(f"bad info value {text!r}") from None
            self.insert(key, info)
            count += 1
        return count

    @staticmethod
    def _label(node: Node) -> str:
        return f'"{node.key} v{node.release}"'

    def to_dot(self) -> str:
        """Render the tree and its threads in Graphviz dot syntax."""
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
            if node is not self.root and node.parent is not None:
                parts.append(f"\t{self._label(node.parent)} -> {self._label(node)};\n")
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        for node in self.reverse():
            if node.prev is not None:
                parts.append(
                    f"\t{self._label(node)} -> {self._label(node.prev)}"
                    ' [color="red", constraint=false];\n'
                )
        parts.append("}\n")
        return "".join(parts)

    def format_sideways(self) -> str:
        """Render the tree rotated left: right subtrees above, indented by depth."""
        if self.root is None:
            return "void tree\n"
        parts = ["\n"]
        pending: list[tuple[Node, int]] = []
        node, depth = self.root, 0
        while pending or node is not None:
            while node is not None:
                pending.append((node, depth))
                node, depth = node.right, depth + 1
            current, depth = pending.pop()
            parts.append(" " * (depth * _GAP) + current.key + "\n")
            node, depth = current.left, depth + 1
        return "".join(parts)