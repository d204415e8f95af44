"""Undirected weighted graph stored as adjacency lists in a string hash table."""

from __future__ import annotations

from dataclasses import dataclass

from dsalabs.graph_containers import FifoQueue
from dsalabs.string_table import DuplicateKey, StringTable

_INITIAL_SIZE = 23
_INF = 32767 - 100


class GraphError(Exception):
    """Raised when a graph operation cannot be carried out."""


@dataclass
class Edge:
    """One adjacency entry: the neighbouring node and the edge weight."""

    drain: str
    weight: int


def _find(edges: list[Edge], name: str) -> Edge | None:
    return next((edge for edge in edges if edge.drain == name), None)


def _remove_first(edges: list[Edge], name: str) -> bool:
    edge = _find(edges, name)
    if edge is None:
        return False
    edges.remove(edge)
    return True


class Graph:
    """Nodes named by strings; each edge is listed at both of its ends."""

    def __init__(self) -> None:
        self.table = StringTable(_INITIAL_SIZE)

    def _edges(self, node: str) -> list[Edge]:
        try:
            index = self.table.search(node)
        except KeyError:
            raise GraphError(f"node {node!r} doesn't exist") from None
        return self.table.slots[index].value

    def __contains__(self, node: object) -> bool:
        return node in self.table

    def __len__(self) -> int:
        return len(self.table)

    def neighbours(self, node: str) -> list[Edge]:
        """Return a copy of the adjacency list of ``node``, newest edge first."""
        return list(self._edges(node))

    def insert_node(self, node: str) -> None:
        """Add a node with no edges."""
        try:
            self.table.insert(node, [])
        except DuplicateKey:
            raise GraphError(f"node {node!r} already exists") from None

    def delete_node(self, node: str) -> None:
        """Remove a node together with every edge touching it."""
        edges = self._edges(node)
        for edge in list(edges):
            _remove_first(self._edges(edge.drain), node)
        edges.clear()
        self.table.delete(node)

    def insert_edge(self, source: str, drain: str, weight: int) -> None:
        """Join two existing nodes; an edge between them must not exist yet."""
        drain_edges = self._edges(drain)
        source_edges = self._edges(source)
        if _find(source_edges, drain) is not None:
            raise GraphError(f"edge {source!r} -- {drain!r} already exists")
        source_edges.insert(0, Edge(drain, weight))
        drain_edges.insert(0, Edge(source, weight))

    def delete_edge(self, source: str, drain: str) -> None:
        """Remove the edge between two nodes."""
        source_edges = self._edges(source)
        drain_edges = self._edges(drain)
        if not _remove_first(source_edges, drain):
            raise GraphError(f"edge {source!r} -- {drain!r} doesn't exist")
        _remove_first(drain_edges, source)

    def rename_node(self, old: str, new: str) -> None:
        """Give a node a new name, updating the lists of its neighbours."""
        edges = self._edges(old)
        if new in self.table:
            raise GraphError(f"node {new!r} already exists")
        self.table.insert(new, edges)
        for edge in list(edges):
            back = _find(self._edges(edge.drain), old)
            if back is not None:
                back.drain = new
        self.table.delete(old)

    def change_edge(self, source: str, drain: str, weight: int) -> None:
        """Set the weight of an existing edge at both of its ends."""
        forward = _find(self._edges(source), drain)
        backward = _find(self._edges(drain), source)
        if forward is None or backward is None:
            raise GraphError(f"edge {source!r} -- {drain!r} doesn't exist")
        forward.weight = weight
        backward.weight = weight

    def clean(self) -> None:
        """Remove every node and edge."""
        self.table.clean()

    def format(self) -> str:
        """Render each node with its neighbours and edge weights."""
        slots = list(self.table.occupied())
        if not slots:
            raise GraphError("empty graph")
        parts = []
        for slot in slots:
            parts.append(f"\nnode: {slot.key}, neighbors: ")
            parts.extend(f"{edge.drain} (weight = {edge.weight}), " for edge in slot.value)
        parts.append("\n")
        return "".join(parts)

    def to_dot(self) -> str:
        """Render the graph in Graphviz dot syntax, each edge once."""
        slots = list(self.table.occupied())
        parts = ["graph G {\n"]
        parts.extend(f"\t{slot.key};\n" for slot in slots)
        for slot in slots:
            for edge in slot.value:
                if slot.key >= edge.drain:
                    parts.append(f'\t{slot.key} -- {edge.drain} [label="{edge.weight}"];\n')
        parts.append("}\n")
        return "".join(parts)

    def within_handshakes(self, node: str, hands: int) -> list[str]:
        """Return the nodes at 1 to ``hands`` edges from ``node``, in visiting order."""
        self._edges(node)
        dist = {node: 0}
        queue: FifoQueue[str] = FifoQueue()
        queue.put(node)
        found = []
        while queue:
            current = queue.get()
            if dist[current] < hands:
                for edge in self._edges(current):
                    if edge.drain not in dist:
                        dist[edge.drain] = dist[current] + 1
                        queue.put(edge.drain)
            if dist[current] != 0:
                found.append(current)
        return found

    def component(self, node: str, visited: set[str] | None = None) -> list[str]:
        """Return the nodes reached from ``node`` over positive edges, in visiting order.

        Every reached node is added to ``visited``.
        """
        if visited is None:
            visited = set()
        self._edges(node)
        seen = {node}
        visited.add(node)
        queue: FifoQueue[str] = FifoQueue()
        queue.put(node)
        order = []
        while queue:
            current = queue.get()
            for edge in self._edges(current):
                if edge.drain not in seen and edge.weight > 0:
                    seen.add(edge.drain)
                    visited.add(edge.drain)
                    queue.put(edge.drain)
            order.append(current)
        return order

    def groups(self) -> list[list[str]]:
        """Split the nodes into groups joined by positive edges."""
        visited: set[str] = set()
        result = []
        for slot in list(self.table.occupied()):
            if slot.key not in visited:
                result.append(self.component(slot.key, visited))
        return result

    def shortest_path(self, source: str, drain: str) -> tuple[int, list[tuple[str, int]]]:
        """Return the total weight and the path, each node with its distance.

        Raises GraphError on a negative cycle or when ``drain`` is unreachable.
        """
        self._edges(source)
        self._edges(drain)
        names = [slot.key for slot in self.table.occupied()]
        dist = {name: _INF for name in names}
        pred: dict[str, str] = {}
        dist[source] = 0
        for _ in range(len(self.table) - 1):
            for u in names:
                if dist[u] == _INF:
                    continue
                for edge in self._edges(u):
                    if dist[edge.drain] > dist[u] + edge.weight:
                        dist[edge.drain] = dist[u] + edge.weight
                        pred[edge.drain] = u
        for u in names:
            for edge in self._edges(u):
                if dist[edge.drain] > dist[u] + edge.weight:
                    raise GraphError("negative cycle")
        if drain not in pred:
            raise GraphError("can not find shortest path")
        path = [(drain, dist[drain])]
        current = drain
        while current in pred:
            current = pred[current]
            path.insert(0, (current, dist[current]))
        return dist[drain], path