"""Directed multigraph with optional reverse adjacency."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

E = TypeVar("E")

_ANY_EDGE = object()


@dataclass
class _Adjacency(Generic[E]):
    nodes: list[int] = field(default_factory=list)
    edges: list[E] = field(default_factory=list)

    def push(self, node: int, edge: E) -> None:
        self.nodes.append(node)
        self.edges.append(edge)

    def remove_if(self, predicate: Callable[[int, E], bool]) -> int:
        kept = [(n, e) for n, e in zip(self.nodes, self.edges) if not predicate(n, e)]
        removed = len(self.nodes) - len(kept)
        self.nodes = [n for n, _ in kept]
        self.edges = [e for _, e in kept]
        return removed

    def __len__(self) -> int:
        return len(self.edges)


@dataclass
class _Connections(Generic[E]):
    forward: _Adjacency[E] = field(default_factory=_Adjacency)
    backward: _Adjacency[E] = field(default_factory=_Adjacency)


class Graph(Generic[E]):
    """Directed graph over integer nodes; parallel edges are allowed.

    A reversible graph also keeps incoming connections, which makes
    ``parents``, ``incoming_edges`` and ``reverse`` available.
    """

    def __init__(self, reversible: bool = True) -> None:
        self.reversible = reversible
        self._graph: list[_Connections[E]] = []

    def __len__(self) -> int:
        return len(self._graph)

    def _require_reversible(self) -> None:
        if not self.reversible:
            raise TypeError("graph is not reversible")

    def _check_nodes(self, *nodes: int) -> None:
        for node in nodes:
            if not 0 <= node < len(self._graph):
                raise IndexError(f"node {node} not found")

    def connect(self, src: int, dst: int, edge: E) -> None:
        """Add an edge from src to dst, growing the node range as needed."""
        if src < 0 or dst < 0:
            raise ValueError("node indices must be non-negative")
        needed = max(src, dst) + 1
        while len(self._graph) < needed:
            self._graph.append(_Connections())
        self._graph[src].forward.push(dst, edge)
        if self.reversible:
            self._graph[dst].backward.push(src, edge)

    def disconnect(self, src: int, dst: int, edge: E = _ANY_EDGE) -> bool:
        """Remove edges from src to dst (only those equal to edge, if given).

        Returns whether anything was removed.
        """
        self._check_nodes(src, dst)
        if edge is _ANY_EDGE:
            def matches(other: int, _e: E, target: int) -> bool:
                return other == target
        else:
            def matches(other: int, e: E, target: int) -> bool:
                return other == target and e == edge

        removed = self._graph[src].forward.remove_if(lambda n, e: matches(n, e, dst))
        if not removed:
            return False
        if self.reversible:
            back = self._graph[dst].backward.remove_if(lambda n, e: matches(n, e, src))
            if not back:
                raise RuntimeError("Disconnection found in forward, but not backward")
        return True

    def nodes(self) -> list[int]:
        """Nodes that have at least one recorded connection."""
        return [
            n for n, conn in enumerate(self._graph) if len(conn.forward) or len(conn.backward)
        ]

    def children(self, node: int) -> list[int]:
        """Destinations of the outgoing edges of node, in insertion order."""
        return list(self._graph[node].forward.nodes)

    def outgoing_edges(self, node: int) -> list[E]:
        """Outgoing edges of node, aligned with ``children``."""
        return list(self._graph[node].forward.edges)

    def parents(self, node: int) -> list[int]:
        """Sources of the incoming edges of node."""
        self._require_reversible()
        return list(self._graph[node].backward.nodes)

    def incoming_edges(self, node: int) -> list[E]:
        """Incoming edges of node, aligned with ``parents``."""
        self._require_reversible()
        return list(self._graph[node].backward.edges)

    def reverse(self) -> None:
        """Flip the direction of every edge in place."""
        self._require_reversible()
        for conn in self._graph:
            conn.forward, conn.backward = conn.backward, conn.forward

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._graph.clear()

    def format(self, heading: str = "") -> str:
        """Human-readable listing of the outgoing connections of every node."""
        lines: list[str] = []
        if heading:
            lines.append(f"{heading}:")
        for node, conn in enumerate(self._graph):
            for i, (child, edge) in enumerate(zip(conn.forward.nodes, conn.forward.edges)):
                if i == 0:
                    lines.append(f"Node {node} is connected to:")
                lines.append(f"    - child node {child} with edge: {edge}")
        return "\n".join(lines)