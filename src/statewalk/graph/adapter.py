"""
Graphs as transition models.

A walker standing on a node is the search state; outgoing edges are the
actions. Applying an edge moves the walker to the edge's end node, rolling it
back returns the walker to the edge's start node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Protocol, Set, Tuple, TypeVar

from statewalk.core.visitor import RecursiveStateVisitor

N = TypeVar("N", bound=Hashable)
E = TypeVar("E")


class Graph(Protocol[N, E]):
    def nodes(self) -> Iterable[N]: ...

    def edges(self, node: N) -> Iterable[E]: ...

    def edge_begin(self, edge: E) -> N: ...

    def edge_end(self, edge: E) -> N: ...


class AdjacencyGraph(Generic[N]):
    """Directed graph stored as an adjacency list; edges are ``(begin, end)`` tuples."""

    def __init__(self, edges: Iterable[Tuple[N, N]] = (), nodes: Iterable[N] = ()):
        self._adjacency: Dict[N, List[N]] = {}
        for node in nodes:
            self.add_node(node)
        for begin, end in edges:
            self.add_edge(begin, end)

    def add_node(self, node: N) -> None:
        self._adjacency.setdefault(node, [])

    def add_edge(self, begin: N, end: N) -> None:
        self.add_node(begin)
        self.add_node(end)
        self._adjacency[begin].append(end)

    def nodes(self) -> Iterator[N]:
        return iter(self._adjacency)

    def edges(self, node: N) -> Iterator[Tuple[N, N]]:
        return ((node, end) for end in self._adjacency.get(node, ()))

    @staticmethod
    def edge_begin(edge: Tuple[N, N]) -> N:
        return edge[0]

    @staticmethod
    def edge_end(edge: Tuple[N, N]) -> N:
        return edge[1]

    def __len__(self) -> int:
        return len(self._adjacency)


@dataclass
class Walker(Generic[N]):
    """Mutable position of a graph walk."""

    node: N


class GraphEnvironment(Generic[N, E]):
    def __init__(self, graph: Graph[N, E]):
        self.graph = graph

    def apply(self, state: Walker[N], action: E) -> None:
        state.node = self.graph.edge_end(action)

    def rollback(self, state: Walker[N], action: E) -> None:
        state.node = self.graph.edge_begin(action)


class DfsAgent(Generic[N, E]):
    """Offers every outgoing edge and refuses to go past a node seen before.

    ``revisits`` counts arrivals at already-seen nodes; a walk from a single
    root over a tree never revisits.
    """

    def __init__(self, graph: Graph[N, E]):
        self.graph = graph
        self.seen: Set[N] = set()
        self.revisits = 0

    def generate(self, state: Walker[N]) -> Iterable[E]:
        return self.graph.edges(state.node)

    def should_continue(self, state: Walker[N]) -> bool:
        if state.node in self.seen:
            self.revisits += 1
            return False
        self.seen.add(state.node)
        return True


def _walk(graph: Graph[N, E], start: N) -> DfsAgent[N, E]:
    agent: DfsAgent[N, E] = DfsAgent(graph)
    visitor = RecursiveStateVisitor(Walker(start), GraphEnvironment(graph), agent)
    while visitor.next() is not None:
        if not agent.should_continue(visitor.state):
            visitor.stop_expand_current()
    return agent


def reachable(graph: Graph[N, E], start: N) -> Set[N]:
    """Nodes reachable from ``start`` (including it)."""
    return _walk(graph, start).seen


def find_roots(graph: Graph[N, E]) -> List[N]:
    """Nodes without incoming edges."""
    targets = {graph.edge_end(edge) for node in graph.nodes() for edge in graph.edges(node)}
    return [node for node in graph.nodes() if node not in targets]


def is_tree(graph: Graph[N, E]) -> bool:
    """True if the directed graph is a rooted tree.

    That is: exactly one node without incoming edges, from which every node is
    reached along exactly one path.
    """
    nodes = list(graph.nodes())
    if not nodes:
        return False
    roots = find_roots(graph)
    if len(roots) != 1:
        return False
    agent = _walk(graph, roots[0])
    return agent.revisits == 0 and len(agent.seen) == len(nodes)


__all__ = [
    "Graph",
    "AdjacencyGraph",
    "Walker",
    "GraphEnvironment",
    "DfsAgent",
    "reachable",
    "find_roots",
    "is_tree",
]
