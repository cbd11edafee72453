from statewalk.graph.adapter import (
    AdjacencyGraph,
    DfsAgent,
    Graph,
    GraphEnvironment,
    Walker,
    find_roots,
    is_tree,
    reachable,
)

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
