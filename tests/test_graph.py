"""
Tests for the graph adapter.
"""

from statewalk.graph import AdjacencyGraph, GraphEnvironment, Walker, find_roots, is_tree, reachable


class TestIsTree:
    """Tests for rooted tree detection."""

    def test_tree(self):
        graph = AdjacencyGraph([("a", "b"), ("a", "c"), ("b", "d")])

        assert is_tree(graph)

    def test_single_node(self):
        assert is_tree(AdjacencyGraph(nodes=["x"]))

    def test_empty_graph(self):
        assert not is_tree(AdjacencyGraph())

    def test_shared_child(self):
        graph = AdjacencyGraph([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])

        assert not is_tree(graph)

    def test_cycle_below_root(self):
        graph = AdjacencyGraph([("a", "b"), ("b", "c"), ("c", "b")])

        assert not is_tree(graph)

    def test_cycle_without_root(self):
        assert not is_tree(AdjacencyGraph([("a", "b"), ("b", "a")]))

    def test_forest(self):
        graph = AdjacencyGraph([("a", "b"), ("c", "d")])

        assert find_roots(graph) == ["a", "c"]
        assert not is_tree(graph)


class TestWalk:
    """Tests for graph traversal through the visitor."""

    def test_reachable(self):
        graph = AdjacencyGraph([("a", "b"), ("b", "c"), ("c", "b"), ("d", "a")])

        assert reachable(graph, "a") == {"a", "b", "c"}
        assert reachable(graph, "d") == {"a", "b", "c", "d"}

    def test_environment_moves_walker(self):
        graph = AdjacencyGraph([("a", "b")])
        env = GraphEnvironment(graph)
        walker = Walker("a")

        env.apply(walker, ("a", "b"))
        assert walker.node == "b"
        env.rollback(walker, ("a", "b"))
        assert walker.node == "a"
