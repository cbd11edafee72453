"""
Tests for RecursiveStateGenerator.

Tests cover:
- Terminal-state enumeration counts
- Immediate terminal root
- Pruning through continuation policies
- Policy resolution
- Order against a recursive reference
- Heuristic search with mutable agent state
"""

import itertools

import pytest

from statewalk.core.generator import RecursiveStateGenerator
from statewalk.core.policies import DepthLimit
from statewalk.models.queens import QueensAgent, QueensEnvironment
from statewalk.models.zero_one import ZeroOneAgent, ZeroOneEnvironment, format_bits

from .conftest import FixedBranching, TerminalFixedBranching


class TestEnumeration:
    """Tests for unpruned enumeration."""

    def test_zero_one_yields_eight(self):
        """Branching 2, depth 3: exactly 8 terminal sequences."""
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent())

        assert gen.count() == 8

    def test_zero_one_order(self):
        """True is tried before False at every level."""
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent())

        rendered = [format_bits(s) for s in gen]

        assert rendered == ["111", "110", "101", "100", "011", "010", "001", "000"]

    def test_initial_is_terminal(self):
        """A terminal root yields exactly one item and then finishes."""
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(0), ZeroOneAgent())

        assert gen.next() == []
        assert gen.next() is None
        assert gen.is_done

    def test_take_while_first_bit(self):
        """The first half of the enumeration starts with True."""
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent()).take_while(lambda s: s[0])

        assert gen.count() == 4

    def test_only_terminal_states_are_yielded(self, terminal_tree):
        gen = RecursiveStateGenerator([], terminal_tree, terminal_tree)

        assert all(len(state) == 3 for state in gen)
        assert gen.visitor_stats.visited == 15
        assert gen.stats.yielded == 8

    def test_branching_eight_depth_five(self):
        """8 ** 5 leaves.

        The default run covers scale here and unbounded depth in the visitor
        depth tests; the 8 ** 10 count below runs only with ``-m slow``.
        """
        tree = TerminalFixedBranching(branching=8, depth=5)
        gen = RecursiveStateGenerator([], tree, tree)

        assert gen.count() == 8**5
        assert gen.visitor_stats.max_depth == 5

    @pytest.mark.slow
    def test_branching_eight_depth_ten(self):
        """8 ** 10 leaves with a stack never deeper than 10."""
        tree = TerminalFixedBranching(branching=8, depth=10)
        gen = RecursiveStateGenerator([], tree, tree)

        assert gen.count() == 1_073_741_824
        assert gen.visitor_stats.max_depth == 10

    def test_matches_reference_terminal_order(self, reference_preorder):
        tree = TerminalFixedBranching(branching=3, depth=3)
        expected = [s for s in reference_preorder([], tree, tree) if tree.is_terminal(s)]

        assert RecursiveStateGenerator([], tree, tree).collect(list) == expected

    def test_queens_solutions(self):
        """6-queens has 4 solutions, 8-queens has 92."""
        assert RecursiveStateGenerator([], QueensEnvironment(6), QueensAgent(6)).count() == 4
        assert RecursiveStateGenerator([], QueensEnvironment(8), QueensAgent(8)).count() == 92

    def test_exhausted_generator_stays_exhausted(self):
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(1), ZeroOneAgent())
        gen.count()

        for _ in range(3):
            assert gen.next() is None
        assert gen.stats.yielded == 2


class TestPruning:
    """Tests for continuation policies."""

    def test_pruned_bit_halves_enumeration(self):
        """Refusing to continue once bit 0 is True removes the left half."""
        gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent(prune_bit=0))

        states = gen.collect(list)

        assert len(states) == 4
        assert all(state[0] is False for state in states)
        assert gen.stats.pruned == 1

    def test_pruned_nodes_are_not_yielded(self, terminal_tree):
        """Pruning above the terminal depth suppresses everything below."""
        gen = RecursiveStateGenerator([], terminal_tree, terminal_tree, continuation=DepthLimit(2))

        assert gen.count() == 0
        assert gen.stats.pruned == 4

    def test_terminal_checked_before_continuation(self, terminal_tree):
        """Terminal states never reach the continuation policy."""
        asked = []

        class Recorder:
            def should_continue(self, state):
                asked.append(list(state))
                return True

        gen = RecursiveStateGenerator([], terminal_tree, terminal_tree, continuation=Recorder())

        assert gen.count() == 8
        assert all(len(state) < 3 for state in asked)
        assert len(asked) == 7

    def test_terminal_root_with_rejecting_policy(self):
        class Never:
            def should_continue(self, state):
                return False

        gen = RecursiveStateGenerator([], ZeroOneEnvironment(0), ZeroOneAgent(), continuation=Never())

        assert gen.count() == 1

    def test_branch_and_bound(self):
        """Continuation may depend on mutable agent state, e.g. a best-so-far bound."""
        values = [4, 7, 1, 8, 3]
        weights = [3, 5, 2, 6, 2]
        capacity = 9

        class Knapsack:
            """State: list of take/skip decisions; actions that overflow are not offered."""

            def __init__(self):
                self.best = 0

            def apply(self, state, action):
                state.append(action)

            def rollback(self, state, action):
                state.pop()

            def is_terminal(self, state):
                return len(state) == len(values)

            def generate(self, state):
                used = sum(w for w, take in zip(weights, state) if take)
                if used + weights[len(state)] <= capacity:
                    yield True
                yield False

            def should_continue(self, state):
                taken = sum(v for v, take in zip(values, state) if take)
                optimistic = taken + sum(values[len(state):])
                return optimistic > self.best

        agent = Knapsack()
        for state in RecursiveStateGenerator([], agent, agent):
            value = sum(v for v, take in zip(values, state) if take)
            agent.best = max(agent.best, value)

        brute_force = max(
            sum(v for v, take in zip(values, choice) if take)
            for choice in itertools.product([True, False], repeat=len(values))
            if sum(w for w, take in zip(weights, choice) if take) <= capacity
        )
        assert agent.best == brute_force


class TestPolicyResolution:
    """Tests for locating terminal and continuation policies."""

    def test_missing_terminal_policy(self, binary_tree):
        with pytest.raises(TypeError):
            RecursiveStateGenerator([], binary_tree, binary_tree)

    def test_terminal_from_agent(self, binary_tree):
        """The agent may carry the terminal policy instead of the environment."""

        class Agent(FixedBranching):
            def is_terminal(self, state):
                return len(state) == 2

        gen = RecursiveStateGenerator([], binary_tree, Agent(2, 3))

        assert gen.count() == 4

    def test_explicit_terminal_overrides_env(self):
        class Short:
            def is_terminal(self, state):
                return len(state) == 1

        gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent(), terminal=Short())

        assert gen.collect(list) == [[True], [False]]

    def test_no_continuation_policy(self):
        class Plain:
            def generate(self, state):
                return (1, 0)

        gen = RecursiveStateGenerator([], ZeroOneEnvironment(2), Plain())

        assert gen.continuation is None
        assert gen.count() == 4
