"""
Shared fixtures for traversal engine tests.
"""

from typing import List

import pytest


class FixedBranching:
    """Every node below ``depth`` has ``branching`` children labelled 0..branching-1."""

    def __init__(self, branching: int, depth: int):
        self.branching = branching
        self.depth = depth

    def apply(self, state: List[int], action: int) -> None:
        state.append(action)

    def rollback(self, state: List[int], action: int) -> None:
        state.pop()

    def generate(self, state: List[int]):
        if len(state) >= self.depth:
            return []
        return range(self.branching)


class TerminalFixedBranching(FixedBranching):
    def is_terminal(self, state: List[int]) -> bool:
        return len(state) >= self.depth


class RecordingEnvironment:
    """Delegates to ``env`` and records every mutation."""

    def __init__(self, env):
        self.env = env
        self.calls = []

    def apply(self, state, action) -> None:
        self.calls.append(("apply", action))
        self.env.apply(state, action)

    def rollback(self, state, action) -> None:
        self.calls.append(("rollback", action))
        self.env.rollback(state, action)


def _reference_preorder(state, env, agent) -> List[list]:
    """Plain recursive pre-order DFS, returning copies of every visited state."""
    visited = [list(state)]
    for action in agent.generate(state):
        env.apply(state, action)
        visited.extend(_reference_preorder(state, env, agent))
        env.rollback(state, action)
    return visited


@pytest.fixture
def binary_tree() -> FixedBranching:
    return FixedBranching(branching=2, depth=3)


@pytest.fixture
def terminal_tree() -> TerminalFixedBranching:
    return TerminalFixedBranching(branching=2, depth=3)


@pytest.fixture
def reference_preorder():
    return _reference_preorder
