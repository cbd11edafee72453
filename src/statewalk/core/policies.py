"""
Reusable terminal and continuation policies.

The engine has no timeouts or node limits of its own. Bounded exploration is
expressed as a continuation policy: once a budget is spent, ``should_continue``
answers False and every remaining subtree is cut off, which ends the
traversal quickly.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Sized

DepthFn = Callable[[Any], int]


def _len_depth(state: Sized) -> int:
    return len(state)


class AlwaysContinue:
    def should_continue(self, state: Any) -> bool:
        return True


class DepthLimit:
    """Stops expanding states whose depth reached ``max_depth``."""

    def __init__(self, max_depth: int, depth_fn: DepthFn = _len_depth):
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self.max_depth = max_depth
        self.depth_fn = depth_fn

    def should_continue(self, state: Any) -> bool:
        return self.depth_fn(state) < self.max_depth


class DepthTerminal:
    """Reports states of exactly ``depth`` (or deeper) as terminal."""

    def __init__(self, depth: int, depth_fn: DepthFn = _len_depth):
        self.depth = depth
        self.depth_fn = depth_fn

    def is_terminal(self, state: Any) -> bool:
        return self.depth_fn(state) >= self.depth


class NodeBudget:
    """Allows at most ``max_nodes`` positive answers, then prunes everything."""

    def __init__(self, max_nodes: int):
        self.max_nodes = max_nodes
        self.used = 0

    @property
    def exhausted(self) -> bool:
        return self.used >= self.max_nodes

    def should_continue(self, state: Any) -> bool:
        if self.exhausted:
            return False
        self.used += 1
        return True


class TimeBudget:
    """Prunes everything once ``seconds`` have passed since the first query."""

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        self.seconds = seconds
        self.clock = clock
        self.started_at: float | None = None

    @property
    def expired(self) -> bool:
        if self.started_at is None:
            return False
        return self.clock() - self.started_at >= self.seconds

    def should_continue(self, state: Any) -> bool:
        if self.started_at is None:
            self.started_at = self.clock()
        return not self.expired


class AllOf:
    """Continues only if every wrapped policy agrees.

    Policies are queried in order and evaluation stops at the first refusal,
    so stateful policies later in the list are not charged for pruned nodes.
    """

    def __init__(self, *policies: Any):
        self.policies = list(policies)

    def should_continue(self, state: Any) -> bool:
        for policy in self.policies:
            if not policy.should_continue(state):
                return False
        return True


__all__ = ["AlwaysContinue", "DepthLimit", "DepthTerminal", "NodeBudget", "TimeBudget", "AllOf"]
