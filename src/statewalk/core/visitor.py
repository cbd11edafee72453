"""
In-place depth-first state visitor.

RecursiveStateVisitor performs the same apply/rollback calls a recursive
pre-order DFS would, but iteratively and one node per ``advance()``:

    def visit(state):
        yield state
        for action in agent.generate(state):
            env.apply(state, action)
            yield from visit(state)
            env.rollback(state, action)

The recursion is replaced by an explicit stack of resume points, one per tree
level below the root, so the traversal depth is limited by memory rather than
by the interpreter's recursion limit. A single state object is mutated for the
whole traversal; ``get()`` returns that object, so callers must copy it if they
need it after the next ``advance()``.

Transition table (``mode`` before advance -> work done):

    NOT_STARTED      -> enter the root, no mutation          -> ENTERED_NEW
    ENTERED_*        -> expand: apply first child action     -> ENTERED_NEW
                        else: rollback current action, apply
                        next sibling (popping and rolling back
                        exhausted levels on the way up)      -> ENTERED_SIBLING
                        or, with the stack emptied           -> FINISHED
    FINISHED         -> nothing

Every node is reported exactly once, in pre-order. Every edge is applied once
and rolled back once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, List, Optional, TypeVar

from statewalk.core.protocols import ActionsGenerator, Environment
from statewalk.core.streaming import StreamingIterator

S = TypeVar("S")
A = TypeVar("A")

_EXHAUSTED = object()


class VisitMode(str, Enum):
    """Where the visitor is in its edge-traversal cycle."""

    NOT_STARTED = "not_started"  # Root not entered yet
    ENTERED_NEW = "entered_new"  # Reached by applying a first child action (or the root)
    ENTERED_SIBLING = "entered_sibling"  # Reached by moving to a sibling action
    FINISHED = "finished"  # Traversal exhausted


@dataclass
class ResumePoint(Generic[A]):
    """Remaining sibling actions of one tree level and the action applied from it."""

    actions: Iterator[A]
    action: A


@dataclass
class TraversalStats:
    visited: int = 0
    applied: int = 0
    rolled_back: int = 0
    max_depth: int = 0


class RecursiveStateVisitor(StreamingIterator[S], Generic[S, A]):
    """Lazily visits every node of the tree defined by ``env`` and ``agent``.

    Args:
        initial: Root state. Owned and mutated in place by the visitor.
        env: Reversible transition model.
        agent: Supplies the ordered child actions of each state.
    """

    def __init__(self, initial: S, env: Environment[S, A], agent: ActionsGenerator[S, A]):
        self.env = env
        self.agent = agent
        self.stats = TraversalStats()
        self._state = initial
        self._stack: List[ResumePoint[A]] = []
        self._mode = VisitMode.NOT_STARTED
        self._expand_current = True

    @property
    def mode(self) -> VisitMode:
        return self._mode

    @property
    def state(self) -> S:
        """The shared state buffer, whatever the current mode."""
        return self._state

    @property
    def depth(self) -> int:
        """Number of actions applied on the path from the root to the current node."""
        return len(self._stack)

    @property
    def is_done(self) -> bool:
        return self._mode is VisitMode.FINISHED

    @property
    def has_current(self) -> bool:
        return self._mode in (VisitMode.ENTERED_NEW, VisitMode.ENTERED_SIBLING)

    def path(self) -> List[A]:
        """Actions applied from the root to reach the current node."""
        return [point.action for point in self._stack]

    def stop_expand_current(self) -> None:
        """Treat the current node as a leaf on the next ``advance()``.

        Only affects the node currently entered; the flag resets after every
        advance. Called before the first advance it applies to the root, which
        is then reported without ever being expanded.
        """
        self._expand_current = False

    def get(self) -> Optional[S]:
        if self.has_current:
            return self._state
        return None

    def advance(self) -> None:
        if self._mode is VisitMode.NOT_STARTED:
            self._enter(VisitMode.ENTERED_NEW)
            return
        if self._mode is VisitMode.FINISHED:
            return

        expand = self._expand_current
        self._expand_current = True

        if expand and self._descend():
            return
        self._next_sibling()

    def _enter(self, mode: VisitMode) -> None:
        self._mode = mode
        self.stats.visited += 1

    def _descend(self) -> bool:
        actions = iter(self.agent.generate(self._state))
        first = next(actions, _EXHAUSTED)
        if first is _EXHAUSTED:
            return False
        self._apply(first)
        self._stack.append(ResumePoint(actions, first))
        if len(self._stack) > self.stats.max_depth:
            self.stats.max_depth = len(self._stack)
        self._enter(VisitMode.ENTERED_NEW)
        return True

    def _next_sibling(self) -> None:
        while self._stack:
            top = self._stack[-1]
            # The parent's action sequence is resumed only once the state is back at the parent
            self._rollback(top.action)
            sibling = next(top.actions, _EXHAUSTED)
            if sibling is not _EXHAUSTED:
                self._apply(sibling)
                top.action = sibling
                self._enter(VisitMode.ENTERED_SIBLING)
                return
            self._stack.pop()
        self._mode = VisitMode.FINISHED

    def _apply(self, action: Any) -> None:
        self.env.apply(self._state, action)
        self.stats.applied += 1

    def _rollback(self, action: Any) -> None:
        self.env.rollback(self._state, action)
        self.stats.rolled_back += 1

    def __repr__(self) -> str:
        return f"RecursiveStateVisitor(mode={self._mode.value}, depth={self.depth})"


__all__ = ["VisitMode", "ResumePoint", "TraversalStats", "RecursiveStateVisitor"]
