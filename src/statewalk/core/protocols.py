"""
Capability interfaces for state-space search.

A search problem is described by independent capabilities rather than by a
class hierarchy. A concrete "agent" or "environment" class implements whichever
of them it needs; the engine only relies on the methods listed here.

- Environment: reversible transitions (apply / rollback must be exact inverses)
- ActionsGenerator: ordered candidate actions for a state
- TerminalPolicy: leaf detection, depends on the state only
- ContinuationPolicy: soft pruning, may update agent-local bookkeeping
- WeightedState: scalar weight of a state, used by the annealing optimizer

Example:
    class Bits:
        def apply(self, state, action):
            state.append(action)

        def rollback(self, state, action):
            state.pop()

        def generate(self, state):
            return (True, False)

        def is_terminal(self, state):
            return len(state) == 3
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")
A = TypeVar("A")


@runtime_checkable
class Environment(Protocol[S, A]):
    """Transition model: mutates a state in place and undoes the mutation.

    ``rollback(state, action)`` must restore exactly the value the state had
    before ``apply(state, action)``. This is not checked at runtime (see
    ``statewalk.core.checked`` for a debug wrapper); a wrong inverse silently
    corrupts every state visited afterwards.
    """

    def apply(self, state: S, action: A) -> None: ...

    def rollback(self, state: S, action: A) -> None: ...


@runtime_checkable
class ActionsGenerator(Protocol[S, A]):
    """Produces the ordered actions available from ``state``.

    The sequence is consumed once, left to right. It may be lazy; when it is,
    the engine only pulls the next action after the state has been rolled back
    to the node the sequence was generated for. An empty sequence marks a leaf.
    """

    def generate(self, state: S) -> Iterable[A]: ...


@runtime_checkable
class TerminalPolicy(Protocol[S]):
    def is_terminal(self, state: S) -> bool: ...


@runtime_checkable
class ContinuationPolicy(Protocol[S]):
    """Decides whether the subtree below ``state`` is worth exploring.

    Implementations may update their own bookkeeping (counters, bounds) but
    must not mutate ``state``.
    """

    def should_continue(self, state: S) -> bool: ...


@runtime_checkable
class WeightedState(Protocol[S]):
    def calc_weight(self, state: S) -> float: ...


def has_capability(obj: Any, method: str) -> bool:
    """Return True if ``obj`` exposes a callable named ``method``."""
    return callable(getattr(obj, method, None))


__all__ = [
    "Environment",
    "ActionsGenerator",
    "TerminalPolicy",
    "ContinuationPolicy",
    "WeightedState",
    "has_capability",
]
