"""Debug wrapper that verifies apply/rollback pairs are exact inverses."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, List, TypeVar

from statewalk.core.errors import InvertibilityError
from statewalk.core.protocols import Environment

S = TypeVar("S")
A = TypeVar("A")

logger = logging.getLogger(__name__)


class CheckedEnvironment(Generic[S, A]):
    """Environment proxy that snapshots the state before each apply.

    On rollback the restored state is compared with the snapshot of the
    matching apply. This costs a snapshot per edge and is meant for tests and
    debugging, not production traversals.

    Attribute access falls through to the wrapped environment, so terminal or
    continuation methods defined there keep working.
    """

    def __init__(self, env: Environment[S, A], snapshot: Callable[[S], Any] = copy.deepcopy):
        self.env = env
        self.snapshot = snapshot
        self._pending: List[Any] = []
        self.checked = 0

    def apply(self, state: S, action: A) -> None:
        self._pending.append(self.snapshot(state))
        self.env.apply(state, action)

    def rollback(self, state: S, action: A) -> None:
        self.env.rollback(state, action)
        if not self._pending:
            raise InvertibilityError(action, expected="<no matching apply>", actual=self.snapshot(state))
        expected = self._pending.pop()
        actual = self.snapshot(state)
        if actual != expected:
            logger.error("Rollback of %r is not an exact inverse", action)
            raise InvertibilityError(action, expected=expected, actual=actual)
        self.checked += 1

    def __getattr__(self, name: str) -> Any:
        if name == "env":
            raise AttributeError(name)
        return getattr(self.env, name)


__all__ = ["CheckedEnvironment"]
