"""
Terminal-state generator with pruning.

RecursiveStateGenerator drives a RecursiveStateVisitor and consults two
policies after every step:

1. Terminal policy: a terminal node is reported to the caller and treated
   as a leaf.
2. Continuation policy: a non-terminal node the policy rejects is treated as
   a leaf and skipped; its subtree is never generated.

Only terminal states are yielded. For a tree with branching factor b where
every path becomes terminal at depth d, an unpruned run yields b**d states.
Interior nodes are still visited (and counted in ``visitor_stats``); drive a
RecursiveStateVisitor directly to observe them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from statewalk.core.protocols import (
    ActionsGenerator,
    ContinuationPolicy,
    Environment,
    TerminalPolicy,
    has_capability,
)
from statewalk.core.streaming import StreamingIterator
from statewalk.core.visitor import RecursiveStateVisitor, TraversalStats

S = TypeVar("S")
A = TypeVar("A")

logger = logging.getLogger(__name__)


@dataclass
class GeneratorStats:
    yielded: int = 0
    pruned: int = 0


class RecursiveStateGenerator(StreamingIterator[S], Generic[S, A]):
    """Lazily yields the terminal states reachable from ``initial``.

    Args:
        initial: Root state, mutated in place during the traversal.
        env: Reversible transition model.
        agent: Supplies child actions; also used as the continuation policy
            when it implements ``should_continue``.
        terminal: Terminal policy. Defaults to ``env``, then ``agent``,
            whichever implements ``is_terminal``.
        continuation: Continuation policy. Defaults to ``agent``, then ``env``,
            whichever implements ``should_continue``; otherwise nothing is pruned.

    Raises:
        TypeError: If no terminal policy can be found.
    """

    def __init__(
        self,
        initial: S,
        env: Environment[S, A],
        agent: ActionsGenerator[S, A],
        terminal: Optional[TerminalPolicy[S]] = None,
        continuation: Optional[ContinuationPolicy[S]] = None,
    ):
        self.visitor: RecursiveStateVisitor[S, A] = RecursiveStateVisitor(initial, env, agent)
        if terminal is None:
            terminal = _find_policy("is_terminal", env, agent)
        if terminal is None:
            raise TypeError("A terminal policy is required: pass terminal= or implement is_terminal on env or agent")
        if continuation is None:
            continuation = _find_policy("should_continue", agent, env)
        self.terminal = terminal
        self.continuation = continuation
        self.stats = GeneratorStats()

    @property
    def visitor_stats(self) -> TraversalStats:
        return self.visitor.stats

    @property
    def is_done(self) -> bool:
        return self.visitor.is_done

    def advance(self) -> None:
        visitor = self.visitor
        if visitor.is_done:
            return
        visitor.advance()
        while visitor.has_current:
            state = visitor.state
            if self.terminal.is_terminal(state):
                visitor.stop_expand_current()
                self.stats.yielded += 1
                return
            if self.continuation is not None and not self.continuation.should_continue(state):
                visitor.stop_expand_current()
                self.stats.pruned += 1
            visitor.advance()
        logger.debug(
            "Generator exhausted: yielded=%d pruned=%d visited=%d",
            self.stats.yielded,
            self.stats.pruned,
            visitor.stats.visited,
        )

    def get(self) -> Optional[S]:
        return self.visitor.get()


def _find_policy(method: str, *candidates: Any) -> Any:
    for candidate in candidates:
        if has_capability(candidate, method):
            return candidate
    return None


__all__ = ["RecursiveStateGenerator", "GeneratorStats"]
