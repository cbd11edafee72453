"""
Traversal engine.

Components:
- protocols: capability interfaces (Environment, ActionsGenerator, policies)
- streaming: StreamingIterator base and adapters
- visitor: RecursiveStateVisitor, the in-place DFS state machine
- generator: RecursiveStateGenerator, terminal states with pruning
- policies: depth, node and time budgets as continuation policies
- checked: CheckedEnvironment for verifying apply/rollback inverses

Example:
    from statewalk.core import RecursiveStateGenerator

    gen = RecursiveStateGenerator([], env, agent)
    for state in gen:
        print(state)  # same list object each time, mutated in place
"""

from statewalk.core.checked import CheckedEnvironment
from statewalk.core.errors import ConfigError, InvertibilityError, StateWalkError
from statewalk.core.generator import GeneratorStats, RecursiveStateGenerator
from statewalk.core.policies import (
    AllOf,
    AlwaysContinue,
    DepthLimit,
    DepthTerminal,
    NodeBudget,
    TimeBudget,
)
from statewalk.core.protocols import (
    ActionsGenerator,
    ContinuationPolicy,
    Environment,
    TerminalPolicy,
    WeightedState,
    has_capability,
)
from statewalk.core.streaming import Convert, Filter, StreamingIterator, TakeWhile, convert
from statewalk.core.visitor import (
    RecursiveStateVisitor,
    ResumePoint,
    TraversalStats,
    VisitMode,
)

__all__ = [
    "ActionsGenerator",
    "AllOf",
    "AlwaysContinue",
    "CheckedEnvironment",
    "ConfigError",
    "ContinuationPolicy",
    "Convert",
    "DepthLimit",
    "DepthTerminal",
    "Environment",
    "Filter",
    "GeneratorStats",
    "InvertibilityError",
    "NodeBudget",
    "RecursiveStateGenerator",
    "RecursiveStateVisitor",
    "ResumePoint",
    "StateWalkError",
    "StreamingIterator",
    "TakeWhile",
    "TerminalPolicy",
    "TimeBudget",
    "TraversalStats",
    "VisitMode",
    "WeightedState",
    "convert",
    "has_capability",
]
