"""
Weighted Hamiltonian path improved by swapping inner nodes.

The state is a visiting order over all graph nodes with fixed end points.
An action swaps two inner positions. The state's ``weight`` is the negated
path length, updated incrementally on every swap, so minimizing the weight
looks for the heaviest path. A swap is its own inverse.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from pydantic import BaseModel, Field, field_validator

Weights = List[List[float]]

DEFAULT_WEIGHTS: Weights = [
    [0, 0, 1, 0, 0],
    [0, 0, 0, 1, 1],
    [1, 0, 0, 1, 0],
    [0, 1, 1, 0, 0],
    [0, 1, 0, 0, 0],
]


class PathSwapParams(BaseModel):
    weights: Weights = Field(default_factory=lambda: [list(row) for row in DEFAULT_WEIGHTS])
    seed: Optional[int] = None

    @field_validator("weights")
    @classmethod
    def _validate_square(cls, v: Weights) -> Weights:
        if len(v) < 4:
            raise ValueError("at least 4 nodes are required")
        if any(len(row) != len(v) for row in v):
            raise ValueError("weights must be a square matrix")
        return v


@dataclass
class Path:
    order: List[int]
    weight: float = 0

    @classmethod
    def identity(cls, size: int) -> "Path":
        return cls(order=list(range(size)))


@dataclass(frozen=True)
class PairOfNodes:
    first: int
    second: int


class PathEnvironment:
    def __init__(self, weights: Weights):
        self.weights = weights

    def path_weight(self, path: Path) -> float:
        order = path.order
        return sum(self.weights[order[i]][order[i + 1]] for i in range(len(order) - 1))

    def init_weight(self, path: Path) -> Path:
        path.weight = -self.path_weight(path)
        return path

    def _touching(self, path: Path, positions: Set[int]) -> float:
        order = path.order
        return sum(self.weights[order[i]][order[i + 1]] for i in positions)

    def apply(self, state: Path, action: PairOfNodes) -> None:
        a, b = action.first, action.second
        # edge i joins positions i and i + 1
        edges = {a - 1, a, b - 1, b}
        before = self._touching(state, edges)
        state.order[a], state.order[b] = state.order[b], state.order[a]
        after = self._touching(state, edges)
        state.weight -= after - before

    def rollback(self, state: Path, action: PairOfNodes) -> None:
        self.apply(state, action)


@dataclass
class PathAgent:
    """Proposes one random swap of two inner positions per call."""

    env: PathEnvironment
    rng: random.Random = field(default_factory=random.Random)

    def generate(self, state: Path) -> Iterator[PairOfNodes]:
        inner = len(state.order) - 2
        yield PairOfNodes(self.rng.randrange(inner) + 1, self.rng.randrange(inner) + 1)

    def calc_weight(self, state: Path) -> float:
        return float(state.weight)


def format_path(state: Path) -> str:
    return f"{' -> '.join(str(n) for n in state.order)} (weight {state.weight:g})"


__all__ = [
    "PathSwapParams",
    "Path",
    "PairOfNodes",
    "PathEnvironment",
    "PathAgent",
    "DEFAULT_WEIGHTS",
    "format_path",
]
