"""
Simulated annealing over a reversible transition model.

The solver reuses the same Environment / ActionsGenerator contracts as the
traversal engine. The agent proposes one (usually random) action per call to
``generate`` and weighs states through ``calc_weight``. Lower weight is better.

Each step:
1. weigh the current state
2. apply the proposed action and weigh again
3. keep the move if it is not worse, or with probability
   exp(-(new - prev) / temperature); otherwise roll it back

The best state seen is kept as a deep copy since the walk keeps mutating the
current state past the optimum.
"""

from __future__ import annotations

import copy
import logging
import math
import random
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from statewalk.core.protocols import Environment
from statewalk.utils.logging import log_calls

S = TypeVar("S")

logger = logging.getLogger(__name__)

CoolingSchedule = Callable[[float], float]


def linear_cooling(step: float) -> CoolingSchedule:
    """Lower the temperature by ``step`` every iteration."""
    if step <= 0:
        raise ValueError("step must be positive")

    def _cool(temperature: float) -> float:
        return temperature - step

    return _cool


def geometric_cooling(alpha: float) -> CoolingSchedule:
    """Multiply the temperature by ``alpha`` every iteration."""
    if not 0 < alpha < 1:
        raise ValueError("alpha must be in (0, 1)")

    def _cool(temperature: float) -> float:
        return temperature * alpha

    return _cool


class AnnealingResult(BaseModel):
    best_weight: float
    final_weight: float
    final_temperature: float
    iterations: int
    accepted: int
    rejected: int


class AnnealingSolver(Generic[S]):
    """Metropolis-style local search.

    Args:
        state: Starting state. The solver mutates it in place as ``current_state``.
        initial_temperature: Starting temperature, must be positive.
        rng: Random source for acceptance draws. Defaults to a fresh ``random.Random``.
        copy_fn: How to take the best-state snapshot.
    """

    def __init__(
        self,
        state: S,
        initial_temperature: float,
        rng: Optional[random.Random] = None,
        copy_fn: Callable[[S], S] = copy.deepcopy,
    ):
        if initial_temperature <= 0:
            raise ValueError("initial_temperature must be positive")
        self.copy_fn = copy_fn
        self.current_state = state
        self.best_state = copy_fn(state)
        self.best_weight: Optional[float] = None
        self.temperature = float(initial_temperature)
        self.rng = rng or random.Random()
        self.iterations = 0
        self.accepted = 0
        self.rejected = 0

    def get_best_state(self) -> S:
        return self.best_state

    def step(self, env: Environment[S, Any], agent: Any, accept_always: bool = False) -> bool:
        """Try one proposed move. Returns True if the move was kept."""
        proposal = next(iter(agent.generate(self.current_state)), None)
        if proposal is None:
            return False

        prev_w = agent.calc_weight(self.current_state)
        env.apply(self.current_state, proposal)
        new_w = agent.calc_weight(self.current_state)

        if accept_always or self._accept(new_w - prev_w):
            self.accepted += 1
            return True

        env.rollback(self.current_state, proposal)
        self.rejected += 1
        return False

    def _accept(self, delta: float) -> bool:
        if delta <= 0:
            return True
        return self.rng.random() < math.exp(-delta / self.temperature)

    @log_calls()
    def run(
        self,
        env: Environment[S, Any],
        agent: Any,
        cooldown: CoolingSchedule,
        final_temperature: float,
    ) -> AnnealingResult:
        """Anneal until the temperature drops to ``final_temperature``."""
        self._track_best(agent)
        while self.temperature > final_temperature:
            self.step(env, agent)
            self.iterations += 1
            self.temperature = cooldown(self.temperature)
            self._track_best(agent)

        result = AnnealingResult(
            best_weight=self.best_weight,
            final_weight=agent.calc_weight(self.current_state),
            final_temperature=self.temperature,
            iterations=self.iterations,
            accepted=self.accepted,
            rejected=self.rejected,
        )
        logger.info(
            "Annealing finished after %d iterations: best=%s accepted=%d rejected=%d",
            result.iterations,
            result.best_weight,
            result.accepted,
            result.rejected,
        )
        return result

    def estimate_fluctuation(self, env: Environment[S, Any], agent: Any, steps: int) -> float:
        """Mean absolute weight change from the current state over a random walk.

        Every proposed move is accepted, so the walk shows how far weights
        typically spread. Useful for picking an initial temperature.
        """
        if steps <= 0:
            raise ValueError("steps must be positive")
        start_w = agent.calc_weight(self.current_state)
        total = 0.0
        for _ in range(steps):
            self.step(env, agent, accept_always=True)
            total += abs(start_w - agent.calc_weight(self.current_state))
        return total / steps

    def _track_best(self, agent: Any) -> None:
        weight = agent.calc_weight(self.current_state)
        if self.best_weight is None or weight < self.best_weight:
            self.best_weight = weight
            self.best_state = self.copy_fn(self.current_state)
            logger.debug("New best weight %s at iteration %d", weight, self.iterations)


__all__ = ["AnnealingSolver", "AnnealingResult", "linear_cooling", "geometric_cooling"]
