"""Search Service: builds models from configuration and runs searches over them."""

from __future__ import annotations

import copy
import dataclasses
import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from statewalk.config.settings import AnnealingSettings, RunConfig, SearchSettings
from statewalk.core.checked import CheckedEnvironment
from statewalk.core.errors import ConfigError
from statewalk.core.generator import RecursiveStateGenerator
from statewalk.core.policies import AllOf, DepthLimit, NodeBudget, TimeBudget
from statewalk.core.protocols import has_capability
from statewalk.io.errors import format_validation_errors
from statewalk.models.registry import ModelBundle, ModelRegistry, default_registry
from statewalk.optimize.annealing import AnnealingResult, AnnealingSolver
from statewalk.utils.logging import log_calls

logger = logging.getLogger(__name__)


class EnumerationResult(BaseModel):
    model: str
    params: Dict[str, Any] = Field(default_factory=dict)
    states: List[Any] = Field(default_factory=list)
    rendered: List[str] = Field(default_factory=list)
    yielded: int = 0
    pruned: int = 0
    visited: int = 0
    applied: int = 0
    rolled_back: int = 0
    max_depth: int = 0
    truncated: bool = False

    def stats(self) -> Dict[str, Any]:
        return self.model_dump(include={"yielded", "pruned", "visited", "applied", "rolled_back", "max_depth", "truncated"})


class AnnealingRun(BaseModel):
    model: str
    result: AnnealingResult
    best_state: Any
    rendered_best: str
    fluctuation: Optional[float] = None


def to_plain(state: Any) -> Any:
    """Copy a state into plain data suitable for YAML output."""
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return dataclasses.asdict(state)
    return copy.deepcopy(state)


class SearchService:
    """
    High-level service for running searches over registered models.

    Coordinates model construction, policy composition and result collection.
    """

    def __init__(self, registry: Optional[ModelRegistry] = None):
        self.registry = registry or default_registry()

    def build(self, model: str, params: Optional[Dict[str, Any]] = None) -> ModelBundle:
        """
        Build a fresh model bundle.

        Raises:
            ConfigError: If the model is unknown or the parameters are invalid
        """
        try:
            spec = self.registry.get(model)
        except KeyError as exc:
            raise ConfigError(str(exc.args[0])) from exc
        try:
            return spec.build(params)
        except ValidationError as exc:
            raise ConfigError(f"Invalid parameters for {model}: {format_validation_errors(exc.errors())}") from exc

    @staticmethod
    def continuation_for(bundle: ModelBundle, settings: SearchSettings) -> Any:
        """Combine the agent's own pruning with the configured budgets, or None if there is nothing to check."""
        policies: List[Any] = []
        if has_capability(bundle.agent, "should_continue"):
            policies.append(bundle.agent)
        if settings.max_depth is not None:
            policies.append(DepthLimit(settings.max_depth))
        if settings.time_budget is not None:
            policies.append(TimeBudget(settings.time_budget))
        if settings.max_nodes is not None:
            policies.append(NodeBudget(settings.max_nodes))
        if not policies:
            return None
        if len(policies) == 1:
            return policies[0]
        return AllOf(*policies)

    @log_calls()
    def enumerate(
        self,
        model: str,
        params: Optional[Dict[str, Any]] = None,
        settings: Optional[SearchSettings] = None,
        keep: Optional[int] = None,
    ) -> EnumerationResult:
        """
        Enumerate the terminal states of a model.

        Args:
            model: Registered model name
            params: Model parameters
            settings: Limits and budgets (defaults: unbounded)
            keep: Keep copies of at most this many states (all if None)

        Returns:
            EnumerationResult with counts, kept states and engine statistics

        Raises:
            ConfigError: If the model is unknown, its parameters are invalid, or
                it never reports a terminal state
        """
        settings = settings or SearchSettings()
        bundle = self.build(model, params)
        if not (has_capability(bundle.env, "is_terminal") or has_capability(bundle.agent, "is_terminal")):
            raise ConfigError(f"Model {model} has no terminal states")
        env = CheckedEnvironment(bundle.env) if settings.check_inverse else bundle.env
        generator = RecursiveStateGenerator(
            bundle.initial,
            env,
            bundle.agent,
            continuation=self.continuation_for(bundle, settings),
        )

        result = EnumerationResult(model=model, params=dict(params or {}))
        while settings.limit is None or result.yielded < settings.limit:
            state = generator.next()
            if state is None:
                break
            result.yielded += 1
            if keep is None or len(result.states) < keep:
                result.states.append(to_plain(state))
                result.rendered.append(bundle.format_state(state))
        else:
            result.truncated = not generator.is_done

        visitor_stats = generator.visitor_stats
        result.pruned = generator.stats.pruned
        result.visited = visitor_stats.visited
        result.applied = visitor_stats.applied
        result.rolled_back = visitor_stats.rolled_back
        result.max_depth = visitor_stats.max_depth
        logger.info(
            "Enumerated %d terminal state(s) of %s (visited=%d, pruned=%d)",
            result.yielded,
            model,
            result.visited,
            result.pruned,
        )
        return result

    @log_calls()
    def anneal(
        self,
        model: str,
        params: Optional[Dict[str, Any]] = None,
        settings: Optional[AnnealingSettings] = None,
    ) -> AnnealingRun:
        """
        Run simulated annealing on a model whose agent proposes random moves.

        Raises:
            ConfigError: If the model does not support annealing
        """
        settings = settings or AnnealingSettings()
        bundle = self.build(model, params)
        if not self.registry.get(model).supports_annealing:
            raise ConfigError(f"Model {model} does not support annealing")
        if not has_capability(bundle.agent, "calc_weight"):
            raise ConfigError(f"Model {model} does not weigh its states")

        solver = AnnealingSolver(
            bundle.initial,
            settings.initial_temperature,
            rng=random.Random(settings.seed),
        )
        fluctuation = None
        if settings.fluctuation_steps:
            fluctuation = solver.estimate_fluctuation(bundle.env, bundle.agent, settings.fluctuation_steps)
            logger.info("Estimated weight fluctuation: %.4g", fluctuation)

        result = solver.run(bundle.env, bundle.agent, settings.schedule(), settings.final_temperature)
        return AnnealingRun(
            model=model,
            result=result,
            best_state=to_plain(solver.best_state),
            rendered_best=bundle.format_state(solver.best_state),
            fluctuation=fluctuation,
        )

    def run_config(self, config: RunConfig, keep: Optional[int] = None) -> EnumerationResult:
        return self.enumerate(config.model, config.params, config.search, keep=keep)


__all__ = ["SearchService", "EnumerationResult", "AnnealingRun", "to_plain"]
