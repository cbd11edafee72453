from __future__ import annotations

"""Registry of built-in transition models, addressable by name from configs and the CLI."""

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, Field

from statewalk.models.path_swap import Path, PathAgent, PathEnvironment, PathSwapParams, format_path
from statewalk.models.queens import QueensAgent, QueensEnvironment, QueensParams, format_board
from statewalk.models.zero_one import ZeroOneAgent, ZeroOneEnvironment, ZeroOneParams, format_bits

T = TypeVar("T")


@dataclass
class ModelBundle:
    """Everything needed to start a search: transition model, agent and root state."""

    env: Any
    agent: Any
    initial: Any
    format_state: Callable[[Any], str] = repr


class ModelSpec(BaseModel):
    name: str
    description: str
    params_model: Type[BaseModel]
    builder: Callable[[Any], ModelBundle]
    supports_annealing: bool = False

    model_config = {"arbitrary_types_allowed": True}

    def build(self, params: Optional[Dict[str, Any]] = None) -> ModelBundle:
        """Validate ``params`` against the model's schema and build a fresh bundle."""
        validated = self.params_model.model_validate(params or {})
        return self.builder(validated)


class NameRegistry(BaseModel, Generic[T]):
    items: Dict[str, T] = Field(default_factory=dict)

    def register(self, name: str, item: T) -> None:
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        self.items[name] = item

    def get(self, name: str) -> T:
        if name not in self.items:
            available = ", ".join(sorted(self.items.keys()))
            raise KeyError(f"Unknown: {name}. Available: {available}")
        return self.items[name]

    def all(self) -> Iterable[T]:
        return self.items.values()

    def names(self) -> Iterable[str]:
        return sorted(self.items.keys())


class ModelRegistry(NameRegistry[ModelSpec]):
    model_config = {"arbitrary_types_allowed": True}

    def add(self, spec: ModelSpec) -> None:
        self.register(spec.name, spec)

    def register_defaults(self) -> None:
        """Register the built-in models."""
        if "zero_one" not in self.items:
            self.add(
                ModelSpec(
                    name="zero_one",
                    description="Binary strings of a fixed length",
                    params_model=ZeroOneParams,
                    builder=_build_zero_one,
                )
            )
        if "queens" not in self.items:
            self.add(
                ModelSpec(
                    name="queens",
                    description="Non-attacking queen placements on an N x N board",
                    params_model=QueensParams,
                    builder=_build_queens,
                )
            )
        if "path_swap" not in self.items:
            self.add(
                ModelSpec(
                    name="path_swap",
                    description="Heaviest Hamiltonian path by random inner swaps",
                    params_model=PathSwapParams,
                    builder=_build_path_swap,
                    supports_annealing=True,
                )
            )


def _build_zero_one(params: ZeroOneParams) -> ModelBundle:
    return ModelBundle(
        env=ZeroOneEnvironment(params.size),
        agent=ZeroOneAgent(params.prune_bit),
        initial=[],
        format_state=format_bits,
    )


def _build_queens(params: QueensParams) -> ModelBundle:
    return ModelBundle(
        env=QueensEnvironment(params.size),
        agent=QueensAgent(params.size),
        initial=[],
        format_state=format_board,
    )


def _build_path_swap(params: PathSwapParams) -> ModelBundle:
    env = PathEnvironment(params.weights)
    agent = PathAgent(env, random.Random(params.seed))
    initial = env.init_weight(Path.identity(len(params.weights)))
    return ModelBundle(env=env, agent=agent, initial=initial, format_state=format_path)


def default_registry() -> ModelRegistry:
    registry = ModelRegistry()
    registry.register_defaults()
    return registry


__all__ = ["ModelBundle", "ModelSpec", "NameRegistry", "ModelRegistry", "default_registry"]
