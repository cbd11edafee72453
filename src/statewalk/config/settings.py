from __future__ import annotations

"""Schema definitions for run configuration YAML files."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from statewalk.optimize.annealing import CoolingSchedule, geometric_cooling, linear_cooling


class SearchSettings(BaseModel):
    limit: Optional[int] = Field(default=None, ge=1, description="Stop after this many terminal states")
    max_depth: Optional[int] = Field(default=None, ge=0, description="Prune below this depth")
    max_nodes: Optional[int] = Field(default=None, ge=1, description="Expand at most this many nodes")
    time_budget: Optional[float] = Field(default=None, gt=0, description="Seconds before pruning everything")
    check_inverse: bool = Field(default=False, description="Verify every rollback (slow)")


class AnnealingSettings(BaseModel):
    initial_temperature: float = Field(default=100.0, gt=0)
    final_temperature: float = Field(default=1.0, ge=0)
    cooling: Literal["linear", "geometric"] = "linear"
    step: float = Field(default=0.5, gt=0, description="Linear cooling decrement")
    alpha: float = Field(default=0.95, gt=0, lt=1, description="Geometric cooling factor")
    seed: Optional[int] = None
    fluctuation_steps: int = Field(default=0, ge=0, description="Random-walk steps to estimate before annealing")

    @model_validator(mode="after")
    def _check_range(self) -> "AnnealingSettings":
        if self.final_temperature >= self.initial_temperature:
            raise ValueError("final_temperature must be below initial_temperature")
        if self.cooling == "geometric" and self.final_temperature == 0:
            raise ValueError("geometric cooling never reaches a final_temperature of 0")
        return self

    def schedule(self) -> CoolingSchedule:
        if self.cooling == "geometric":
            return geometric_cooling(self.alpha)
        return linear_cooling(self.step)


class RunConfig(BaseModel):
    model: str
    params: Dict[str, Any] = Field(default_factory=dict)
    search: SearchSettings = Field(default_factory=SearchSettings)
    annealing: AnnealingSettings = Field(default_factory=AnnealingSettings)


__all__ = ["SearchSettings", "AnnealingSettings", "RunConfig"]
