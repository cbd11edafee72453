"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Any, Iterable

from rich.table import Table

from statewalk.models.registry import ModelSpec
from statewalk.services.search_service import AnnealingRun, EnumerationResult


def _describe_field(name: str, field: Any) -> str:
    if field.is_required():
        return name
    if field.default_factory is not None:
        return f"{name}=..."
    return f"{name}={field.default!r}"


def build_models_table(specs: Iterable[ModelSpec]) -> Table:
    table = Table(title="Models")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Parameters")
    table.add_column("Annealing")

    for spec in specs:
        params = ", ".join(_describe_field(name, field) for name, field in spec.params_model.model_fields.items())
        table.add_row(spec.name, spec.description, params or "-", "yes" if spec.supports_annealing else "no")
    return table


def build_stats_table(result: EnumerationResult) -> Table:
    table = Table(title=f"Search statistics: {result.model}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    for name, value in result.stats().items():
        table.add_row(name.replace("_", " "), str(value))
    return table


def build_states_table(result: EnumerationResult) -> Table:
    table = Table(title=f"Terminal states (showing {len(result.rendered)} of {result.yielded})")
    table.add_column("#", justify="right")
    table.add_column("State")

    for idx, rendered in enumerate(result.rendered, start=1):
        table.add_row(str(idx), rendered)
    return table


def build_annealing_table(run: AnnealingRun) -> Table:
    table = Table(title=f"Annealing: {run.model}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    res = run.result
    table.add_row("best weight", f"{res.best_weight:g}")
    table.add_row("final weight", f"{res.final_weight:g}")
    table.add_row("iterations", str(res.iterations))
    table.add_row("accepted", str(res.accepted))
    table.add_row("rejected", str(res.rejected))
    table.add_row("final temperature", f"{res.final_temperature:g}")
    if run.fluctuation is not None:
        table.add_row("fluctuation", f"{run.fluctuation:.4g}")
    return table
