"""
Statewalk CLI: list models, enumerate their state spaces, and run annealing.

Searches are configured either with command-line options or with a YAML run
configuration (``--config``); explicit options override the file.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from statewalk.cli.formatters import (
    build_annealing_table,
    build_models_table,
    build_states_table,
    build_stats_table,
)
from statewalk.cli.load_helpers import load_config_or_exit, parse_params
from statewalk.cli.paths import resolve_run_path
from statewalk.config.settings import AnnealingSettings, RunConfig, SearchSettings
from statewalk.core.errors import ConfigError, InvertibilityError
from statewalk.io.export import build_states_document, save_states_to_yaml
from statewalk.services.search_service import SearchService
from statewalk.utils.logging import configure_logging

app = typer.Typer(help="Statewalk CLI: enumerate state spaces of reversible transition models.")
console = Console()


def _resolve_config(
    model: Optional[str],
    config_path: Optional[str],
    params: Optional[list[str]],
    verbose_load: bool,
) -> RunConfig:
    if config_path:
        config = load_config_or_exit(config_path, console=console, verbose_errors=verbose_load)
    elif model:
        config = RunConfig(model=model)
    else:
        console.print("[red]Provide a model name or --config[/red]")
        raise typer.Exit(code=2)

    if model and model != config.model:
        config = config.model_copy(update={"model": model, "params": {}})
    overrides = parse_params(params, console=console)
    if overrides:
        config.params = {**config.params, **overrides}
    return config


@app.command("models")
def list_models() -> None:
    """List the built-in transition models."""
    service = SearchService()
    console.print(build_models_table(service.registry.all()))


@app.command("enumerate")
def enumerate_states(
    model: Optional[str] = typer.Argument(None, help="Model name (see 'models')"),
    params: list[str] = typer.Option([], "--param", "-p", help="key=value model parameters"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML run configuration"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Stop after this many terminal states"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=0, help="Prune below this depth"),
    max_nodes: Optional[int] = typer.Option(None, "--max-nodes", min=1, help="Expand at most this many nodes"),
    time_budget: Optional[float] = typer.Option(None, "--time-budget", help="Seconds before pruning everything"),
    check_inverse: bool = typer.Option(False, "--check-inverse", help="Verify every rollback (slow)"),
    show: int = typer.Option(10, "--show", min=0, help="Number of states to print"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write kept states to this YAML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    verbose_load: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Enumerate the terminal states of a model."""
    configure_logging(verbose=verbose, quiet=not verbose)
    config = _resolve_config(model, config_path, params, verbose_load)

    overrides = {
        key: value
        for key, value in {
            "limit": limit,
            "max_depth": max_depth,
            "max_nodes": max_nodes,
            "time_budget": time_budget,
        }.items()
        if value is not None
    }
    if check_inverse:
        overrides["check_inverse"] = True
    try:
        settings = SearchSettings.model_validate({**config.search.model_dump(), **overrides})
    except ValueError as exc:
        console.print(f"[red]Invalid search settings:[/red] {exc}")
        raise typer.Exit(code=2)

    service = SearchService()
    try:
        result = service.enumerate(config.model, config.params, settings, keep=None if output else show)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    except InvertibilityError as exc:
        console.print(f"[red]Rollback is not an exact inverse:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[bold]{result.model}[/bold]: {result.yielded} terminal state(s)")
    if show and result.rendered:
        shown = result.model_copy(update={"rendered": result.rendered[:show]})
        console.print(build_states_table(shown))
    console.print(build_stats_table(result))
    if result.truncated:
        console.print("[yellow]Stopped at --limit[/yellow]")

    if output:
        path = resolve_run_path(output)
        save_states_to_yaml(build_states_document(result.model, result.params, result.states, result.stats()), path)
        console.print(f"Saved: {path}")


@app.command()
def anneal(
    model: Optional[str] = typer.Argument(None, help="Model name (must support annealing)"),
    params: list[str] = typer.Option([], "--param", "-p", help="key=value model parameters"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML run configuration"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for acceptance draws"),
    initial_temperature: Optional[float] = typer.Option(None, "--initial-temp", help="Starting temperature"),
    final_temperature: Optional[float] = typer.Option(None, "--final-temp", help="Stop at this temperature"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    verbose_load: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Run simulated annealing on a model."""
    configure_logging(verbose=verbose, quiet=not verbose)
    config = _resolve_config(model, config_path, params, verbose_load)

    overrides = {
        key: value
        for key, value in {
            "seed": seed,
            "initial_temperature": initial_temperature,
            "final_temperature": final_temperature,
        }.items()
        if value is not None
    }
    try:
        settings = AnnealingSettings.model_validate({**config.annealing.model_dump(), **overrides})
    except ValueError as exc:
        console.print(f"[red]Invalid annealing settings:[/red] {exc}")
        raise typer.Exit(code=2)

    service = SearchService()
    try:
        run = service.anneal(config.model, config.params, settings)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    console.print(build_annealing_table(run))
    console.print(f"[green]Best state:[/green] {run.rendered_best}")


@app.command("check-config")
def check_config(
    config_path: str = typer.Argument(..., help="YAML run configuration"),
    verbose_load: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate a run configuration and the model parameters it names."""
    config = load_config_or_exit(config_path, console=console, verbose_errors=verbose_load)
    try:
        SearchService().build(config.model, config.params)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] {config.model} configuration is valid")


if __name__ == "__main__":  # pragma: no cover
    app()
