from __future__ import annotations

"""Shared helpers for turning configuration errors into CLI-friendly exits."""

from pathlib import Path
from typing import Dict, List, Optional

import typer
import yaml
from rich.console import Console

from statewalk.config.settings import RunConfig
from statewalk.io.config_loader import load_config
from statewalk.io.errors import LoaderError


def load_config_or_exit(path: str, *, console: Console, verbose_errors: bool = False) -> RunConfig:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {path}")
        raise typer.Exit(code=1)
    try:
        return load_config(path)
    except LoaderError as err:
        if verbose_errors and err.problems:
            details = "\n".join(f"  - {problem}" for problem in err.problems)
            console.print(f"[red]Failed to load configuration:[/red] {err.reason} ({err.display_path})\n{details}")
        else:
            console.print(f"[red]Failed to load configuration:[/red] {err}")
        raise typer.Exit(code=1)


def parse_params(items: Optional[List[str]], *, console: Console) -> Dict[str, object]:
    """Parse ``key=value`` pairs; values are read as YAML scalars (``6`` -> 6, ``null`` -> None)."""
    params: Dict[str, object] = {}
    for item in items or []:
        if "=" not in item:
            console.print(f"[red]Bad --param[/red] (expected key=value): {item}")
            raise typer.Exit(code=2)
        key, value = item.split("=", 1)
        try:
            params[key.strip()] = yaml.safe_load(value.strip())
        except yaml.YAMLError:
            console.print(f"[red]Bad --param value[/red]: {item}")
            raise typer.Exit(code=2)
    return params


__all__ = ["load_config_or_exit", "parse_params"]
