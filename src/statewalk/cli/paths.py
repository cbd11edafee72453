from __future__ import annotations

"""Utilities for resolving output paths."""

from pathlib import Path


def outputs_dir() -> Path:
    return Path.cwd() / "outputs"


def runs_dir() -> Path:
    return outputs_dir() / "runs"


def resolve_run_path(name: str) -> str:
    """Resolve an output filename.

    Bare names land under outputs/runs; anything with a directory part is used
    as given. A missing .yaml extension is added.
    """
    p = Path(name)
    if not p.name.endswith(".yaml"):
        p = p.with_name(f"{p.name}.yaml")
    if p.parent == Path("."):
        runs_dir().mkdir(parents=True, exist_ok=True)
        return str(runs_dir() / p.name)
    return str(p)
