from __future__ import annotations

"""Errors raised while reading run configuration files."""

from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from statewalk.core.errors import StateWalkError


def validation_problems(errors: Iterable[dict]) -> List[str]:
    """Turn pydantic error dicts into ``field.path: message`` lines."""
    problems = []
    for err in errors:
        loc = ".".join(str(entry) for entry in err.get("loc", ())) or "<root>"
        problems.append(f"{loc}: {err.get('msg') or err.get('type') or 'validation error'}")
    return problems


def format_validation_errors(errors: Iterable[dict], limit: int = 3) -> str:
    """One-line summary of at most ``limit`` problems."""
    problems = validation_problems(errors)
    shown = problems[:limit]
    if len(problems) > limit:
        shown.append(f"... ({len(problems) - limit} more)")
    return "; ".join(shown)


class LoaderError(StateWalkError):
    """A configuration file could not be turned into a RunConfig.

    ``reason`` says which stage failed (reading, YAML parsing, schema
    validation). For schema failures ``problems`` lists every offending field.
    """

    def __init__(self, file_path: str, reason: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.reason = reason
        self.cause = cause
        self.problems: List[str] = validation_problems(cause.errors()) if isinstance(cause, ValidationError) else []
        super().__init__(self.summary())

    @property
    def display_path(self) -> str:
        path = Path(self.file_path)
        try:
            return str(path.resolve().relative_to(Path.cwd().resolve()))
        except ValueError:
            return self.file_path

    def summary(self) -> str:
        head = f"{self.reason} ({self.display_path})"
        if self.problems:
            return f"{head}: {format_validation_errors(self.cause.errors())}"
        if self.cause is not None:
            return f"{head}: {self.cause}"
        return head


__all__ = ["LoaderError", "format_validation_errors", "validation_problems"]
