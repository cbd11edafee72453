"""Exception types shared across statewalk."""

from __future__ import annotations

from typing import Any


class StateWalkError(RuntimeError):
    """Base class for errors raised by statewalk."""


class InvertibilityError(StateWalkError):
    """Raised when a rollback does not restore the state seen before its apply."""

    def __init__(self, action: Any, expected: Any, actual: Any):
        self.action = action
        self.expected = expected
        self.actual = actual
        super().__init__(f"rollback of {action!r} produced {actual!r}, expected {expected!r}")


class ConfigError(StateWalkError):
    """Raised when a run configuration cannot be turned into a search."""


__all__ = ["StateWalkError", "InvertibilityError", "ConfigError"]
