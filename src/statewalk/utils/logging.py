from __future__ import annotations
import logging
import time
from functools import wraps
from typing import Any, Callable

from rich.logging import RichHandler

PACKAGE_LOGGER = "statewalk"


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger (idempotent)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls and their duration at DEBUG level; failures are logged and re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s", func.__qualname__)
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__qualname__, e)
                raise
            logger.debug("%s finished in %.3fs", func.__qualname__, time.perf_counter() - started)
            return result

        return _wrapper

    return _decorator
