from __future__ import annotations

"""Loading run configurations from YAML."""

import logging
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from statewalk.config.settings import RunConfig
from statewalk.io.errors import LoaderError

logger = logging.getLogger(__name__)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: str) -> RunConfig:
    """Load a run configuration.

    Expected format:
    model: queens
    params:
      size: 6
    search:
      limit: 10
    annealing:
      initial_temperature: 100
      cooling: linear
      step: 0.5
    """
    try:
        data = _read_yaml_file(path)
    except OSError as exc:
        raise LoaderError(path, "Cannot read configuration file", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Configuration must be a mapping")
    try:
        config = RunConfig.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid run configuration", cause=exc) from exc
    logger.debug("Loaded configuration for model %s from %s", config.model, path)
    return config


__all__ = ["load_config"]
