from __future__ import annotations

"""Writing enumeration results to YAML."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml


def build_states_document(model: str, params: Dict[str, Any], states: List[Any], stats: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "model": model,
        "params": params,
        "created_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "count": len(states),
        "stats": stats,
        "states": states,
    }


def save_states_to_yaml(document: Dict[str, Any], file_path: str) -> None:
    """
    Save an enumeration document to a YAML file.

    Args:
        document: Mapping built by ``build_states_document``; states must be plain data
        file_path: Output file path
    """
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, default_flow_style=False, indent=2, sort_keys=False)


__all__ = ["build_states_document", "save_states_to_yaml"]
