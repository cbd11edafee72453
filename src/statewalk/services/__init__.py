"""Service Layer: search orchestration."""

from __future__ import annotations

from .search_service import AnnealingRun, EnumerationResult, SearchService

__all__ = ["SearchService", "EnumerationResult", "AnnealingRun"]
