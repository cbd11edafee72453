from .settings import AnnealingSettings, RunConfig, SearchSettings

__all__ = ["RunConfig", "SearchSettings", "AnnealingSettings"]
