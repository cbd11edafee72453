from statewalk.optimize.annealing import (
    AnnealingResult,
    AnnealingSolver,
    geometric_cooling,
    linear_cooling,
)

__all__ = ["AnnealingSolver", "AnnealingResult", "linear_cooling", "geometric_cooling"]
