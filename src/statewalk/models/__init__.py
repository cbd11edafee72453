"""
Built-in transition models.

- zero_one: binary strings, the canonical enumeration example
- queens: N-queens, a pruned search with dead ends
- path_swap: weighted path with random swap proposals, for annealing
"""

from statewalk.models.path_swap import PairOfNodes, Path, PathAgent, PathEnvironment, PathSwapParams
from statewalk.models.queens import QueensAgent, QueensEnvironment, QueensParams
from statewalk.models.registry import ModelBundle, ModelRegistry, ModelSpec, default_registry
from statewalk.models.zero_one import ZeroOneAgent, ZeroOneEnvironment, ZeroOneParams

__all__ = [
    "ModelBundle",
    "ModelRegistry",
    "ModelSpec",
    "default_registry",
    "ZeroOneParams",
    "ZeroOneEnvironment",
    "ZeroOneAgent",
    "QueensParams",
    "QueensEnvironment",
    "QueensAgent",
    "PathSwapParams",
    "Path",
    "PairOfNodes",
    "PathEnvironment",
    "PathAgent",
]
