"""
statewalk: lazy, in-place enumeration of combinatorial state spaces.

A search is described by a reversible transition model (apply / rollback),
an actions generator, and optional terminal / continuation policies. The
engine walks the implied tree depth-first while mutating a single state.

Example:
    from statewalk import RecursiveStateGenerator
    from statewalk.models import ZeroOneAgent, ZeroOneEnvironment

    gen = RecursiveStateGenerator([], ZeroOneEnvironment(3), ZeroOneAgent())
    assert gen.count() == 8
"""

from statewalk.core import (
    CheckedEnvironment,
    RecursiveStateGenerator,
    RecursiveStateVisitor,
    StreamingIterator,
    VisitMode,
)
from statewalk.optimize import AnnealingSolver

__version__ = "0.1.0"

__all__ = [
    "CheckedEnvironment",
    "RecursiveStateGenerator",
    "RecursiveStateVisitor",
    "StreamingIterator",
    "VisitMode",
    "AnnealingSolver",
    "__version__",
]
