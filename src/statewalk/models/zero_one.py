"""
Binary strings of a fixed length.

The state is a list of booleans built one bit at a time; every path becomes
terminal at ``size`` bits, so an unpruned run yields ``2 ** size`` strings,
``True`` branches first.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

Bits = List[bool]


class ZeroOneParams(BaseModel):
    size: int = Field(default=3, ge=0)
    prune_bit: Optional[int] = Field(default=None, ge=0, description="Prune subtrees where this bit is set")


class ZeroOneEnvironment:
    def __init__(self, max_size: int):
        self.max_size = max_size

    def apply(self, state: Bits, action: bool) -> None:
        state.append(action)

    def rollback(self, state: Bits, action: bool) -> None:
        state.pop()

    def is_terminal(self, state: Bits) -> bool:
        return len(state) >= self.max_size


class ZeroOneAgent:
    def __init__(self, prune_bit: Optional[int] = None):
        self.prune_bit = prune_bit

    def generate(self, state: Bits) -> Tuple[bool, bool]:
        return (True, False)

    def should_continue(self, state: Bits) -> bool:
        if self.prune_bit is None or len(state) <= self.prune_bit:
            return True
        return not state[self.prune_bit]


def format_bits(state: Bits) -> str:
    return "".join("1" if bit else "0" for bit in state) or "<empty>"


__all__ = ["ZeroOneParams", "ZeroOneEnvironment", "ZeroOneAgent", "format_bits"]
