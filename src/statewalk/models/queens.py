"""
N-queens placement.

The state lists the column of the queen placed in each row so far. Only
columns not attacked by earlier queens are offered, so dead ends simply have
no children and complete boards are the terminal states.
"""

from __future__ import annotations

from typing import Iterator, List

from pydantic import BaseModel, Field

Board = List[int]


class QueensParams(BaseModel):
    size: int = Field(default=8, ge=1, le=16)


class QueensEnvironment:
    def __init__(self, size: int):
        self.size = size

    def apply(self, state: Board, action: int) -> None:
        state.append(action)

    def rollback(self, state: Board, action: int) -> None:
        state.pop()

    def is_terminal(self, state: Board) -> bool:
        return len(state) == self.size


class QueensAgent:
    def __init__(self, size: int):
        self.size = size

    def generate(self, state: Board) -> Iterator[int]:
        row = len(state)
        for col in range(self.size):
            if all(c != col and abs(c - col) != row - r for r, c in enumerate(state)):
                yield col


def format_board(state: Board) -> str:
    return " ".join(str(col) for col in state) or "<empty>"


__all__ = ["QueensParams", "QueensEnvironment", "QueensAgent", "format_board"]
