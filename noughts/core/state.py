from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

BOARD_CELLS = 9

# Rows, columns, then diagonals. Shared read-only by every query.
LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidStateError(ValueError):
    """Raised when a move is requested for a board that is already finished."""


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    def opponent(self) -> "Cell":
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opponent.")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.EMPTY: ".", Cell.X: "X", Cell.O: "O"}
_PARSE = {".": Cell.EMPTY, "-": Cell.EMPTY, " ": Cell.EMPTY, "X": Cell.X, "O": Cell.O}


@dataclass(frozen=True)
class Board:
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        cells = tuple(Cell(value) for value in self.cells)
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"Board must have exactly {BOARD_CELLS} cells, got {len(cells)}.")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls((Cell.EMPTY,) * BOARD_CELLS)

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Board":
        return cls(tuple(cells))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse a compact board such as ``"X.O/.X./..O"``; ``/`` and newlines are ignored."""
        compact = text.replace("/", "").replace("\n", "")
        try:
            cells = tuple(_PARSE[char.upper()] for char in compact)
        except KeyError as exc:
            raise ValueError(f"Unknown board character {exc.args[0]!r}.") from exc
        return cls(cells)

    def place(self, index: int, symbol: Cell) -> "Board":
        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Cell index {index} out of range.")
        if symbol == Cell.EMPTY:
            raise ValueError("Cannot place an empty mark.")
        if self.cells[index] != Cell.EMPTY:
            raise ValueError(f"Cell {index} is already occupied.")
        cells = list(self.cells)
        cells[index] = symbol
        return Board(tuple(cells))

    def to_numpy(self) -> np.ndarray:
        return np.array([int(cell) for cell in self.cells], dtype=np.int8)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return BOARD_CELLS

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __str__(self) -> str:
        rows = []
        for start in range(0, BOARD_CELLS, 3):
            rows.append("".join(cell.symbol for cell in self.cells[start : start + 3]))
        return "\n".join(rows)


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    for line in LINES:
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def winner(board: Board) -> Optional[Cell]:
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_full(board: Board) -> bool:
    return all(cell != Cell.EMPTY for cell in board)


def empty_indices(board: Board) -> List[int]:
    return [index for index, cell in enumerate(board) if cell == Cell.EMPTY]


def legal_mask(board: Board) -> np.ndarray:
    mask = np.zeros(BOARD_CELLS, dtype=np.int8)
    mask[empty_indices(board)] = 1
    return mask
