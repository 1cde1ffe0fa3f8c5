"""Board model for the tic tac toe game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.outcome import Outcome

logger = logging.getLogger(__name__)

SIZE = 3

Position = tuple[int, int]
Combination = tuple[int, int, int]

# Scan order matters: the first uniform line wins.
WIN_COMBINATIONS: tuple[Combination, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Cell(StrEnum):
    EMPTY = "_"
    CROSS = "Cross"
    NOUGHT = "Nought"

    @property
    def opponent(self) -> Cell:
        if self is Cell.CROSS:
            return Cell.NOUGHT
        if self is Cell.NOUGHT:
            return Cell.CROSS
        raise ValueError("An empty cell has no opponent.")


class PlacementError(Exception):
    """A marker could not be placed; the board is left untouched."""


class AlreadyOccupiedError(PlacementError):
    def __init__(self, position: Position, cell: Cell) -> None:
        super().__init__(f"Field {position} already holds {cell}.")
        self.position = position
        self.cell = cell


class GameConcludedError(PlacementError):
    def __init__(self, winner: Cell) -> None:
        super().__init__(f"Game already won by {winner}.")
        self.winner = winner


def index_of(position: Position) -> int:
    """Map a 1-based ``(row, col)`` position to its flat index.

    Raises ``ValueError`` for positions outside the 3×3 grid.
    """
    row, col = position
    if not 1 <= row <= SIZE:
        raise ValueError(f"Row {row} out of bounds.")
    if not 1 <= col <= SIZE:
        raise ValueError(f"Column {col} out of bounds.")
    return (row - 1) * SIZE + (col - 1)


@dataclass
class Board:
    """Represents the 3×3 board.

    Cells are stored as a flat row-major list. The first winning line found
    is cached, after which the board accepts no further placements.
    """

    cells: list[Cell] = field(default_factory=lambda: [Cell.EMPTY] * (SIZE * SIZE))
    _win: tuple[Cell, Combination] | None = field(default=None, init=False, repr=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[Cell]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat([Cell.CROSS, Cell.EMPTY, ...])
        """
        if len(flat) != SIZE * SIZE:
            raise ValueError(
                f"Expected {SIZE * SIZE} cells for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        return cls(cells=[Cell(c) for c in flat])

    # -- queries --------------------------------------------------------------

    def get(self, position: Position) -> Cell:
        return self.cells[index_of(position)]

    def evaluate_win(self) -> tuple[Cell, Combination] | None:
        """Return ``(player, combination)`` for the first completed line.

        Lines are scanned rows first, then columns, then diagonals. Once a
        win is found it is cached and returned without rescanning.
        """
        if self._win is not None:
            return self._win

        for combination in WIN_COMBINATIONS:
            a, b, c = (self.cells[i] for i in combination)
            if a is not Cell.EMPTY and a == b == c:
                self._win = (a, combination)
                logger.debug("%s completed line %s", a, combination)
                break
        return self._win

    def evaluate_tie(self) -> bool:
        """Return True if no cell is empty.

        This does not look at winning lines: call ``evaluate_win`` first, a
        full board holding a line is a win and not a tie.
        """
        return Cell.EMPTY not in self.cells

    def outcome(self) -> Outcome:
        """Evaluate win before tie and return the resulting ``Outcome``."""
        win = self.evaluate_win()
        if win is not None:
            return Outcome.won(*win)
        if self.evaluate_tie():
            return Outcome.tied()
        return Outcome.ongoing()

    # -- mutation -------------------------------------------------------------

    def place(self, position: Position, player: Cell) -> None:
        """Write *player* into the cell at *position*.

        Raises ``AlreadyOccupiedError`` if the cell is taken and
        ``GameConcludedError`` if a line is already complete.
        """
        if player is Cell.EMPTY:
            raise ValueError("Cannot place an empty marker.")

        idx = index_of(position)
        current = self.cells[idx]
        if current is not Cell.EMPTY:
            raise AlreadyOccupiedError(position, current)

        win = self.evaluate_win()
        if win is not None:
            raise GameConcludedError(win[0])

        self.cells[idx] = player

    def copy(self) -> Board:
        board = Board(cells=self.cells[:])
        board._win = self._win
        return board
