"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board, Cell, Position


class GameState:
    """Holds the board, whose turn it is, the cursor, and the sub-message."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.current_player: Cell = Cell.CROSS
        self.cursor: Position = (1, 1)
        self.sub_message: str = ""
        self.moves: int = 0

    # -- turns ----------------------------------------------------------------

    def end_turn(self) -> None:
        self.current_player = self.current_player.opponent
        self.moves += 1
