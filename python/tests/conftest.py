"""Shared pytest fixtures for the tic tac toe tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from backend.models.board import Board, Cell

_SYMBOLS = {"X": Cell.CROSS, "O": Cell.NOUGHT, ".": Cell.EMPTY}


def parse_board(rows: str) -> Board:
    """Build a board from ``"XO. ... ..."``, three rows split by whitespace."""
    flat = [_SYMBOLS[ch] for ch in "".join(rows.split())]
    return Board.from_flat(flat)


@pytest.fixture
def board_from() -> Callable[[str], Board]:
    return parse_board
