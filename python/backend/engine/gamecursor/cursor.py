"""Cursor navigation over the board, wrapping at the edges."""

from __future__ import annotations

from backend.models.board import SIZE, Position, index_of
from backend.models.events import Direction

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def _wrap(value: int) -> int:
    if value == 0:
        return SIZE
    if value == SIZE + 1:
        return 1
    return value


def move_cursor(position: Position, direction: Direction | str) -> Position:
    """Return *position* shifted one step in *direction*.

    Leaving the grid on one side re-enters on the opposite side, so
    ``move_cursor((1, 2), Direction.UP)`` is ``(3, 2)``. Raises
    ``ValueError`` for an out-of-range position or a non-directional value.
    """
    index_of(position)  # bounds check
    dr, dc = _OFFSETS[Direction(direction)]
    row, col = position
    return _wrap(row + dr), _wrap(col + dc)
