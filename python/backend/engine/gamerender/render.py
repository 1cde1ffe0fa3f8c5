"""Fixed-layout ASCII rendering of the board."""

from __future__ import annotations

from backend.models.board import SIZE, Board, Cell, Position, index_of

SEPARATOR = "-" * 24
TITLE = "Tic Tac Toe"

_GLYPHS: dict[Cell, tuple[str, str, str]] = {
    Cell.CROSS: ("00  00", "  00  ", "00  00"),
    Cell.NOUGHT: ("  00  ", "00  00", "  00  "),
    Cell.EMPTY: ("      ", "      ", "      "),
}


def _cell_rows(cell: Cell, highlighted: bool) -> tuple[str, ...]:
    rows = _GLYPHS[cell]
    if highlighted:
        return tuple(r.replace(" ", "#") for r in rows)
    return rows


def render_board(board: Board, highlight: Position | None = None) -> str:
    """Return the 11-line text block for *board*.

    Each cell is three rows of six characters; the cell at *highlight* has
    its blanks filled with ``#``.
    """
    selected = index_of(highlight) if highlight is not None else -1

    lines: list[str] = []
    for r in range(SIZE):
        if r:
            lines.append(f" {SEPARATOR}")
        cells = [
            _cell_rows(board.cells[r * SIZE + c], r * SIZE + c == selected)
            for c in range(SIZE)
        ]
        for k in range(3):
            lines.append(" " + " | ".join(cell[k] for cell in cells) + " ")

    # the closing line has no trailing pad
    lines[-1] = lines[-1][:-1]
    return "\n".join(lines)


def render_frame(message: str, board_text: str, sub_message: str) -> str:
    """Compose the panel body: message, blank, board, blank, sub-message."""
    return f" {message}\n\n{board_text}\n\n {sub_message}"
