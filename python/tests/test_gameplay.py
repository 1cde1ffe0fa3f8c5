"""Game controller and game loop, driven by scripted key sequences.

Keys are fed through ``play`` exactly as a frontend would; every frame
handed to the renderer is recorded for inspection.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from backend.engine.gameplay import Frame, GamePlay, play
from backend.engine.gameplay.game import MSG_CONCLUDED, MSG_EXIT, MSG_OCCUPIED
from backend.models.board import Cell, Position
from backend.models.events import InputEvent
from backend.models.outcome import OutcomeKind, Phase

# -- helpers ------------------------------------------------------------------


def _keys_for(targets: Iterable[Position], start: Position = (1, 1)) -> list[InputEvent]:
    """Arrow presses (using wrap-around) plus confirm for each target."""
    keys: list[InputEvent] = []
    row, col = start
    for tr, tc in targets:
        keys += [InputEvent.DOWN] * ((tr - row) % 3)
        keys += [InputEvent.RIGHT] * ((tc - col) % 3)
        keys.append(InputEvent.CONFIRM)
        row, col = tr, tc
    return keys


class _Script:
    """Feeds scripted keys and records drawn frames."""

    def __init__(self, keys: Iterable[InputEvent]) -> None:
        self._keys = iter(keys)
        self.frames: list[Frame] = []
        self.reads = 0

    def draw(self, frame: Frame) -> None:
        self.frames.append(frame)

    def read_key(self) -> InputEvent:
        self.reads += 1
        return next(self._keys)


_WIN_MOVES = [(1, 1), (2, 1), (1, 2), (2, 2), (1, 3)]
_TIE_MOVES = [(1, 1), (1, 2), (1, 3), (2, 2), (2, 1), (2, 3), (3, 2), (3, 1), (3, 3)]


# -- controller ---------------------------------------------------------------


def test_initial_state() -> None:
    game = GamePlay()
    assert game.phase is Phase.SELECTING
    assert game.state.current_player is Cell.CROSS
    assert game.state.cursor == (1, 1)
    assert game.message == "Cross' move"
    assert game.state.sub_message == ""
    assert game.board_text().startswith(" ######")


def test_directional_event_moves_cursor_only() -> None:
    game = GamePlay()
    assert game.handle(InputEvent.UP) is True
    assert game.state.cursor == (3, 1)
    assert game.handle(InputEvent.LEFT) is True
    assert game.state.cursor == (3, 3)
    assert game.state.board.cells == [Cell.EMPTY] * 9
    assert game.state.current_player is Cell.CROSS


def test_confirm_places_and_toggles_player() -> None:
    game = GamePlay()
    game.handle(InputEvent.CONFIRM)
    assert game.state.board.get((1, 1)) is Cell.CROSS
    assert game.state.current_player is Cell.NOUGHT
    assert game.state.moves == 1

    game.refresh()
    assert game.message == "Nought's move"


def test_confirm_on_occupied_cell_sets_sub_message() -> None:
    game = GamePlay()
    game.handle(InputEvent.CONFIRM)
    game.handle(InputEvent.CONFIRM)

    assert game.state.sub_message == MSG_OCCUPIED == "Field already selected"
    assert game.state.current_player is Cell.NOUGHT
    assert game.state.board.get((1, 1)) is Cell.CROSS


def test_successful_placement_clears_sub_message() -> None:
    game = GamePlay()
    game.handle(InputEvent.CONFIRM)
    game.handle(InputEvent.CONFIRM)
    game.handle(InputEvent.RIGHT)
    game.handle(InputEvent.CONFIRM)

    assert game.state.sub_message == ""
    assert game.state.board.get((1, 2)) is Cell.NOUGHT


def test_other_event_is_ignored() -> None:
    game = GamePlay()
    assert game.handle(InputEvent.OTHER) is True
    assert game.state.cursor == (1, 1)
    assert game.state.board.cells == [Cell.EMPTY] * 9
    assert game.state.sub_message == ""


def test_placement_on_unnoticed_win_is_recovered(board_from) -> None:
    game = GamePlay()
    # Line completed behind the controller's back, before the next refresh.
    game.state.board.cells[:] = board_from("XXX OO. ...").cells
    game.state.cursor = (3, 3)

    game.handle(InputEvent.CONFIRM)

    assert game.state.sub_message == MSG_CONCLUDED
    assert game.state.board.get((3, 3)) is Cell.EMPTY


def test_won_board_concludes_without_highlight(board_from) -> None:
    game = GamePlay.from_board(board_from("OOO XX. X.."), player=Cell.CROSS)

    assert game.is_over
    assert game.message == "Nought won!"
    assert game.outcome.combination == (0, 1, 2)
    assert "#" not in game.board_text()
    assert game.handle(InputEvent.CONFIRM) is False


def test_full_board_concludes_as_tie(board_from) -> None:
    game = GamePlay.from_board(board_from("XOX XOO OXX"))
    assert game.is_over
    assert game.outcome.kind is OutcomeKind.TIED
    assert game.message == "Tie!"


def test_win_takes_priority_over_tie(board_from) -> None:
    game = GamePlay.from_board(board_from("XXX OOX XOO"))
    assert game.outcome.kind is OutcomeKind.WON
    assert game.message == "Cross won!"


# -- game loop ----------------------------------------------------------------


@pytest.mark.parametrize("last_key", list(InputEvent), ids=str)
def test_play_to_win(last_key: InputEvent) -> None:
    keys = _keys_for(_WIN_MOVES) + [last_key]
    script = _Script(keys)

    outcome = play(GamePlay(), script.draw, script.read_key)

    assert outcome.kind is OutcomeKind.WON
    assert outcome.winner is Cell.CROSS
    assert outcome.combination == (0, 1, 2)
    # every key was consumed and nothing more was read
    assert script.reads == len(keys)

    last = script.frames[-1]
    assert last.message == "Cross won!"
    assert last.sub_message == MSG_EXIT == "Press any key to exit."
    assert "#" not in last.board


def test_play_to_tie() -> None:
    keys = _keys_for(_TIE_MOVES) + [InputEvent.OTHER]
    script = _Script(keys)

    outcome = play(GamePlay(), script.draw, script.read_key)

    assert outcome.kind is OutcomeKind.TIED
    assert outcome.winner is None
    assert script.reads == len(keys)
    assert script.frames[-1].message == "Tie!"


def test_play_draws_after_every_event() -> None:
    keys = _keys_for(_WIN_MOVES) + [InputEvent.OTHER]
    script = _Script(keys)

    play(GamePlay(), script.draw, script.read_key)

    assert len(script.frames) >= len(keys)


def test_play_shows_turn_and_occupied_messages() -> None:
    keys = [InputEvent.CONFIRM, InputEvent.CONFIRM] + _keys_for(
        [(2, 1), (1, 2), (2, 2), (1, 3)]
    ) + [InputEvent.OTHER]
    script = _Script(keys)

    play(GamePlay(), script.draw, script.read_key)

    messages = [f.message for f in script.frames]
    assert messages[0] == "Cross' move"
    assert "Nought's move" in messages
    assert any(f.sub_message == MSG_OCCUPIED for f in script.frames)
    assert messages[-1] == "Cross won!"


def test_frame_text_is_panel_body() -> None:
    frame = GamePlay().frame()
    lines = frame.text.split("\n")
    assert lines[0] == " Cross' move"
    assert lines[2] == frame.board.split("\n")[0]


def test_frame_after_confirm_shows_next_turn() -> None:
    script = _Script([InputEvent.CONFIRM, InputEvent.OTHER, InputEvent.RIGHT])
    game = GamePlay()
    players: list[Cell] = []

    def _draw(frame: Frame) -> None:
        script.draw(frame)
        players.append(game.state.current_player)

    with pytest.raises(StopIteration):
        play(game, _draw, script.read_key)

    assert [f.message for f in script.frames] == [
        "Cross' move",
        "Nought's move",
        "Nought's move",
        "Nought's move",
    ]
    assert players == [Cell.CROSS, Cell.NOUGHT, Cell.NOUGHT, Cell.NOUGHT]


def test_winning_move_frame_is_already_concluded() -> None:
    keys = _keys_for(_WIN_MOVES) + [InputEvent.OTHER]
    script = _Script(keys)

    play(GamePlay(), script.draw, script.read_key)

    # the frame drawn right after the winning confirm
    after_win = script.frames[-2]
    assert after_win.message == "Cross won!"
    assert "#" not in after_win.board
    assert all("#" not in f.board for f in script.frames if f.message == "Cross won!")


def test_constructor_accepts_board_and_player(board_from) -> None:
    board = board_from("X.. ... ...")
    game = GamePlay(board, player=Cell.NOUGHT)

    assert game.state.board is board
    assert game.message == "Nought's move"
    assert GamePlay.from_board(board, Cell.NOUGHT).state.current_player is Cell.NOUGHT
