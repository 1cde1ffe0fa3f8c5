"""Core gameplay logic: turns, cursor movement and the game loop."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from backend.engine.gamecursor import move_cursor
from backend.engine.gamerender import render_board, render_frame
from backend.engine.gamestate import GameState
from backend.models.board import AlreadyOccupiedError, Board, Cell, GameConcludedError
from backend.models.events import InputEvent
from backend.models.outcome import Outcome, OutcomeKind, Phase

logger = logging.getLogger(__name__)

MSG_TIE = "Tie!"
MSG_OCCUPIED = "Field already selected"
MSG_CONCLUDED = "Game is already over"
MSG_EXIT = "Press any key to exit."

_TURN_MESSAGES = {
    Cell.CROSS: "Cross' move",
    Cell.NOUGHT: "Nought's move",
}


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw one screen."""

    message: str
    board: str
    sub_message: str

    @property
    def text(self) -> str:
        return render_frame(self.message, self.board, self.sub_message)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, board: Board | None = None, player: Cell = Cell.CROSS) -> None:
        self.state = GameState(board if board is not None else Board())
        self.state.current_player = player
        self.outcome = Outcome.ongoing()
        self.message = ""
        self.refresh()

    @classmethod
    def from_board(cls, board: Board, player: Cell = Cell.CROSS) -> "GamePlay":
        """Create a game session from an existing board (e.g. a test fixture)."""
        return cls(board, player)

    # -- phase ----------------------------------------------------------------

    def refresh(self) -> Phase:
        """Re-evaluate the outcome (win before tie) and set the message."""
        previous = self.outcome
        self.outcome = self.state.board.outcome()

        if self.outcome.kind is OutcomeKind.WON:
            self.message = f"{self.outcome.winner} won!"
        elif self.outcome.kind is OutcomeKind.TIED:
            self.message = MSG_TIE
        else:
            self.message = _TURN_MESSAGES[self.state.current_player]

        if self.outcome.is_concluded and not previous.is_concluded:
            logger.info(
                "Game concluded after %d moves: %s", self.state.moves, self.message
            )
        return self.phase

    @property
    def phase(self) -> Phase:
        return self.outcome.phase

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.CONCLUDED

    # -- input ----------------------------------------------------------------

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event.

        Returns False once the game is concluded, i.e. the event should end
        the session.
        """
        if self.is_over:
            return False

        event = InputEvent(event)
        direction = event.direction
        if direction is not None:
            self.state.cursor = move_cursor(self.state.cursor, direction)
        elif event is InputEvent.CONFIRM:
            self._place()
        return True

    def _place(self) -> None:
        state = self.state
        try:
            state.board.place(state.cursor, state.current_player)
        except AlreadyOccupiedError as exc:
            logger.debug("Rejected placement: %s", exc)
            state.sub_message = MSG_OCCUPIED
        except GameConcludedError as exc:
            logger.warning("Rejected placement: %s", exc)
            state.sub_message = MSG_CONCLUDED
        else:
            logger.debug("%s placed at %s", state.current_player, state.cursor)
            state.sub_message = ""
            state.end_turn()

    # -- rendering ------------------------------------------------------------

    def board_text(self) -> str:
        highlight = None if self.is_over else self.state.cursor
        return render_board(self.state.board, highlight)

    def frame(self) -> Frame:
        return Frame(self.message, self.board_text(), self.state.sub_message)


def play(
    game: GamePlay,
    draw: Callable[[Frame], None],
    read_key: Callable[[], InputEvent],
) -> Outcome:
    """Run *game* until it concludes and the player dismisses the result.

    *draw* is called once after every input event, with the outcome already
    re-evaluated; *read_key* blocks until the next event.
    """
    game.refresh()
    draw(game.frame())

    while not game.is_over:
        game.handle(read_key())
        game.refresh()
        draw(game.frame())

    game.state.sub_message = MSG_EXIT
    draw(game.frame())
    read_key()
    return game.outcome
