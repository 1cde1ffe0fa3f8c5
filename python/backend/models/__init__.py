from backend.models.board import (
    WIN_COMBINATIONS,
    AlreadyOccupiedError,
    Board,
    Cell,
    GameConcludedError,
    PlacementError,
    Position,
)
from backend.models.events import Direction, InputEvent
from backend.models.outcome import Outcome, OutcomeKind, Phase

__all__ = [
    "WIN_COMBINATIONS",
    "AlreadyOccupiedError",
    "Board",
    "Cell",
    "Direction",
    "GameConcludedError",
    "InputEvent",
    "Outcome",
    "OutcomeKind",
    "Phase",
    "PlacementError",
    "Position",
]
