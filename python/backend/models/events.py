"""Input events delivered to the game controller."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class InputEvent(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    OTHER = "other"

    @property
    def direction(self) -> Direction | None:
        """The cursor direction for arrow events, ``None`` otherwise."""
        try:
            return Direction(self.value)
        except ValueError:
            return None
