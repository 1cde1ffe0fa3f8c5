"""Game outcome and controller phase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.board import Cell, Combination


class Phase(StrEnum):
    SELECTING = "selecting"
    CONCLUDED = "concluded"


class OutcomeKind(StrEnum):
    ONGOING = "ongoing"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True)
class Outcome:
    """Result of a game: still ongoing, won by a player, or tied."""

    kind: OutcomeKind
    winner: Cell | None = None
    combination: Combination | None = None

    @classmethod
    def ongoing(cls) -> Outcome:
        return cls(OutcomeKind.ONGOING)

    @classmethod
    def won(cls, winner: Cell, combination: Combination) -> Outcome:
        return cls(OutcomeKind.WON, winner, combination)

    @classmethod
    def tied(cls) -> Outcome:
        return cls(OutcomeKind.TIED)

    @property
    def is_concluded(self) -> bool:
        return self.kind is not OutcomeKind.ONGOING

    @property
    def phase(self) -> Phase:
        return Phase.CONCLUDED if self.is_concluded else Phase.SELECTING
