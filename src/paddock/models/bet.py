"""Bet model."""

from __future__ import annotations

from typing import ClassVar

from paddock.models._csv import CsvInt, CsvRecord


class Bet(CsvRecord):
    """A user's top-three prediction for one race and the points it scored.

    Bets order by ``points`` alone; ``==`` still compares every field.
    """

    CSV_FIELDS: ClassVar[tuple[str, ...]] = (
        "race", "nick", "driver1", "driver2", "driver3", "points",
    )

    race: str
    nick: str
    driver1: str
    driver2: str
    driver3: str
    points: CsvInt

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bet):
            return NotImplemented
        return self.points < other.points

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Bet):
            return NotImplemented
        return self.points <= other.points

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Bet):
            return NotImplemented
        return self.points > other.points

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Bet):
            return NotImplemented
        return self.points >= other.points

    @property
    def podium(self) -> tuple[str, str, str]:
        """Predicted first, second and third place driver codes."""
        return (self.driver1, self.driver2, self.driver3)
