"""User model."""

from __future__ import annotations

from typing import ClassVar

from paddock.models._csv import CsvInt, CsvRecord


class User(CsvRecord):
    """Registered player with their time zone, season points and subscriptions."""

    CSV_FIELDS: ClassVar[tuple[str, ...]] = ("nick", "timezone", "points", "notifications")

    nick: str
    timezone: str
    points: CsvInt
    notifications: str

    @property
    def channels(self) -> list[str]:
        """Channels the user gets event mentions on (``notifications`` is ``:``-separated)."""
        return [c for c in self.notifications.split(":") if c]

    def is_subscribed(self, channel: str) -> bool:
        return channel in self.channels
