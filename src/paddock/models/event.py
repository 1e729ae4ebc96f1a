"""Calendar event model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import computed_field

from paddock.constants import (
    CEST_ZONE,
    DEFAULT_USER_ZONE,
    DISPLAY_DATE_FORMAT,
    EST_ZONE,
    EVENT_DATE_FORMAT,
)
from paddock.models._csv import CsvRecord


class Event(CsvRecord):
    """A scheduled session such as ``[Formula 1] Monaco Grand Prix Qualifying``.

    ``description`` holds the session name and ``date`` the UTC start time.
    ``date_cest`` and ``date_est`` are derived from ``date`` and are empty
    when it does not parse.
    """

    CSV_FIELDS: ClassVar[tuple[str, ...]] = (
        "category", "title", "description", "date", "channel", "image", "mention",
    )

    category: str
    title: str
    description: str
    date: str
    channel: str
    image: str
    mention: str

    @property
    def starts_at(self) -> datetime | None:
        """Start time as an aware UTC datetime, or None if ``date`` is malformed."""
        try:
            return datetime.strptime(self.date, EVENT_DATE_FORMAT).replace(tzinfo=UTC)
        except ValueError:
            return None

    def local_date(self, zone: str) -> str:
        """Start time rendered in the IANA zone ``zone``, e.g. a user's time zone.

        Unknown or malformed zone names fall back to Europe/Berlin. Returns an
        empty string when ``date`` does not parse.
        """
        start = self.starts_at
        if start is None:
            return ""
        try:
            tz = ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            tz = ZoneInfo(DEFAULT_USER_ZONE)
        return start.astimezone(tz).strftime(DISPLAY_DATE_FORMAT)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def date_cest(self) -> str:
        return self.local_date(CEST_ZONE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def date_est(self) -> str:
        return self.local_date(EST_ZONE)
