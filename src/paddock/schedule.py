"""Event calendar lookups: next session and who to mention for it."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from paddock.constants import ANY, NOTIFY
from paddock.exceptions import RecordFormatError
from paddock.models.event import Event
from paddock.models.user import User

F1 = "[Formula 1]"

# Shorthand search terms -> (category, session)
SEARCH_ALIASES: dict[str, tuple[str, str]] = {
    "f1": (F1, ANY),
    "formula1": (F1, ANY),
    "f2": ("[Formula 2]", ANY),
    "formula2": ("[Formula 2]", ANY),
    "f3": ("[Formula 3]", ANY),
    "formula3": ("[Formula 3]", ANY),
    "q": (F1, "Qualifying"),
    "quali": (F1, "Qualifying"),
    "qualy": (F1, "Qualifying"),
    "qualifier": (F1, "Qualifying"),
    "qualifying": (F1, "Qualifying"),
    "r": (F1, "Race"),
    "race": (F1, "Race"),
    "s": (F1, "Sprint Race"),
    "sprint": (F1, "Sprint Race"),
}


def resolve_search(term: str) -> tuple[str, str]:
    """Expand a user search term into a ``(category, session)`` filter.

    Unknown terms are treated as a category name, so ``"MotoGP"`` becomes
    ``("[MotoGP]", "any")``.
    """
    term = term.strip()
    if not term:
        return (ANY, ANY)
    return SEARCH_ALIASES.get(term.lower(), (f"[{term}]", ANY))


def _matches(value: str, wanted: str) -> bool:
    return wanted.lower() == ANY or value.lower() == wanted.lower()


def find_next_event(
    events: Iterable[Event],
    category: str = ANY,
    session: str = ANY,
    now: datetime | None = None,
) -> Event | None:
    """Return the first event in calendar order that has not started yet.

    ``category`` matches :attr:`Event.category` and ``session`` matches
    :attr:`Event.description`, both case-insensitively; ``"any"`` matches
    everything. The events file is kept in chronological order, so the
    first hit is the next one.

    Raises:
        RecordFormatError: a matching event has a malformed date.
    """
    now = now or datetime.now(UTC)
    for event in events:
        if not (_matches(event.category, category) and _matches(event.description, session)):
            continue
        start = event.starts_at
        if start is None:
            raise RecordFormatError(f"Event {event.title!r} has malformed date {event.date!r}")
        if start >= now:
            return event
    return None


def users_to_notify(event: Event, users: Iterable[User]) -> list[User]:
    """Users subscribed to the event's channel, if the event asks for mentions."""
    if event.mention.lower() != NOTIFY:
        return []
    return [u for u in users if u.is_subscribed(event.channel)]
