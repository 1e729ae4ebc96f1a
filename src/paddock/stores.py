"""Readers for the bets, users and events CSV files."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import ClassVar

from paddock.api_logging import log_api_call
from paddock.constants import BETS_CSV, EVENTS_CSV, USERS_CSV
from paddock.models._csv import CsvRecord
from paddock.models.bet import Bet
from paddock.models.event import Event
from paddock.models.user import User


class CsvStore[T: CsvRecord]:
    """Read-only store holding one record per line of a headerless CSV file.

    Parse errors and a missing file propagate to the caller unchanged.
    """

    record_type: ClassVar[type[CsvRecord]]
    default_path: ClassVar[str]

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path if path is not None else self.default_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def read_all(self) -> list[T]:
        """Read and parse the whole file, skipping blank lines."""
        text = self.path.read_text(encoding="utf-8")
        return [
            self.record_type.from_csv(line)  # type: ignore[misc]
            for line in text.splitlines()
            if line.strip()
        ]

    @log_api_call
    async def fetch_all(self) -> list[T]:
        """Read the file in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.read_all)


class BetStore(CsvStore[Bet]):
    record_type = Bet
    default_path = BETS_CSV


class UserStore(CsvStore[User]):
    record_type = User
    default_path = USERS_CSV


class EventStore(CsvStore[Event]):
    record_type = Event
    default_path = EVENTS_CSV
