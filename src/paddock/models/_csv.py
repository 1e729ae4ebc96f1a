"""Shared CSV line constructor for record models."""

from __future__ import annotations

import re
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from paddock.exceptions import RecordFormatError, RecordLengthError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_integer(value: Any) -> Any:
    # Only plain signed digits; no spaces, underscores or decimal points
    if isinstance(value, str):
        if not _INTEGER.fullmatch(value):
            raise ValueError(f"{value!r} is not an integer")
        return int(value)
    return value


CsvInt = Annotated[int, BeforeValidator(_parse_integer)]


class CsvRecord(BaseModel):
    """Frozen record built from one comma-separated line.

    ``CSV_FIELDS`` lists field names in column order; the field types come
    from the model annotations. Quoted or escaped commas are not supported:
    every comma starts a new column.
    """

    model_config = ConfigDict(frozen=True)

    CSV_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_csv(cls, line: str) -> Self:
        """Parse one CSV line. Columns past the schema are ignored."""
        values = line.rstrip("\r\n").split(",")
        if len(values) < len(cls.CSV_FIELDS):
            raise RecordLengthError(cls.__name__, len(cls.CSV_FIELDS), len(values))
        try:
            return cls.model_validate(dict(zip(cls.CSV_FIELDS, values)))
        except ValidationError as exc:
            raise RecordFormatError(f"Invalid {cls.__name__} line {line!r}: {exc}") from exc
