"""Path lookups over decoded JSON documents."""

from __future__ import annotations

from typing import Any

from paddock.exceptions import MissingDataError

type DocumentPath = tuple[str | int, ...]

_MISSING = object()


def format_path(path: DocumentPath) -> str:
    """Render a path the way it reads in the API docs, e.g. ``Races[0].raceName``."""
    out = ""
    for key in path:
        if isinstance(key, int):
            out += f"[{key}]"
        else:
            out += f".{key}" if out else key
    return out


def _step(node: Any, key: str | int) -> Any:
    if isinstance(key, int):
        if isinstance(node, list) and 0 <= key < len(node):
            return node[key]
        return _MISSING
    if isinstance(node, dict) and key in node:
        return node[key]
    return _MISSING


def lookup(document: Any, path: DocumentPath) -> Any | None:
    """Follow ``path`` through nested dicts and lists.

    Returns None if any segment is absent, indexes past the end of a list,
    or lands on a value of the wrong container type.
    """
    node = document
    for key in path:
        node = _step(node, key)
        if node is _MISSING:
            return None
    return node


def lookup_text(document: Any, path: DocumentPath, default: str = "") -> str:
    """Return the scalar leaf at ``path`` as a string, or ``default``."""
    value = lookup(document, path)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return default


def require(document: Any, path: DocumentPath) -> Any:
    """Like :func:`lookup`, but a missing or null value raises MissingDataError."""
    value = lookup(document, path)
    if value is None:
        raise MissingDataError(format_path(path))
    return value


def require_list(document: Any, path: DocumentPath) -> list[Any]:
    """Like :func:`require`, but the value must also be a JSON array."""
    value = require(document, path)
    if not isinstance(value, list):
        raise MissingDataError(format_path(path))
    return value
