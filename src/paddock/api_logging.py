"""Call logging for the paddock store and API layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "paddock.api"
_LOG_FILENAME = "api_calls.log"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the API logger, configuring it on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        _logger = logger

    return _logger


def enable_file_logging(log_dir: str | os.PathLike[str]) -> str:
    """Write API call logs to ``<log_dir>/api_calls.log``. Returns the file path."""
    logger = _get_logger()
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, _LOG_FILENAME)

    with _logger_lock:
        for h in logger.handlers[:]:
            if isinstance(h, (logging.NullHandler, logging.FileHandler)):
                logger.removeHandler(h)
                h.close()
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
        )
        logger.addHandler(handler)

    return log_file


def _describe(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Methods carry self as the first argument
    parts = fn.__qualname__.split(".")
    if len(parts) > 1 and parts[-2] != "<locals>" and args:
        args = args[1:]
    arg_parts = [repr(a) for a in args]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _count(result: Any) -> int:
    rows = getattr(result, "rows", None)
    if isinstance(rows, list):
        return len(rows)
    return len(result) if isinstance(result, list) else 1


def _log_ok(fn: Callable[..., Any], arg_str: str, result: Any, start: float) -> None:
    _get_logger().info(
        "OK: %s(%s) -> %d items (%.3fs)",
        fn.__qualname__, arg_str, _count(result), time.monotonic() - start,
    )


def _log_fail(fn: Callable[..., Any], arg_str: str, exc: BaseException, start: float) -> None:
    _get_logger().error(
        "FAIL: %s(%s) -> %s: %s (%.3fs)",
        fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
    )


def log_api_call(fn: F) -> F:
    """Decorator that logs store and API calls, for plain and async functions."""

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _describe(fn, args, kwargs)
            _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _log_fail(fn, arg_str, exc, start)
                raise
            _log_ok(fn, arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe(fn, args, kwargs)
        _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _log_fail(fn, arg_str, exc, start)
            raise
        _log_ok(fn, arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]
