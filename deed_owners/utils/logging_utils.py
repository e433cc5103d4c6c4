"""Logging helpers: env-driven sinks and per-run owner statistics."""

from __future__ import annotations

import os
import time
from typing import Any

from loguru import logger

_TRUTHY = {"1", "true", "yes", "on"}


def env_log_level(default: str = "INFO") -> str:
    """Return log level string from LOG_LEVEL env (fallback to ``default``)."""
    return os.getenv("LOG_LEVEL", default).upper()


def add_optional_sinks() -> None:
    """Attach extra sinks requested through the environment.

    - ``LOG_DEBUG_FILE``: plain-text DEBUG sink at that path.
    - ``LOG_JSON``: serialized DEBUG records under ``logs/deed_owners_{time}.jsonl``.
    """
    debug_file = os.getenv("LOG_DEBUG_FILE")
    if debug_file:
        logger.add(debug_file, level="DEBUG", backtrace=True, diagnose=True)

    if os.getenv("LOG_JSON", "0").lower() in _TRUTHY:
        os.makedirs("logs", exist_ok=True)
        logger.add("logs/deed_owners_{time}.jsonl", level="DEBUG", serialize=True)


def log_owner_stats(
    *,
    source: str,
    owners: int,
    invalids: int,
    duration_ms: float | None = None,
    **context: Any,
) -> None:
    """Standard summary line for one parse or history run.

    Args:
        source: "parse" or "history".
        owners: owners emitted.
        invalids: fragments that could not be resolved.
        duration_ms: elapsed milliseconds (optional).
        context: extra key/values (property_id, texts, records, ...).
    """
    extra: dict[str, Any] = {"source": source, "owners": owners, "invalids": invalids}
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 1)
    extra.update(context)
    logger.bind(**extra).info(
        f"{source}: {owners} owner(s), {invalids} invalid"
        + (f" in {extra['duration_ms']} ms" if duration_ms is not None else "")
    )


class Timer:
    """Context manager recording wall time in ``elapsed_ms`` on exit."""

    elapsed_ms: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
