from __future__ import annotations

from typing import Any

from loguru import logger

from deed_owners.utils.logging_utils import Timer, env_log_level, log_owner_stats


def _capture() -> tuple[int, list[Any]]:
    records: list[Any] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    return handler_id, records


def test_log_owner_stats_binds_counts_and_context() -> None:
    handler_id, records = _capture()
    try:
        log_owner_stats(source="history", owners=3, invalids=1, duration_ms=12.345, property_id="42")
    finally:
        logger.remove(handler_id)

    assert len(records) == 1
    record = records[0]
    assert record["message"] == "history: 3 owner(s), 1 invalid in 12.3 ms"
    assert record["extra"]["owners"] == 3
    assert record["extra"]["invalids"] == 1
    assert record["extra"]["duration_ms"] == 12.3
    assert record["extra"]["property_id"] == "42"


def test_log_owner_stats_without_duration() -> None:
    handler_id, records = _capture()
    try:
        log_owner_stats(source="parse", owners=0, invalids=2)
    finally:
        logger.remove(handler_id)

    assert records[0]["message"] == "parse: 0 owner(s), 2 invalid"
    assert "duration_ms" not in records[0]["extra"]


def test_timer_records_elapsed_ms() -> None:
    with Timer() as timer:
        sum(range(1000))

    assert timer.elapsed_ms >= 0.0


def test_env_log_level(monkeypatch: Any) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert env_log_level() == "INFO"

    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert env_log_level() == "DEBUG"
