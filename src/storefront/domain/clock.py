"""Timestamp helpers for JSON records."""

import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as stored in the JSON files.

    Accepts a trailing ``Z``; naive values are treated as UTC.

    Returns:
        Aware datetime, or None when the value is missing or unparseable
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def newest_first(records: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Sort records by timestamp, newest first; missing timestamps sort last."""
    return sorted(
        records,
        key=lambda record: parse_timestamp(key(record)) or _EPOCH,
        reverse=True,
    )
