from __future__ import annotations

from datetime import date, datetime, time, timedelta

# wall-clock values this close to the datetime limits cannot be shifted to another zone
_EARLIEST = datetime.min + timedelta(days=1)
_LATEST = datetime.max - timedelta(days=1)


def parse_timestamp(raw: str) -> datetime:
    value = raw.strip()
    if not value:
        raise ValueError("timestamp is empty")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {raw!r}") from exc
    if not _EARLIEST <= parsed.replace(tzinfo=None) <= _LATEST:
        raise ValueError(f"timestamp is out of range: {raw!r}")
    return parsed


def parse_range_start(raw: str) -> datetime:
    return parse_timestamp(raw)


def parse_range_end(raw: str) -> datetime:
    """Parse an inclusive upper bound; a bare date covers that whole day."""
    value = raw.strip()
    if _is_bare_date(value):
        return datetime.combine(date.fromisoformat(value), time.max)
    return parse_timestamp(value)


def _is_bare_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return "T" not in value and " " not in value
