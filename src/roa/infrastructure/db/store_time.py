from __future__ import annotations

import os
from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo


@lru_cache(maxsize=8)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def store_timezone() -> ZoneInfo:
    return _zone(os.getenv("STORE_TIMEZONE", "UTC"))


def to_store_wall_time(value: datetime) -> datetime:
    """Naive wall-clock time in the store zone, as persisted in orders.timestamp."""
    if value.tzinfo is None:
        return value
    return value.astimezone(store_timezone()).replace(tzinfo=None)


def from_store_wall_time(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(store_timezone())
    return value.replace(tzinfo=store_timezone())


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
