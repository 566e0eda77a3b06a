from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from fastapi import Query

from roa.application.errors import ValidationError
from roa.application.parsing import parse_range_end, parse_range_start
from roa.domain.analytics.filters import (
    DEFAULT_LIST_LIMIT,
    MAX_LIMIT,
    DateRange,
    OrderFilter,
    Page,
    RestaurantFilter,
)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_bound(
    raw: str | None,
    field_name: str,
    parser: Callable[[str], datetime],
) -> datetime | None:
    value = _blank_to_none(raw)
    if value is None:
        return None
    try:
        return parser(value)
    except (ValueError, OverflowError) as exc:
        raise ValidationError([field_name], message=f"invalid {field_name}: {raw}") from exc


def _parse_amount(raw: str | None, field_name: str) -> Decimal | None:
    value = _blank_to_none(raw)
    if value is None:
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise ValidationError([field_name], message=f"invalid {field_name}: {raw}") from exc
    if not amount.is_finite():
        raise ValidationError([field_name], message=f"invalid {field_name}: {raw}")
    return amount


def restaurant_filter_params(
    search: str | None = None,
    cuisine: str | None = None,
    location: str | None = None,
) -> RestaurantFilter:
    return RestaurantFilter(
        search=_blank_to_none(search),
        cuisine=_blank_to_none(cuisine),
        location=_blank_to_none(location),
    )


def page_params(
    limit: int = Query(default=DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(default=0, ge=0),
) -> Page:
    return Page(limit=limit, offset=offset)


def date_range_params(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> DateRange:
    return DateRange(
        start_date=_parse_bound(start_date, "startDate", parse_range_start),
        end_date=_parse_bound(end_date, "endDate", parse_range_end),
    )


def order_bounds_params(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    min_amount: str | None = Query(default=None, alias="minAmount"),
    max_amount: str | None = Query(default=None, alias="maxAmount"),
    start_hour: int | None = Query(default=None, alias="startHour", ge=0, le=23),
    end_hour: int | None = Query(default=None, alias="endHour", ge=0, le=23),
) -> OrderFilter:
    return OrderFilter(
        start_date=_parse_bound(start_date, "startDate", parse_range_start),
        end_date=_parse_bound(end_date, "endDate", parse_range_end),
        min_amount=_parse_amount(min_amount, "minAmount"),
        max_amount=_parse_amount(max_amount, "maxAmount"),
        start_hour=start_hour,
        end_hour=end_hour,
    )
