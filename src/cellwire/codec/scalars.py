"""Scalar and temporal value normalization."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any, TypeAlias

# Shared by every temporal value regardless of source precision.
ISO_DATE_FORMAT = (
    "{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
    ".{millis:03d}Z"
)

_EPOCH_DATE = date(1970, 1, 1)

Temporal: TypeAlias = datetime | date | time


def is_temporal(value: object) -> bool:
    """Return whether value is a date, time or datetime."""
    return isinstance(value, (datetime, date, time))


def _as_utc_datetime(value: Temporal) -> datetime:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    else:
        moment = datetime.combine(_EPOCH_DATE, value)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    try:
        return moment.astimezone(UTC)
    except OverflowError:
        # UTC instant falls outside year 1..9999: keep the wall-clock fields.
        return moment.replace(tzinfo=UTC)


def format_temporal(value: Temporal) -> str:
    """Format a temporal value with the fixed ISO-8601 pattern.

    Naive values are taken as UTC. Dates render at midnight and bare times
    render on 1970-01-01, so every temporal value yields the same shape.
    Aware values whose UTC instant is out of range keep their local fields.

    Args:
        value: Date, time or datetime to format.

    Returns:
        String like ``2024-05-01T13:45:00.250Z``.
    """
    moment = _as_utc_datetime(value)
    return ISO_DATE_FORMAT.format(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        millis=moment.microsecond // 1000,
    )


def normalize_scalar(value: Any) -> Any:
    """Return a wire-safe form of a scalar value.

    Temporal values become ISO-8601 strings; everything else passes through.
    """
    if is_temporal(value):
        return format_temporal(value)
    return value
