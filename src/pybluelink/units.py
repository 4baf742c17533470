"""Unit conversion helpers.

Temperature codes are the vendor's encoding of a climate setpoint: the
index of the setpoint in the region's table, as two upper-case hex
digits, followed by ``H`` (e.g. ``"0AH"``).  Dates arrive as compact
``YYYYMMDD[HHMM[SS]]`` strings in vehicle-local time.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from pybluelink._constants import TEMPERATURE_RANGES_C, TEMPERATURE_STEP_C, Region

_logger = logging.getLogger(__name__)

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def temperature_table(region: Region | str) -> tuple[float, ...]:
    """Return the ordered Celsius setpoints supported in *region*.

    Raises :class:`ValueError` for a region without a table.
    """
    try:
        low, high = TEMPERATURE_RANGES_C[Region(region)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"no temperature table for region {region!r}") from exc
    steps = int(round((high - low) / TEMPERATURE_STEP_C))
    return tuple(low + i * TEMPERATURE_STEP_C for i in range(steps + 1))


def celsius_to_code(region: Region | str, celsius: float) -> str:
    """Convert a Celsius setpoint to the vendor temperature code.

    Values between two table entries snap to the nearest step.
    Raises :class:`ValueError` if *celsius* is outside the region's range.
    """
    table = temperature_table(region)
    value = float(celsius)
    if not table[0] <= value <= table[-1]:
        raise ValueError(f"temperature must be between {table[0]} and {table[-1]} °C, got {value}")
    index = int(round((value - table[0]) / TEMPERATURE_STEP_C))
    return f"{index:02X}H"


def code_to_celsius(region: Region | str, code: Any) -> float | None:
    """Convert a vendor temperature code to Celsius.

    Returns ``None`` for missing, malformed or out-of-table codes; status
    payloads routinely carry placeholders here.
    """
    if not isinstance(code, str) or len(code) < 2:
        return None
    try:
        index = int(code[:2], 16)
    except ValueError:
        _logger.warning("Unparseable temperature code %r", code)
        return None
    table = temperature_table(region)
    if index >= len(table):
        _logger.warning("Temperature code %r outside the %s table", code, region)
        return None
    return table[index]


def parse_date(value: str) -> datetime:
    """Parse ``YYYYMMDD``, ``YYYYMMDDHHMM`` or ``YYYYMMDDHHMMSS``.

    The result is naive: the API reports vehicle-local time.
    """
    text = value.strip()
    year, month, day = int(text[0:4]), int(text[4:6]), int(text[6:8])
    if len(text) <= 8:
        return datetime(year, month, day)
    hours, minutes = int(text[8:10]), int(text[10:12])
    seconds = int(text[12:14]) if len(text) > 12 else 0
    return datetime(year, month, day, hours, minutes, seconds)


def safe_parse_date(value: Any) -> datetime | None:
    """:func:`parse_date` that yields ``None`` for missing or garbled input."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_date(value)
    except ValueError:
        _logger.debug("Unparseable date string %r", value)
        return None


def _naive_local(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Any) -> datetime | None:
    """Best-effort timestamp parsing for status payloads.

    Accepts epoch seconds/milliseconds, compact vendor dates and ISO-8601.
    The result is always naive local time, like :func:`parse_date`:
    epoch values and offset-carrying ISO strings are converted to the
    host's local time before the offset is dropped.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _naive_local(value)
    if isinstance(value, (int, float)):
        ts = int(value)
        if ts >= _MS_THRESHOLD:
            ts //= 1000
        try:
            return _naive_local(datetime.fromtimestamp(ts, tz=UTC))
        except (ValueError, OverflowError, OSError):
            _logger.debug("Out-of-range epoch timestamp %r", value)
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and len(text) in (8, 12, 14):
            return safe_parse_date(text)
        try:
            return _naive_local(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError:
            _logger.debug("Unparseable timestamp %r", value)
    return None


def add_minutes(start: datetime, minutes: Any) -> datetime:
    """Return *start* shifted by *minutes* (missing counts as zero)."""
    try:
        offset = float(minutes or 0)
    except (TypeError, ValueError):
        offset = 0.0
    return start + timedelta(minutes=offset)


def to_month_key(year: int, month: int) -> str:
    """Format a ``YYYYMM`` period key."""
    return f"{year}{month:02d}"


def to_day_key(year: int, month: int, day: int | None = None) -> str:
    """Format a ``YYYYMMDD`` key, or ``YYYYMM`` when *day* is absent."""
    if not day:
        return to_month_key(year, month)
    return f"{to_month_key(year, month)}{day:02d}"
