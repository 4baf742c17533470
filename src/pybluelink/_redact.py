"""Helpers for safe debug logging.

Bluelink traces carry the bearer token, the push device id, the VIN and
the parked GPS position.  Secrets are replaced outright; the VIN keeps
its last four characters and coordinates are coarsened so traces stay
useful for matching vehicles without pinpointing them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_REDACTED = "<redacted>"
_MAX_DEPTH = 20

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "pin",
        "token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
        "deviceid",
    }
)
_VIN_KEYS: frozenset[str] = frozenset({"vin"})
_COORDINATE_KEYS: frozenset[str] = frozenset({"lat", "lon", "latitude", "longitude"})


def _mask_vin(value: Any) -> str:
    text = str(value)
    if len(text) <= 4:
        return _REDACTED
    return f"{'*' * (len(text) - 4)}{text[-4:]}"


def _coarsen(value: Any) -> Any:
    # Two decimals is roughly a kilometre.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return round(float(value), 2)
    return _REDACTED


def _redact_entry(key: str, value: Any, max_string: int, depth: int) -> Any:
    lowered = key.lower()
    if lowered in _SECRET_KEYS:
        return _REDACTED
    if lowered in _VIN_KEYS:
        return _mask_vin(value)
    if lowered in _COORDINATE_KEYS:
        return _coarsen(value)
    return redact_for_log(value, max_string=max_string, _depth=depth + 1)


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"
    if isinstance(value, Mapping):
        return {str(k): _redact_entry(str(k), v, max_string, _depth) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]
    return repr(value)


def redact_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """Headers with credentials removed; rate-limit headers pass through."""
    return {key: _REDACTED if key.lower() in _SECRET_KEYS else value for key, value in headers.items()}
