"""Normalization helpers.

Centralizes defensive parsing and the safe-path accessor used by the
mapping tables in :mod:`pybluelink.ingestion.status` and
:mod:`pybluelink.ingestion.reports`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Any, TypeVar

TEnum = TypeVar("TEnum", bound=IntEnum)

_MISSING = object()


def get_path(tree: Any, path: str, default: Any = None) -> Any:
    """Return the value at dotted *path* inside *tree*, or *default*.

    Segments address mapping keys; purely numeric segments index into
    sequences (``"evStatus.drvDistance.0.rangeByFuel"``).  Any missing
    key, out-of-range index or non-container along the way yields
    *default*.  A present ``None`` also yields *default*.
    """
    node: Any = tree
    for segment in path.split("."):
        if isinstance(node, Mapping):
            node = node.get(segment, _MISSING)
        elif isinstance(node, Sequence) and not isinstance(node, (str, bytes)) and segment.isdigit():
            index = int(segment)
            node = node[index] if index < len(node) else _MISSING
        else:
            return default
        if node is _MISSING or node is None:
            return default
    return node


def has_path(tree: Any, path: str) -> bool:
    return get_path(tree, path, _MISSING) is not _MISSING


def first_present(*values: Any) -> Any:
    """Return the first argument that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None


def flag_equals(tree: Any, path: str, code: int = 1) -> bool:
    """Equality test of a vendor enum code against *code*.

    Vendor flags are tri-state codes, not booleans, so ``2`` is not
    "set" even though it is truthy.
    """
    return safe_int(get_path(tree, path)) == code


def truthy(tree: Any, path: str) -> bool:
    return bool(get_path(tree, path))


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    if isinstance(value, bool):
        return float(value)
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def safe_bool(value: Any) -> bool | None:
    """Vendor booleans arrive as ``true``/``false``, ``0``/``1`` or strings."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on"}:
            return True
        if lowered in {"false", "no", "off"}:
            return False
    parsed = safe_int(value)
    if parsed is None:
        return None
    return parsed != 0


def to_enum(enum_cls: type[TEnum], value: Any, default: TEnum | None = None) -> TEnum | None:
    parsed = safe_int(value)
    if parsed is None:
        return default
    return enum_cls(parsed)
