"""Base model and enum for normalized Bluelink structures.

Normalized models are built by the mapping functions in
:mod:`pybluelink.ingestion`, not validated straight from vendor JSON, so
the base is deliberately plain:

* frozen, so cached snapshots can be shared without defensive copies;
* ``extra="forbid"``, so a typo in a mapping table fails loudly.

State enums inherit from :class:`BluelinkEnum` which adds an ``UNKNOWN``
member at ``-1`` and a ``_missing_`` hook that returns ``UNKNOWN``
for any value without a mapped member.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class BluelinkEnum(enum.IntEnum):
    """Base for vendor state enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> BluelinkEnum:
        # pylint: disable=no-member
        if hasattr(cls, "UNKNOWN"):
            unknown: BluelinkEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class BluelinkModel(BaseModel):
    """Base for normalized output models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class DurationSummary(BluelinkModel):
    """Drive/idle minutes over some period."""

    drive: int | None = None
    idle: int | None = None


class SpeedSummary(BluelinkModel):
    """Average/maximum speed over some period."""

    avg: float | None = None
    max: float | None = None
