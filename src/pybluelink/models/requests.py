"""Pydantic request models for vehicle handle entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
They are used by :class:`pybluelink.client.BluelinkVehicle`.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pybluelink.models.reports import TripMode
from pybluelink.units import to_day_key, to_month_key


class _Request(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )


class MonthQuery(_Request):
    year: int = Field(ge=2000, le=2999)
    month: int = Field(ge=1, le=12)

    @classmethod
    def current(cls) -> MonthQuery:
        today = date.today()
        return cls(year=today.year, month=today.month)

    @property
    def month_key(self) -> str:
        return to_month_key(self.year, self.month)


class TripQuery(MonthQuery):
    """Trip lookup key.

    Supplying ``day`` switches the query (and the result shape) from a
    monthly summary to a per-day trip list.
    """

    day: int | None = Field(default=None, ge=1, le=31)

    @model_validator(mode="after")
    def _check_calendar_day(self) -> TripQuery:
        if self.day is not None:
            date(self.year, self.month, self.day)
        return self

    @classmethod
    def current(cls) -> TripQuery:
        today = date.today()
        return cls(year=today.year, month=today.month)

    @property
    def mode(self) -> TripMode:
        return TripMode.DAY if self.day else TripMode.MONTH

    @property
    def day_key(self) -> str:
        return to_day_key(self.year, self.month, self.day)


class ClimateStartOptions(_Request):
    """Remote climate start settings."""

    temperature: float
    """Setpoint in °C; must be in the region's table."""
    defrost: bool = False
    heated_features: bool = False
    unit: str = "C"


class WindowsOptions(_Request):
    """Per-window open/close request (``0`` closed, ``1`` vent, ``2`` open)."""

    front_left: int = Field(default=0, ge=0, le=2)
    front_right: int = Field(default=0, ge=0, le=2)
    back_left: int = Field(default=0, ge=0, le=2)
    back_right: int = Field(default=0, ge=0, le=2)

    def to_body(self) -> dict[str, Any]:
        return {
            "frontLeft": self.front_left,
            "frontRight": self.front_right,
            "backLeft": self.back_left,
            "backRight": self.back_right,
        }
