"""Report, trip and drive-history models.

All of these are read-only views rebuilt on every fetch.  Optional
groups are ``None`` when the vendor omitted them upstream; dump with
``exclude_none=True`` to get a payload without those keys.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any

from pydantic import Field

from pybluelink.models._base import BluelinkModel, DurationSummary, SpeedSummary


class TripMode(enum.StrEnum):
    """Trip query granularity."""

    MONTH = "month"
    DAY = "day"


class DriveHistoryPeriod(enum.IntEnum):
    DAY = 0
    MONTH = 1
    ALL = 2


# ------------------------------------------------------------------
# Monthly report
# ------------------------------------------------------------------


class MonthlyDriving(BluelinkModel):
    distance: float | None = None
    start_count: int | None = None
    durations: DurationSummary = Field(default_factory=DurationSummary)


class MonthlyTirePressure(BluelinkModel):
    all: bool = False


class MonthlyVehicleStatus(BluelinkModel):
    tpms: bool | None = None
    tire_pressure: MonthlyTirePressure = Field(default_factory=MonthlyTirePressure)


class MonthlyReport(BluelinkModel):
    start: str | None = None
    end: str | None = None
    breakdown: dict[str, Any] | None = None
    driving: MonthlyDriving | None = None
    vehicle_status: MonthlyVehicleStatus | None = None


# ------------------------------------------------------------------
# Trips
# ------------------------------------------------------------------


class TripMonthDay(BluelinkModel):
    day_raw: str | None = None
    date: datetime | None = None
    trips_count: int | None = None


class TripMonth(BluelinkModel):
    """Per-day summaries plus aggregates for one month."""

    days: list[TripMonthDay] = Field(default_factory=list)
    durations: DurationSummary = Field(default_factory=DurationSummary)
    distance: float | None = None
    speed: SpeedSummary = Field(default_factory=SpeedSummary)


class Trip(BluelinkModel):
    time_raw: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    """``start`` plus the reported drive minutes."""
    durations: DurationSummary = Field(default_factory=DurationSummary)
    speed: SpeedSummary = Field(default_factory=SpeedSummary)
    distance: float | None = None


class TripDay(BluelinkModel):
    """Detailed trip list for one day."""

    day_raw: str | None = None
    trips_count: int | None = None
    distance: float | None = None
    durations: DurationSummary = Field(default_factory=DurationSummary)
    speed: SpeedSummary = Field(default_factory=SpeedSummary)
    trips: list[Trip] = Field(default_factory=list)


# ------------------------------------------------------------------
# Drive history
# ------------------------------------------------------------------


class EnergyConsumption(BluelinkModel):
    total: float | None = None
    engine: float | None = None
    climate: float | None = None
    devices: float | None = None
    battery: float | None = None


class DriveHistoryEntry(BluelinkModel):
    period: int | None = None
    raw_date: str | None = None
    date: datetime | None = None
    consumption: EnergyConsumption = Field(default_factory=EnergyConsumption)
    regen: float | None = None
    distance: float | None = None


class DriveHistory(BluelinkModel):
    cumulated: list[DriveHistoryEntry] = Field(default_factory=list)
    history: list[DriveHistoryEntry] = Field(default_factory=list)
