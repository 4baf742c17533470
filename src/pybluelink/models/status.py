"""Canonical vehicle status model.

Both vendor wire shapes (legacy flat status, CCS2 tree) normalize into
:class:`VehicleStatus`; see :mod:`pybluelink.ingestion.status`.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any

from pydantic import Field

from pybluelink.models._base import BluelinkEnum, BluelinkModel


class StatusProtocol(enum.StrEnum):
    """Wire shape of a status payload."""

    LEGACY = "legacy"
    CCS2 = "ccs2"


class PlugType(BluelinkEnum):
    """Charger connection reported by the vehicle."""

    UNKNOWN = -1
    UNPLUGGED = 0
    FAST = 1
    PORTABLE = 2
    STATION = 3


class OpenDoors(BluelinkModel):
    front_left: bool = False
    front_right: bool = False
    back_left: bool = False
    back_right: bool = False

    @property
    def any_open(self) -> bool:
        return self.front_left or self.front_right or self.back_left or self.back_right


class TirePressureWarning(BluelinkModel):
    """Low-pressure warning lamps, per wheel and aggregate."""

    front_left: bool = False
    front_right: bool = False
    rear_left: bool = False
    rear_right: bool = False
    all: bool = False


class ChassisStatus(BluelinkModel):
    hood_open: bool | None = None
    trunk_open: bool | None = None
    locked: bool | None = None
    open_doors: OpenDoors = Field(default_factory=OpenDoors)
    tire_pressure_warning_lamp: TirePressureWarning = Field(default_factory=TirePressureWarning)


class ClimateStatus(BluelinkModel):
    active: bool | None = None
    steering_wheel_heat: bool = False
    side_mirror_heat: bool = False
    rear_window_heat: bool = False
    defrost: bool | None = None
    temperature_setpoint: float | None = None
    """Setpoint in °C (legacy payloads are decoded from the region table)."""
    temperature_unit: int | str | None = None


class EngineStatus(BluelinkModel):
    ignition: bool | None = None
    accessory: bool | None = None
    range: float | None = None
    """Total range; derived from the partial ranges when the vendor omits it."""
    range_ev: float | None = None
    range_gas: float | None = None
    plugged_to: PlugType = PlugType.UNPLUGGED
    charging: bool | None = None
    estimated_current_charge_duration: int | None = None
    estimated_fast_charge_duration: int | None = None
    estimated_portable_charge_duration: int | None = None
    estimated_station_charge_duration: int | None = None
    battery_charge_12v: float | None = None
    battery_charge_hv: float | None = None


class VehicleStatus(BluelinkModel):
    """Protocol-independent vehicle status."""

    chassis: ChassisStatus = Field(default_factory=ChassisStatus)
    climate: ClimateStatus = Field(default_factory=ClimateStatus)
    engine: EngineStatus = Field(default_factory=EngineStatus)
    last_update: datetime | None = None
    """Naive vehicle-local time; epoch and UTC sources are converted to local time."""
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original vendor body."""
