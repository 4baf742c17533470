"""Location, odometer and aggregate status models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pybluelink.models._base import BluelinkModel


class Speed(BluelinkModel):
    unit: int | None = None
    value: float | None = None


class VehicleLocation(BluelinkModel):
    """Parked GPS position.

    Numeric fields are ``None`` when the value is absent or
    unparseable from the API response.
    """

    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    speed: Speed = Field(default_factory=Speed)
    heading: float | None = None


class VehicleOdometer(BluelinkModel):
    value: float | None = None
    unit: int = 0
    """The API does not report a unit; ``0`` is what the app assumes."""


class FullVehicleStatus(BluelinkModel):
    location: VehicleLocation
    odometer: VehicleOdometer
    vehicle_status: dict[str, Any] = Field(default_factory=dict)
    """Unparsed vendor status body."""
