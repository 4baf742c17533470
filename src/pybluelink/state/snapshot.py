"""Last-known-good vehicle snapshot.

A :class:`VehicleSnapshot` is a value.  The ``with_*`` helpers return a
new snapshot with exactly one field replaced; nothing is merged field by
field, so a snapshot never mixes halves of two fetches.  Concurrent
fetches on one handle resolve last-write-wins.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pybluelink.models.location import FullVehicleStatus, VehicleLocation, VehicleOdometer
from pybluelink.models.status import VehicleStatus
from pybluelink.rate_limit import RateState


class VehicleSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: VehicleStatus | dict[str, Any] | None = None
    """Parsed status, or the raw vendor body when fetched unparsed."""
    odometer: VehicleOdometer | None = None
    location: VehicleLocation | None = None
    full_status: FullVehicleStatus | None = None
    rates: RateState = Field(default_factory=RateState)


def with_status(snapshot: VehicleSnapshot, status: VehicleStatus | dict[str, Any]) -> VehicleSnapshot:
    return snapshot.model_copy(update={"status": status})


def with_odometer(snapshot: VehicleSnapshot, odometer: VehicleOdometer) -> VehicleSnapshot:
    return snapshot.model_copy(update={"odometer": odometer})


def with_location(snapshot: VehicleSnapshot, location: VehicleLocation) -> VehicleSnapshot:
    return snapshot.model_copy(update={"location": location})


def with_full_status(snapshot: VehicleSnapshot, full_status: FullVehicleStatus) -> VehicleSnapshot:
    return snapshot.model_copy(update={"full_status": full_status})


def with_rates(snapshot: VehicleSnapshot, rates: RateState) -> VehicleSnapshot:
    if rates is snapshot.rates:
        return snapshot
    return snapshot.model_copy(update={"rates": rates})
