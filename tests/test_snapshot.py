from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pybluelink.models.location import VehicleLocation, VehicleOdometer
from pybluelink.models.status import VehicleStatus
from pybluelink.rate_limit import RateState
from pybluelink.state.snapshot import VehicleSnapshot, with_location, with_odometer, with_rates, with_status


def test_empty_snapshot() -> None:
    snapshot = VehicleSnapshot()
    assert snapshot.status is None
    assert snapshot.odometer is None
    assert not snapshot.rates.known


def test_with_helpers_replace_one_field() -> None:
    status = VehicleStatus()
    odometer = VehicleOdometer(value=10)
    snapshot = with_odometer(VehicleSnapshot(), odometer)

    updated = with_status(snapshot, status)

    assert updated is not snapshot
    assert updated.status is status
    assert updated.odometer is odometer
    assert snapshot.status is None


def test_with_location() -> None:
    location = VehicleLocation(latitude=1.0, longitude=2.0)
    assert with_location(VehicleSnapshot(), location).location is location


def test_with_rates_identity_is_noop() -> None:
    snapshot = VehicleSnapshot()
    assert with_rates(snapshot, snapshot.rates) is snapshot

    rates = RateState(max=100, current=1, updated_at=datetime(2024, 1, 1, tzinfo=UTC))
    assert with_rates(snapshot, rates).rates is rates


def test_snapshot_is_frozen() -> None:
    snapshot = VehicleSnapshot()
    with pytest.raises(ValidationError):
        snapshot.status = VehicleStatus()  # type: ignore[misc]
