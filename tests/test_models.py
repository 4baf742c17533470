"""Tests for model parsing with BluelinkModel + BluelinkEnum."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pybluelink.models.charging import ChargeModeType
from pybluelink.models.requests import ClimateStartOptions, MonthQuery, TripQuery, WindowsOptions
from pybluelink.models.reports import TripMode
from pybluelink.models.status import OpenDoors, PlugType, StatusProtocol
from pybluelink.models.vehicle import VehicleRegistration
from pybluelink.session import Session, SessionProvider

# ------------------------------------------------------------------
# BluelinkEnum
# ------------------------------------------------------------------


class TestBluelinkEnum:
    def test_unknown_value_falls_back(self) -> None:
        assert PlugType(99) == PlugType.UNKNOWN
        assert ChargeModeType(7) == ChargeModeType.UNKNOWN

    def test_known_value(self) -> None:
        assert PlugType(2) == PlugType.PORTABLE

    def test_all_enums_have_unknown(self) -> None:
        for cls in (PlugType, ChargeModeType):
            assert cls.UNKNOWN == -1, f"{cls.__name__}.UNKNOWN != -1"


# ------------------------------------------------------------------
# Output models
# ------------------------------------------------------------------


def test_output_models_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        OpenDoors(front_left=True, sunroof=True)  # type: ignore[call-arg]


def test_any_open() -> None:
    assert not OpenDoors().any_open
    assert OpenDoors(back_right=True).any_open


# ------------------------------------------------------------------
# Registration
# ------------------------------------------------------------------


class TestVehicleRegistration:
    def test_vendor_keys(self) -> None:
        registration = VehicleRegistration.model_validate(
            {
                "vehicleId": "abc-123",
                "vin": "KMHK381",
                "vehicleName": "KONA",
                "nickname": "Blue",
                "regDate": "2023-01-02",
                "brandIndicator": "H",
                "type": "EV",
                "ccuCCS2ProtocolSupport": 1,
                "extraField": "kept in raw",
            }
        )
        assert registration.id == "abc-123"
        assert registration.name == "KONA"
        assert registration.generation == "EV"
        assert registration.status_protocol == StatusProtocol.CCS2
        assert registration.raw["extraField"] == "kept in raw"

    def test_legacy_by_default(self) -> None:
        registration = VehicleRegistration.model_validate({"vehicleId": "x"})
        assert registration.status_protocol == StatusProtocol.LEGACY


# ------------------------------------------------------------------
# Requests
# ------------------------------------------------------------------


class TestRequests:
    def test_month_query_bounds(self) -> None:
        with pytest.raises(ValidationError):
            MonthQuery(year=2023, month=13)

    def test_trip_query_mode(self) -> None:
        assert TripQuery(year=2023, month=2).mode == TripMode.MONTH
        query = TripQuery(year=2024, month=2, day=29)
        assert query.mode == TripMode.DAY
        assert query.day_key == "20240229"

    def test_trip_query_rejects_impossible_day(self) -> None:
        with pytest.raises(ValidationError):
            TripQuery(year=2023, month=2, day=30)

    def test_current_month(self) -> None:
        query = MonthQuery.current()
        assert len(query.month_key) == 6

    def test_windows_range(self) -> None:
        with pytest.raises(ValidationError):
            WindowsOptions(front_left=3)

    def test_climate_options_forbid_extra(self) -> None:
        with pytest.raises(ValidationError):
            ClimateStartOptions(temperature=21, seat_heat=True)  # type: ignore[call-arg]


def test_session_satisfies_provider() -> None:
    session = Session(access_token=" token ", device_id="device")
    assert isinstance(session, SessionProvider)
    assert session.access_token == "token"
    assert not session.is_expired
    assert Session(access_token="t", device_id="d", ttl=0).is_expired
