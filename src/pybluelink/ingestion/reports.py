"""Report, trip, history, location and charge-target mappings.

Each function takes the ``resMsg`` part of a response body (already
unwrapped by the caller) and returns normalized models.  Optional
nested groups stay ``None`` when the vendor omitted them.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, overload

from pybluelink.ingestion.normalize import get_path, safe_float, safe_int, safe_str, to_enum
from pybluelink.models._base import DurationSummary, SpeedSummary
from pybluelink.models.charging import ChargeModeType, ChargeTargetSetting
from pybluelink.models.location import Speed, VehicleLocation, VehicleOdometer
from pybluelink.models.reports import (
    DriveHistory,
    DriveHistoryEntry,
    EnergyConsumption,
    MonthlyDriving,
    MonthlyReport,
    MonthlyTirePressure,
    MonthlyVehicleStatus,
    Trip,
    TripDay,
    TripMode,
    TripMonth,
    TripMonthDay,
)
from pybluelink.units import add_minutes, safe_parse_date

_logger = logging.getLogger(__name__)


def _durations(node: Any, drive_key: str, idle_key: str) -> DurationSummary:
    return DurationSummary(
        drive=safe_int(get_path(node, drive_key)),
        idle=safe_int(get_path(node, idle_key)),
    )


def _trip_speed(node: Any) -> SpeedSummary:
    return SpeedSummary(
        avg=safe_float(get_path(node, "tripAvgSpeed")),
        max=safe_float(get_path(node, "tripMaxSpeed")),
    )


def _list_at(node: Any, path: str) -> list[Any]:
    value = get_path(node, path)
    return value if isinstance(value, list) else []


# ------------------------------------------------------------------
# Monthly report
# ------------------------------------------------------------------


def normalize_monthly_report(res_msg: Any) -> MonthlyReport | None:
    """Map ``resMsg`` of ``/monthlyreport``; ``None`` without a report."""
    report = get_path(res_msg, "monthlyReport")
    if not isinstance(report, dict) or not report:
        return None

    driving = report.get("driving")
    vehicle_status = report.get("vehicleStatus")
    breakdown = report.get("breakdown")
    tpms = safe_int(get_path(vehicle_status, "tpmsSupport"))

    return MonthlyReport(
        start=safe_str(get_path(report, "ifo.mvrMonthStart")),
        end=safe_str(get_path(report, "ifo.mvrMonthEnd")),
        breakdown=breakdown if isinstance(breakdown, dict) and breakdown else None,
        driving=MonthlyDriving(
            distance=safe_float(driving.get("runDistance")),
            start_count=safe_int(driving.get("engineStartCount")),
            durations=_durations(driving, "engineOnTime", "engineIdleTime"),
        )
        if isinstance(driving, dict) and driving
        else None,
        vehicle_status=MonthlyVehicleStatus(
            tpms=bool(tpms) if tpms else None,
            tire_pressure=MonthlyTirePressure(
                all=str(get_path(vehicle_status, "tirePressure.tirePressureLampAll")) == "1",
            ),
        )
        if isinstance(vehicle_status, dict) and vehicle_status
        else None,
    )


def normalize_odometer(res_msg: Any) -> VehicleOdometer:
    """The odometer rides along in the monthly report response."""
    return VehicleOdometer(value=safe_float(get_path(res_msg, "odometer")), unit=0)


# ------------------------------------------------------------------
# Trips
# ------------------------------------------------------------------


@overload
def normalize_trip(res_msg: Any, mode: Literal[TripMode.MONTH]) -> TripMonth | None: ...


@overload
def normalize_trip(res_msg: Any, mode: Literal[TripMode.DAY]) -> list[TripDay] | None: ...


@overload
def normalize_trip(res_msg: Any, mode: TripMode | str) -> TripMonth | list[TripDay] | None: ...


def normalize_trip(res_msg: Any, mode: TripMode | str) -> TripMonth | list[TripDay] | None:
    """Map ``resMsg`` of ``/tripinfo``.

    ``TripMode.MONTH`` yields a :class:`TripMonth`; ``TripMode.DAY`` yields
    a list of :class:`TripDay`.  ``None`` when the body carries nothing
    usable for the requested mode.
    """
    if TripMode(mode) == TripMode.DAY:
        return _normalize_trip_days(res_msg)
    return _normalize_trip_month(res_msg)


def _normalize_trip_month(res_msg: Any) -> TripMonth | None:
    if not isinstance(res_msg, dict):
        return None
    days = [
        TripMonthDay(
            day_raw=safe_str(get_path(day, "tripDayInMonth")),
            date=safe_parse_date(get_path(day, "tripDayInMonth")),
            trips_count=safe_int(get_path(day, "tripCntDay")),
        )
        for day in _list_at(res_msg, "tripDayList")
    ]
    return TripMonth(
        days=days,
        durations=_durations(res_msg, "tripDrvTime", "tripIdleTime"),
        distance=safe_float(res_msg.get("tripDist")),
        speed=_trip_speed(res_msg),
    )


def _normalize_trip(day_raw: str | None, trip: Any) -> Trip:
    time_raw = safe_str(get_path(trip, "tripTime"))
    start = safe_parse_date(f"{day_raw}{time_raw}") if day_raw and time_raw else None
    drive_minutes = safe_int(get_path(trip, "tripDrvTime"))
    return Trip(
        time_raw=time_raw,
        start=start,
        end=add_minutes(start, drive_minutes) if start is not None else None,
        durations=DurationSummary(drive=drive_minutes, idle=safe_int(get_path(trip, "tripIdleTime"))),
        speed=_trip_speed(trip),
        distance=safe_float(get_path(trip, "tripDist")),
    )


def _normalize_trip_days(res_msg: Any) -> list[TripDay] | None:
    raw_days = get_path(res_msg, "dayTripList")
    if not isinstance(raw_days, list):
        return None
    days: list[TripDay] = []
    for day in raw_days:
        day_raw = safe_str(get_path(day, "tripDay"))
        days.append(
            TripDay(
                day_raw=day_raw,
                trips_count=safe_int(get_path(day, "dayTripCnt")),
                distance=safe_float(get_path(day, "tripDist")),
                durations=_durations(day, "tripDrvTime", "tripIdleTime"),
                speed=_trip_speed(day),
                trips=[_normalize_trip(day_raw, trip) for trip in _list_at(day, "tripList")],
            )
        )
    _logger.debug("Normalized %d trip days", len(days))
    return days


# ------------------------------------------------------------------
# Drive history
# ------------------------------------------------------------------


def _history_entry(line: Any, *, dated: bool) -> DriveHistoryEntry:
    raw_date = safe_str(get_path(line, "drivingDate")) if dated else None
    return DriveHistoryEntry(
        period=safe_int(get_path(line, "drivingPeriod")),
        raw_date=raw_date,
        date=safe_parse_date(raw_date),
        consumption=EnergyConsumption(
            total=safe_float(get_path(line, "totalPwrCsp")),
            engine=safe_float(get_path(line, "motorPwrCsp")),
            climate=safe_float(get_path(line, "climatePwrCsp")),
            devices=safe_float(get_path(line, "eDPwrCsp")),
            battery=safe_float(get_path(line, "batteryMgPwrCsp")),
        ),
        regen=safe_float(get_path(line, "regenPwr")),
        distance=safe_float(get_path(line, "calculativeOdo")),
    )


def normalize_drive_history(res_msg: Any) -> DriveHistory:
    """Map ``resMsg`` of ``/drvhistory`` (cumulated totals + dated details)."""
    return DriveHistory(
        cumulated=[_history_entry(line, dated=False) for line in _list_at(res_msg, "drivingInfo")],
        history=[_history_entry(line, dated=True) for line in _list_at(res_msg, "drivingInfoDetail")],
    )


# ------------------------------------------------------------------
# Location / charge targets
# ------------------------------------------------------------------


def normalize_location(res_msg: Any) -> VehicleLocation:
    """Map ``resMsg.gpsDetail`` of ``/location/park``."""
    gps = get_path(res_msg, "gpsDetail", {})
    return VehicleLocation(
        latitude=safe_float(get_path(gps, "coord.lat")),
        longitude=safe_float(get_path(gps, "coord.lon")),
        altitude=safe_float(get_path(gps, "coord.alt")),
        speed=Speed(
            unit=safe_int(get_path(gps, "speed.unit")),
            value=safe_float(get_path(gps, "speed.value")),
        ),
        heading=safe_float(get_path(gps, "head")),
    )


def normalize_charge_targets(res_msg: Any) -> list[ChargeTargetSetting] | None:
    """Map ``resMsg.targetSOClist``; ``None`` when the list is absent."""
    raw_targets = get_path(res_msg, "targetSOClist")
    if not isinstance(raw_targets, list):
        return None
    return [
        ChargeTargetSetting(
            plug_type=to_enum(ChargeModeType, get_path(item, "plugType"), ChargeModeType.UNKNOWN),
            target_level=safe_int(get_path(item, "targetSOClevel")),
            distance=safe_float(get_path(item, "drvDistance.distanceType.distanceValue")),
        )
        for item in raw_targets
    ]
