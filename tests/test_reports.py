from __future__ import annotations

from datetime import datetime
from typing import Any

from pybluelink._api.reports import build_drive_history_body, build_monthly_report_body, build_trip_info_body
from pybluelink.ingestion.reports import (
    normalize_charge_targets,
    normalize_drive_history,
    normalize_location,
    normalize_monthly_report,
    normalize_odometer,
    normalize_trip,
)
from pybluelink.models.charging import ChargeModeType
from pybluelink.models.reports import DriveHistoryPeriod, TripMode
from pybluelink.models.requests import MonthQuery, TripQuery

MONTHLY_RES_MSG: dict[str, Any] = {
    "odometer": 12345.6,
    "monthlyReport": {
        "ifo": {"mvrMonthStart": "20231101", "mvrMonthEnd": "20231130"},
        "driving": {"runDistance": 812, "engineStartCount": 37, "engineOnTime": 1240, "engineIdleTime": 95},
        "vehicleStatus": {"tpmsSupport": 1, "tirePressure": {"tirePressureLampAll": "1"}},
        "breakdown": {"ecuItems": []},
    },
}


class TestMonthlyReport:
    def test_full_report(self) -> None:
        report = normalize_monthly_report(MONTHLY_RES_MSG)
        assert report is not None
        assert report.start == "20231101"
        assert report.end == "20231130"
        assert report.driving is not None
        assert report.driving.distance == 812
        assert report.driving.start_count == 37
        assert report.driving.durations.drive == 1240
        assert report.driving.durations.idle == 95
        assert report.vehicle_status is not None
        assert report.vehicle_status.tpms is True
        assert report.vehicle_status.tire_pressure.all is True
        assert report.breakdown == {"ecuItems": []}

    def test_absent_groups_are_omitted(self) -> None:
        report = normalize_monthly_report({"monthlyReport": {"ifo": {"mvrMonthStart": "20231101"}}})
        assert report is not None
        assert report.driving is None
        assert report.vehicle_status is None
        assert report.breakdown is None
        dumped = report.model_dump(exclude_none=True)
        assert dumped == {"start": "20231101"}

    def test_tpms_unsupported(self) -> None:
        report = normalize_monthly_report(
            {"monthlyReport": {"vehicleStatus": {"tpmsSupport": 0, "tirePressure": {"tirePressureLampAll": 0}}}}
        )
        assert report is not None
        assert report.vehicle_status is not None
        assert report.vehicle_status.tpms is None
        assert report.vehicle_status.tire_pressure.all is False

    def test_no_report(self) -> None:
        assert normalize_monthly_report({"odometer": 5}) is None
        assert normalize_monthly_report(None) is None

    def test_odometer(self) -> None:
        odometer = normalize_odometer(MONTHLY_RES_MSG)
        assert odometer.value == 12345.6
        assert odometer.unit == 0
        assert normalize_odometer({}).value is None


class TestTrips:
    def test_month(self) -> None:
        res_msg = {
            "tripDayList": [
                {"tripDayInMonth": "20231102", "tripCntDay": 3},
                {"tripDayInMonth": "20231105", "tripCntDay": 1},
            ],
            "tripDrvTime": 180,
            "tripIdleTime": 12,
            "tripDist": 143.2,
            "tripAvgSpeed": 41,
            "tripMaxSpeed": 110,
        }
        month = normalize_trip(res_msg, TripMode.MONTH)
        assert month is not None
        assert [day.trips_count for day in month.days] == [3, 1]
        assert month.days[0].date == datetime(2023, 11, 2)
        assert month.durations.drive == 180
        assert month.durations.idle == 12
        assert month.distance == 143.2
        assert month.speed.avg == 41
        assert month.speed.max == 110

    def test_day_trip_end_is_start_plus_drive_minutes(self) -> None:
        res_msg = {
            "dayTripList": [
                {
                    "tripDay": "20231102",
                    "dayTripCnt": 2,
                    "tripDist": 30,
                    "tripDrvTime": 50,
                    "tripIdleTime": 4,
                    "tripAvgSpeed": 36,
                    "tripMaxSpeed": 80,
                    "tripList": [
                        {"tripTime": "081500", "tripDrvTime": 35, "tripIdleTime": 3, "tripDist": 21},
                        {"tripTime": "235000", "tripDrvTime": 15, "tripIdleTime": 1, "tripDist": 9},
                    ],
                }
            ]
        }
        days = normalize_trip(res_msg, TripMode.DAY)
        assert days is not None
        assert len(days) == 1
        day = days[0]
        assert day.day_raw == "20231102"
        assert day.trips_count == 2
        assert day.durations.drive == 50

        morning, late = day.trips
        assert morning.time_raw == "081500"
        assert morning.start == datetime(2023, 11, 2, 8, 15)
        assert morning.end == datetime(2023, 11, 2, 8, 50)
        assert morning.distance == 21
        assert late.end == datetime(2023, 11, 3, 0, 5)

    def test_day_without_list(self) -> None:
        assert normalize_trip({"tripDayList": []}, "day") is None

    def test_trip_without_time(self) -> None:
        days = normalize_trip({"dayTripList": [{"tripDay": "20231102", "tripList": [{"tripDist": 3}]}]}, TripMode.DAY)
        assert days is not None
        assert days[0].trips[0].start is None
        assert days[0].trips[0].end is None


class TestDriveHistory:
    def test_cumulated_and_detail(self) -> None:
        res_msg = {
            "drivingInfo": [
                {
                    "drivingPeriod": 0,
                    "totalPwrCsp": 1500,
                    "motorPwrCsp": 1100,
                    "climatePwrCsp": 200,
                    "eDPwrCsp": 50,
                    "batteryMgPwrCsp": 150,
                    "regenPwr": 300,
                    "calculativeOdo": 85.5,
                }
            ],
            "drivingInfoDetail": [
                {"drivingPeriod": 0, "drivingDate": "20231113", "totalPwrCsp": 700, "calculativeOdo": 40},
            ],
        }
        history = normalize_drive_history(res_msg)

        cumulated = history.cumulated[0]
        assert cumulated.period == 0
        assert cumulated.raw_date is None
        assert cumulated.consumption.total == 1500
        assert cumulated.consumption.engine == 1100
        assert cumulated.consumption.climate == 200
        assert cumulated.consumption.devices == 50
        assert cumulated.consumption.battery == 150
        assert cumulated.regen == 300
        assert cumulated.distance == 85.5

        detail = history.history[0]
        assert detail.raw_date == "20231113"
        assert detail.date == datetime(2023, 11, 13)
        assert detail.consumption.total == 700

    def test_empty(self) -> None:
        history = normalize_drive_history(None)
        assert history.cumulated == []
        assert history.history == []


def test_location() -> None:
    location = normalize_location(
        {
            "gpsDetail": {
                "coord": {"lat": -33.86, "lon": 151.21, "alt": 12, "type": 0},
                "head": 270,
                "speed": {"value": 0, "unit": 0},
                "time": "20231114221320",
            }
        }
    )
    assert location.latitude == -33.86
    assert location.longitude == 151.21
    assert location.altitude == 12
    assert location.heading == 270
    assert location.speed.value == 0
    assert location.speed.unit == 0


def test_location_missing_gps() -> None:
    location = normalize_location({})
    assert location.latitude is None
    assert location.speed.value is None


def test_charge_targets() -> None:
    targets = normalize_charge_targets(
        {
            "targetSOClist": [
                {"plugType": 0, "targetSOClevel": 80, "drvDistance": {"distanceType": {"distanceValue": 350}}},
                {"plugType": 1, "targetSOClevel": 100},
            ]
        }
    )
    assert targets is not None
    assert [t.plug_type for t in targets] == [ChargeModeType.FAST, ChargeModeType.SLOW]
    assert [t.target_level for t in targets] == [80, 100]
    assert targets[0].distance == 350
    assert targets[1].distance is None
    assert normalize_charge_targets({}) is None


class TestRequestBodies:
    def test_monthly_report(self) -> None:
        assert build_monthly_report_body(MonthQuery(year=2023, month=3)) == {"setRptMonth": "202303"}

    def test_trip_month(self) -> None:
        body = build_trip_info_body(TripQuery(year=2023, month=11))
        assert body == {"setTripLatest": 10, "setTripMonth": "202311", "tripPeriodType": 0}

    def test_trip_day(self) -> None:
        body = build_trip_info_body(TripQuery(year=2023, month=11, day=2))
        assert body == {"setTripLatest": 10, "setTripDay": "20231102", "tripPeriodType": 1}

    def test_drive_history(self) -> None:
        assert build_drive_history_body(DriveHistoryPeriod.MONTH) == {"periodTarget": 1}
