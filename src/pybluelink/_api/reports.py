"""Report, trip and history request bodies.

Endpoints:
  - monthlyreport   (vehicle service; also carries the odometer)
  - tripinfo        (API service)
  - drvhistory      (API service)
"""

from __future__ import annotations

from typing import Any

from pybluelink._constants import TRIP_LATEST_COUNT
from pybluelink.models.reports import DriveHistoryPeriod, TripMode
from pybluelink.models.requests import MonthQuery, TripQuery

MONTHLY_REPORT_ENDPOINT = "monthlyreport"
TRIP_INFO_ENDPOINT = "tripinfo"
DRIVE_HISTORY_ENDPOINT = "drvhistory"


def build_monthly_report_body(query: MonthQuery) -> dict[str, Any]:
    return {"setRptMonth": query.month_key}


def build_trip_info_body(query: TripQuery) -> dict[str, Any]:
    """Monthly summaries without ``day``; a per-day trip list with it."""
    if query.mode == TripMode.DAY:
        return {
            "setTripLatest": TRIP_LATEST_COUNT,
            "setTripDay": query.day_key,
            "tripPeriodType": 1,
        }
    return {
        "setTripLatest": TRIP_LATEST_COUNT,
        "setTripMonth": query.month_key,
        "tripPeriodType": 0,
    }


def build_drive_history_body(period: DriveHistoryPeriod) -> dict[str, Any]:
    return {"periodTarget": int(period)}
