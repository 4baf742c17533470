"""Remote control request bodies.

Endpoints (vehicle service):
  - control/engine          (climate start/stop)
  - control/door            (lock/unlock)
  - control/charge          (start/stop charging)
  - control/windowcurtain   (windows)
  - charge/target           (state-of-charge targets)
  - location/routes         (send navigation)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pybluelink._constants import STOP_CLIMATE_TEMP_CODE, Region
from pybluelink.models.requests import ClimateStartOptions
from pybluelink.units import celsius_to_code

ENGINE_ENDPOINT = "control/engine"
DOOR_ENDPOINT = "control/door"
CHARGE_ENDPOINT = "control/charge"
WINDOWS_ENDPOINT = "control/windowcurtain"
CHARGE_TARGET_ENDPOINT = "charge/target"
ROUTES_ENDPOINT = "location/routes"


def build_climate_start_body(region: Region | str, options: ClimateStartOptions) -> dict[str, Any]:
    """Body for ``control/engine`` with ``action=start``.

    Raises :class:`ValueError` if the temperature is outside the region table.
    """
    return {
        "action": "start",
        "hvacType": 0,
        "options": {
            "defrost": options.defrost,
            "heating1": 1 if options.heated_features else 0,
        },
        "tempCode": celsius_to_code(region, options.temperature),
        "unit": options.unit,
    }


def build_climate_stop_body() -> dict[str, Any]:
    return {
        "action": "stop",
        "hvacType": 0,
        "options": {
            "defrost": True,
            "heating1": 1,
        },
        "tempCode": STOP_CLIMATE_TEMP_CODE,
        "unit": "C",
    }


def build_door_body(*, lock: bool, device_id: str) -> dict[str, Any]:
    return {"action": "close" if lock else "open", "deviceId": device_id}


def build_charge_body(*, start: bool, device_id: str) -> dict[str, Any]:
    return {"action": "start" if start else "stop", "deviceId": device_id}


def build_navigation_body(pois: Sequence[dict[str, Any]], *, device_id: str) -> dict[str, Any]:
    return {"deviceID": device_id, "poiInfoList": list(pois)}
