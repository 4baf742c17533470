"""Status normalization for the two vendor wire shapes.

* Legacy: flat top-level fields (``doorLock``, ``airCtrlOn``,
  ``evStatus.drvDistance[0].rangeByFuel``...).  Every field is optional.
* CCS2: hierarchical ``state.Vehicle.{Body,Cabin,Chassis,Drivetrain,
  Electronics,Green}`` tree.  ``Vehicle``, ``Chassis.Axle`` and
  ``Cabin.Door`` are mandatory.

Both mappings are pure and finish with :func:`reconcile_range`.
"""

from __future__ import annotations

import logging
from typing import Any

from pybluelink._constants import Region
from pybluelink.exceptions import BluelinkMalformedPayloadError
from pybluelink.ingestion.normalize import (
    first_present,
    flag_equals,
    get_path,
    safe_bool,
    safe_float,
    safe_int,
    to_enum,
    truthy,
)
from pybluelink.models.status import (
    ChassisStatus,
    ClimateStatus,
    EngineStatus,
    OpenDoors,
    PlugType,
    StatusProtocol,
    TirePressureWarning,
    VehicleStatus,
)
from pybluelink.units import code_to_celsius, parse_timestamp, safe_parse_date

_logger = logging.getLogger(__name__)

_LEGACY_RANGE = "evStatus.drvDistance.0.rangeByFuel"


def normalize_status(
    raw: Any,
    protocol: StatusProtocol | str,
    *,
    region: Region | str = Region.AU,
) -> VehicleStatus:
    """Normalize a vendor status body according to *protocol*.

    Raises
    ------
    BluelinkMalformedPayloadError
        If a CCS2 body lacks one of its mandatory substructures.
    """
    protocol = StatusProtocol(protocol)
    if protocol == StatusProtocol.CCS2:
        status = normalize_ccs2_status(raw)
    else:
        status = normalize_legacy_status(raw, region=region)
    _logger.debug(
        "Normalized %s status keys=%s",
        protocol.value,
        list(raw.keys()) if isinstance(raw, dict) else [],
    )
    return reconcile_range(status)


def reconcile_range(status: VehicleStatus) -> VehicleStatus:
    """Derive ``engine.range`` from the partial ranges when it is missing.

    Only applies when ``range`` is absent or zero and at least one of
    ``range_ev``/``range_gas`` is non-zero; an explicit vendor value is
    never overridden.
    """
    engine = status.engine
    if engine.range:
        return status
    if not (engine.range_ev or engine.range_gas):
        return status
    total = (engine.range_ev or 0) + (engine.range_gas or 0)
    return status.model_copy(update={"engine": engine.model_copy(update={"range": total})})


# ------------------------------------------------------------------
# Legacy flat shape
# ------------------------------------------------------------------


def normalize_legacy_status(body: Any, *, region: Region | str = Region.AU) -> VehicleStatus:
    """Map a legacy status body. Missing fields degrade to ``None``/``False``.

    A body that is not an object maps like an empty one.
    """
    if not isinstance(body, dict):
        _logger.warning("Legacy status body is a %s, not an object", type(body).__name__)
        body = {}
    chassis = ChassisStatus(
        hood_open=safe_bool(get_path(body, "hoodOpen")),
        trunk_open=safe_bool(get_path(body, "trunkOpen")),
        locked=safe_bool(get_path(body, "doorLock")),
        open_doors=OpenDoors(
            front_left=truthy(body, "doorOpen.frontLeft"),
            front_right=truthy(body, "doorOpen.frontRight"),
            back_left=truthy(body, "doorOpen.backLeft"),
            back_right=truthy(body, "doorOpen.backRight"),
        ),
        tire_pressure_warning_lamp=TirePressureWarning(
            front_left=truthy(body, "tirePressureLamp.tirePressureLampFL"),
            front_right=truthy(body, "tirePressureLamp.tirePressureLampFR"),
            rear_left=truthy(body, "tirePressureLamp.tirePressureLampRL"),
            rear_right=truthy(body, "tirePressureLamp.tirePressureLampRR"),
            all=truthy(body, "tirePressureLamp.tirePressureWarningLampAll"),
        ),
    )

    climate = ClimateStatus(
        active=safe_bool(get_path(body, "airCtrlOn")),
        steering_wheel_heat=truthy(body, "steerWheelHeat"),
        side_mirror_heat=False,
        rear_window_heat=truthy(body, "sideBackWindowHeat"),
        defrost=safe_bool(get_path(body, "defrost")),
        temperature_setpoint=code_to_celsius(region, get_path(body, "airTemp.value")),
        temperature_unit=get_path(body, "airTemp.unit"),
    )

    engine = EngineStatus(
        ignition=safe_bool(get_path(body, "engine")),
        accessory=safe_bool(get_path(body, "acc")),
        range=safe_float(get_path(body, f"{_LEGACY_RANGE}.totalAvailableRange.value")),
        range_ev=safe_float(get_path(body, f"{_LEGACY_RANGE}.evModeRange.value")),
        range_gas=safe_float(
            first_present(
                get_path(body, f"{_LEGACY_RANGE}.gasModeRange.value"),
                get_path(body, "dte.value"),
            )
        ),
        plugged_to=to_enum(PlugType, get_path(body, "evStatus.batteryPlugin"), PlugType.UNPLUGGED),
        charging=safe_bool(get_path(body, "evStatus.batteryCharge")),
        estimated_current_charge_duration=safe_int(get_path(body, "evStatus.remainTime2.atc.value")),
        estimated_fast_charge_duration=safe_int(get_path(body, "evStatus.remainTime2.etc1.value")),
        estimated_portable_charge_duration=safe_int(get_path(body, "evStatus.remainTime2.etc2.value")),
        estimated_station_charge_duration=safe_int(get_path(body, "evStatus.remainTime2.etc3.value")),
        battery_charge_12v=safe_float(get_path(body, "battery.batSoc")),
        battery_charge_hv=safe_float(get_path(body, "evStatus.batteryStatus")),
    )

    return VehicleStatus(
        chassis=chassis,
        climate=climate,
        engine=engine,
        last_update=safe_parse_date(get_path(body, "time")),
        raw=body,
    )


# ------------------------------------------------------------------
# CCS2 hierarchical shape
# ------------------------------------------------------------------


def _require(tree: Any, path: str) -> dict[str, Any]:
    node = get_path(tree, path)
    if not isinstance(node, dict):
        raise BluelinkMalformedPayloadError(
            f"missing {path} in vehicle status response",
            path=path,
        )
    return node


def normalize_ccs2_status(body: dict[str, Any]) -> VehicleStatus:
    """Map a CCS2 status body.

    Raises
    ------
    BluelinkMalformedPayloadError
        If ``state.Vehicle``, ``state.Vehicle.Chassis.Axle`` or
        ``state.Vehicle.Cabin.Door`` is absent.
    """
    vehicle = _require(body, "state.Vehicle")
    axle = _require(body, "state.Vehicle.Chassis.Axle")
    door = _require(body, "state.Vehicle.Cabin.Door")
    charging = get_path(vehicle, "Green.ChargingInformation", {})

    chassis = ChassisStatus(
        hood_open=flag_equals(vehicle, "Body.Hood.Open"),
        trunk_open=flag_equals(vehicle, "Body.Trunk.Open"),
        locked=all(
            flag_equals(door, f"{seat}.Lock")
            for seat in ("Row1.Driver", "Row1.Passenger", "Row2.Left", "Row2.Right")
        ),
        # Driver side is the right-hand side on right-hand-drive markets.
        open_doors=OpenDoors(
            front_right=flag_equals(door, "Row1.Driver.Open"),
            front_left=flag_equals(door, "Row1.Passenger.Open"),
            back_left=flag_equals(door, "Row2.Left.Open"),
            back_right=flag_equals(door, "Row2.Right.Open"),
        ),
        tire_pressure_warning_lamp=TirePressureWarning(
            front_left=flag_equals(axle, "Row1.Left.Tire.PressureLow"),
            front_right=flag_equals(axle, "Row1.Right.Tire.PressureLow"),
            rear_left=flag_equals(axle, "Row2.Left.Tire.PressureLow"),
            rear_right=flag_equals(axle, "Row2.Right.Tire.PressureLow"),
            all=flag_equals(axle, "Tire.PressureLow"),
        ),
    )

    blower = safe_int(get_path(vehicle, "Cabin.HVAC.Row1.Driver.Blower.SpeedLevel"))
    climate = ClimateStatus(
        active=None if blower is None else blower != 0,
        steering_wheel_heat=flag_equals(vehicle, "Cabin.SteeringWheel.Heat.State"),
        # No known CCS2 source for mirror/rear-window heat or defrost.
        side_mirror_heat=False,
        rear_window_heat=False,
        defrost=False,
        temperature_setpoint=safe_float(get_path(vehicle, "Cabin.HVAC.Row1.Driver.Temperature.Value")),
        temperature_unit=get_path(vehicle, "Cabin.HVAC.Row1.Driver.Temperature.Unit"),
    )

    # DTE.Total is the only range field CCS2 exposes; it feeds all three.
    dte_total = safe_float(get_path(vehicle, "Drivetrain.FuelSystem.DTE.Total"))
    remain_time = safe_int(get_path(charging, "Charging.RemainTime"))
    engine = EngineStatus(
        accessory=flag_equals(vehicle, "Electronics.PowerSupply.Accessory"),
        ignition=flag_equals(vehicle, "Electronics.PowerSupply.Ignition1"),
        range=dte_total,
        range_ev=dte_total,
        range_gas=dte_total,
        plugged_to=to_enum(PlugType, get_path(charging, "ConnectorFastening.State"), PlugType.UNPLUGGED),
        charging=remain_time is not None and remain_time > 0,
        estimated_current_charge_duration=remain_time,
        estimated_station_charge_duration=safe_int(get_path(charging, "EstimatedTime.Quick")),
        estimated_fast_charge_duration=safe_int(get_path(charging, "EstimatedTime.Standard")),
        estimated_portable_charge_duration=safe_int(get_path(charging, "EstimatedTime.ICCB")),
        battery_charge_12v=safe_float(get_path(vehicle, "Electronics.Battery.Level")),
        battery_charge_hv=safe_float(get_path(vehicle, "Green.BatteryManagement.BatteryRemain.Ratio")),
    )

    return VehicleStatus(
        chassis=chassis,
        climate=climate,
        engine=engine,
        last_update=parse_timestamp(get_path(body, "lastUpdateTime")),
        raw=body,
    )
