"""Normalized data models."""

from pybluelink.models._base import BluelinkEnum, BluelinkModel, DurationSummary, SpeedSummary
from pybluelink.models.charging import ChargeModeType, ChargeTargetSetting
from pybluelink.models.control import CommandResult, CommandStatus, RemoteCommand
from pybluelink.models.location import FullVehicleStatus, Speed, VehicleLocation, VehicleOdometer
from pybluelink.models.reports import (
    DriveHistory,
    DriveHistoryEntry,
    DriveHistoryPeriod,
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
from pybluelink.models.requests import ClimateStartOptions, MonthQuery, TripQuery, WindowsOptions
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
from pybluelink.models.vehicle import VehicleRegistration

__all__ = [
    "BluelinkEnum",
    "BluelinkModel",
    "ChargeModeType",
    "ChargeTargetSetting",
    "ChassisStatus",
    "ClimateStartOptions",
    "ClimateStatus",
    "CommandResult",
    "CommandStatus",
    "DriveHistory",
    "DriveHistoryEntry",
    "DriveHistoryPeriod",
    "DurationSummary",
    "EnergyConsumption",
    "EngineStatus",
    "FullVehicleStatus",
    "MonthQuery",
    "MonthlyDriving",
    "MonthlyReport",
    "MonthlyTirePressure",
    "MonthlyVehicleStatus",
    "OpenDoors",
    "PlugType",
    "RemoteCommand",
    "Speed",
    "SpeedSummary",
    "StatusProtocol",
    "TirePressureWarning",
    "Trip",
    "TripDay",
    "TripMode",
    "TripMonth",
    "TripMonthDay",
    "TripQuery",
    "VehicleLocation",
    "VehicleOdometer",
    "VehicleRegistration",
    "VehicleStatus",
    "WindowsOptions",
]
