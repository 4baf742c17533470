"""pybluelink - Bluelink vehicle telemetry normalization and async vehicle handle."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybluelink")
except PackageNotFoundError:
    __version__ = "0+local"
from pybluelink._constants import POSSIBLE_CHARGE_LIMIT_VALUES, Region
from pybluelink._transport import AiohttpRequestIssuer, HttpResponse, RequestIssuer
from pybluelink.charge_targets import validate_charge_targets
from pybluelink.client import BluelinkVehicle
from pybluelink.config import BluelinkConfig
from pybluelink.exceptions import (
    BluelinkApiError,
    BluelinkConfigError,
    BluelinkError,
    BluelinkInvalidChargeTargetError,
    BluelinkMalformedPayloadError,
    BluelinkTransportError,
)
from pybluelink.ingestion.reports import normalize_drive_history, normalize_monthly_report, normalize_trip
from pybluelink.ingestion.status import normalize_status
from pybluelink.models import (
    ChargeModeType,
    CommandResult,
    CommandStatus,
    DriveHistory,
    DriveHistoryPeriod,
    MonthlyReport,
    PlugType,
    StatusProtocol,
    TripDay,
    TripMode,
    TripMonth,
    TripQuery,
    VehicleRegistration,
    VehicleStatus,
)
from pybluelink.rate_limit import RateState, RateTracker, observe_rate_headers
from pybluelink.session import Session, SessionProvider
from pybluelink.state.snapshot import VehicleSnapshot
from pybluelink.units import celsius_to_code, code_to_celsius

__all__ = [
    "__version__",
    "AiohttpRequestIssuer",
    "BluelinkApiError",
    "BluelinkConfig",
    "BluelinkConfigError",
    "BluelinkError",
    "BluelinkInvalidChargeTargetError",
    "BluelinkMalformedPayloadError",
    "BluelinkTransportError",
    "BluelinkVehicle",
    "ChargeModeType",
    "CommandResult",
    "CommandStatus",
    "DriveHistory",
    "DriveHistoryPeriod",
    "HttpResponse",
    "MonthlyReport",
    "POSSIBLE_CHARGE_LIMIT_VALUES",
    "PlugType",
    "RateState",
    "RateTracker",
    "Region",
    "RequestIssuer",
    "Session",
    "SessionProvider",
    "StatusProtocol",
    "TripDay",
    "TripMode",
    "TripMonth",
    "TripQuery",
    "VehicleRegistration",
    "VehicleSnapshot",
    "VehicleStatus",
    "celsius_to_code",
    "code_to_celsius",
    "normalize_drive_history",
    "normalize_monthly_report",
    "normalize_status",
    "normalize_trip",
    "observe_rate_headers",
    "validate_charge_targets",
]
