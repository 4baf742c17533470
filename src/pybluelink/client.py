"""Async vehicle handle for the Bluelink API."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal, overload

from pybluelink._api import control as _control_api
from pybluelink._api import reports as _reports_api
from pybluelink._api._common import api_path, command_result, unwrap_res_msg, vehicle_path
from pybluelink._transport import HttpResponse, RequestIssuer
from pybluelink.charge_targets import build_charge_target_body
from pybluelink.config import BluelinkConfig
from pybluelink.ingestion.reports import (
    normalize_charge_targets,
    normalize_drive_history,
    normalize_location,
    normalize_monthly_report,
    normalize_odometer,
    normalize_trip,
)
from pybluelink.ingestion.status import normalize_status
from pybluelink.models.charging import ChargeTargetSetting
from pybluelink.models.control import CommandResult, RemoteCommand
from pybluelink.models.location import FullVehicleStatus, VehicleLocation, VehicleOdometer
from pybluelink.models.reports import DriveHistory, DriveHistoryPeriod, MonthlyReport, TripDay, TripMonth
from pybluelink.models.requests import ClimateStartOptions, MonthQuery, TripQuery, WindowsOptions
from pybluelink.models.status import StatusProtocol, VehicleStatus
from pybluelink.models.vehicle import VehicleRegistration
from pybluelink.rate_limit import RateState, observe_rate_headers
from pybluelink.session import SessionProvider
from pybluelink.state.snapshot import (
    VehicleSnapshot,
    with_full_status,
    with_location,
    with_odometer,
    with_rates,
    with_status,
)

_logger = logging.getLogger(__name__)


class BluelinkVehicle:
    """Async handle for one registered vehicle.

    The handle issues requests through a :class:`RequestIssuer`, runs every
    response through the rate tracker and normalizes the payloads.  The
    last-known-good results live in :attr:`snapshot`; pass a previous
    snapshot in to resume from stored state.

    Usage::

        vehicle = BluelinkVehicle(registration, issuer, session)
        status = await vehicle.status(refresh=True)
        rates = vehicle.snapshot.rates
    """

    def __init__(
        self,
        registration: VehicleRegistration,
        issuer: RequestIssuer,
        session: SessionProvider,
        *,
        config: BluelinkConfig | None = None,
        snapshot: VehicleSnapshot | None = None,
    ) -> None:
        self._registration = registration
        self._issuer = issuer
        self._session = session
        self._config = config if config is not None else BluelinkConfig()
        self._snapshot = snapshot if snapshot is not None else VehicleSnapshot()
        _logger.debug("Vehicle %s created", registration.id)

    @property
    def registration(self) -> VehicleRegistration:
        return self._registration

    @property
    def snapshot(self) -> VehicleSnapshot:
        """Last-known-good state; replaced (never mutated) on each fetch."""
        return self._snapshot

    @property
    def rates(self) -> RateState:
        return self._snapshot.rates

    @property
    def protocol(self) -> StatusProtocol:
        return self._registration.status_protocol

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, body: Mapping[str, Any] | None = None) -> HttpResponse:
        response = await self._issuer.request(method, path, body)
        rates = observe_rate_headers(response.headers, self._snapshot.rates)
        self._snapshot = with_rates(self._snapshot, rates)
        return response

    def _vehicle_path(self, suffix: str) -> str:
        return vehicle_path(self._registration.id, suffix)

    def _api_path(self, suffix: str) -> str:
        return api_path(self._registration.id, suffix)

    async def _command(
        self,
        command: RemoteCommand,
        suffix: str,
        body: Mapping[str, Any],
    ) -> CommandResult:
        response = await self._request("POST", self._vehicle_path(suffix), body)
        result = command_result(command, response)
        if result.success:
            _logger.info("Sent %s to vehicle %s", command.value, self._registration.id)
        else:
            _logger.warning(
                "%s for vehicle %s ended %s (HTTP %d)",
                command.value,
                self._registration.id,
                result.status.value,
                result.status_code,
            )
        return result

    # ------------------------------------------------------------------
    # Status reads
    # ------------------------------------------------------------------

    @overload
    async def status(self, *, refresh: bool = ..., parsed: Literal[True] = ...) -> VehicleStatus: ...

    @overload
    async def status(self, *, refresh: bool = ..., parsed: Literal[False]) -> dict[str, Any]: ...

    async def status(self, *, refresh: bool = False, parsed: bool = True) -> VehicleStatus | dict[str, Any]:
        """Fetch the vehicle status.

        Parameters
        ----------
        refresh : bool
            Ask the vehicle for fresh data instead of the server cache.
        parsed : bool
            Return the normalized :class:`VehicleStatus` (default) or the
            raw vendor body.

        Raises
        ------
        BluelinkApiError
            On a non-2xx answer or a body without ``resMsg``.
        BluelinkMalformedPayloadError
            If a CCS2 body lacks a mandatory substructure.
        """
        cache_suffix = "" if refresh else "/latest"
        if self.protocol == StatusProtocol.CCS2:
            suffix = f"ccs2/carstatus{cache_suffix}"
        else:
            suffix = f"status{cache_suffix}"
        path = self._vehicle_path(suffix)

        response = await self._request("GET", path)
        body = unwrap_res_msg(path, response)
        result: VehicleStatus | dict[str, Any] = (
            normalize_status(body, self.protocol, region=self._config.region) if parsed else body
        )
        self._snapshot = with_status(self._snapshot, result)
        return result

    async def full_status(self, *, refresh: bool = False) -> FullVehicleStatus:
        """Raw status, parked location and odometer in one structure."""
        status_path = self._vehicle_path("status" if refresh else "status/latest")
        status_response = await self._request("GET", status_path)
        vehicle_status = unwrap_res_msg(status_path, status_response)

        location = await self.location()
        odometer = await self.odometer()

        full = FullVehicleStatus(
            location=location,
            odometer=odometer,
            vehicle_status=vehicle_status if isinstance(vehicle_status, dict) else {},
        )
        self._snapshot = with_full_status(self._snapshot, full)
        return full

    async def odometer(self) -> VehicleOdometer:
        """Current odometer, read from this month's report."""
        path = self._vehicle_path(_reports_api.MONTHLY_REPORT_ENDPOINT)
        body = _reports_api.build_monthly_report_body(MonthQuery.current())
        response = await self._request("POST", path, body)
        odometer = normalize_odometer(unwrap_res_msg(path, response))
        self._snapshot = with_odometer(self._snapshot, odometer)
        return odometer

    async def location(self) -> VehicleLocation:
        path = self._vehicle_path("location/park")
        response = await self._request("GET", path)
        location = normalize_location(unwrap_res_msg(path, response))
        self._snapshot = with_location(self._snapshot, location)
        return location

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    async def monthly_report(self, query: MonthQuery | None = None) -> MonthlyReport | None:
        """Monthly report for *query* (defaults to the current month)."""
        query = query if query is not None else MonthQuery.current()
        path = self._vehicle_path(_reports_api.MONTHLY_REPORT_ENDPOINT)
        response = await self._request("POST", path, _reports_api.build_monthly_report_body(query))
        return normalize_monthly_report(unwrap_res_msg(path, response, required=False))

    async def trip_info(self, query: TripQuery | None = None) -> TripMonth | list[TripDay] | None:
        """Trip data for *query* (defaults to the current month).

        Without ``query.day`` this returns a :class:`TripMonth`; with it,
        a list of :class:`TripDay`.  Check ``query.mode`` to know which.
        """
        query = query if query is not None else TripQuery.current()
        path = self._api_path(_reports_api.TRIP_INFO_ENDPOINT)
        response = await self._request("POST", path, _reports_api.build_trip_info_body(query))
        return normalize_trip(unwrap_res_msg(path, response, required=False), query.mode)

    async def drive_history(self, period: DriveHistoryPeriod = DriveHistoryPeriod.DAY) -> DriveHistory:
        path = self._api_path(_reports_api.DRIVE_HISTORY_ENDPOINT)
        response = await self._request("POST", path, _reports_api.build_drive_history_body(period))
        return normalize_drive_history(unwrap_res_msg(path, response, required=False))

    # ------------------------------------------------------------------
    # Charging
    # ------------------------------------------------------------------

    async def get_charge_targets(self) -> list[ChargeTargetSetting] | None:
        """Configured state-of-charge targets (EV only)."""
        path = self._vehicle_path(_control_api.CHARGE_TARGET_ENDPOINT)
        response = await self._request("GET", path)
        return normalize_charge_targets(unwrap_res_msg(path, response, required=False))

    async def set_charge_targets(self, fast: int, slow: int) -> CommandResult:
        """Set both state-of-charge targets (EV only).

        Raises
        ------
        BluelinkInvalidChargeTargetError
            Before any request, if either value is not allowed.
        """
        body = build_charge_target_body(fast, slow)
        return await self._command(RemoteCommand.SET_CHARGE_TARGETS, _control_api.CHARGE_TARGET_ENDPOINT, body)

    async def start_charge(self) -> CommandResult:
        body = _control_api.build_charge_body(start=True, device_id=self._session.device_id)
        return await self._command(RemoteCommand.START_CHARGE, _control_api.CHARGE_ENDPOINT, body)

    async def stop_charge(self) -> CommandResult:
        body = _control_api.build_charge_body(start=False, device_id=self._session.device_id)
        return await self._command(RemoteCommand.STOP_CHARGE, _control_api.CHARGE_ENDPOINT, body)

    # ------------------------------------------------------------------
    # Remote control
    # ------------------------------------------------------------------

    async def start(self, options: ClimateStartOptions) -> CommandResult:
        """Start climate control.

        Raises :class:`ValueError` if the temperature is outside the
        region's table; nothing is sent in that case.
        """
        body = _control_api.build_climate_start_body(self._config.region, options)
        return await self._command(RemoteCommand.START_CLIMATE, _control_api.ENGINE_ENDPOINT, body)

    async def stop(self) -> CommandResult:
        body = _control_api.build_climate_stop_body()
        return await self._command(RemoteCommand.STOP_CLIMATE, _control_api.ENGINE_ENDPOINT, body)

    async def lock(self) -> CommandResult:
        body = _control_api.build_door_body(lock=True, device_id=self._session.device_id)
        return await self._command(RemoteCommand.LOCK, _control_api.DOOR_ENDPOINT, body)

    async def unlock(self) -> CommandResult:
        body = _control_api.build_door_body(lock=False, device_id=self._session.device_id)
        return await self._command(RemoteCommand.UNLOCK, _control_api.DOOR_ENDPOINT, body)

    async def set_windows(self, options: WindowsOptions) -> CommandResult:
        return await self._command(RemoteCommand.SET_WINDOWS, _control_api.WINDOWS_ENDPOINT, options.to_body())

    async def set_navigation(self, pois: Sequence[dict[str, Any]]) -> CommandResult:
        """Send a route (POIs and waypoints) to the vehicle navigation."""
        body = _control_api.build_navigation_body(pois, device_id=self._session.device_id)
        return await self._command(RemoteCommand.SET_NAVIGATION, _control_api.ROUTES_ENDPOINT, body)
