"""Shared helpers for Bluelink endpoint modules.

This module centralizes the most repeated patterns:
- building vehicle-scoped API paths
- unwrapping the ``resMsg`` envelope of read responses
- classifying command responses into :class:`CommandResult`

It is internal to pybluelink and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pybluelink._transport import HttpResponse
from pybluelink.exceptions import BluelinkApiError
from pybluelink.ingestion.normalize import get_path, safe_str
from pybluelink.models.control import CommandResult, CommandStatus, RemoteCommand

_SPA_V2 = "/api/v2/spa/vehicles"
_SPA_V1 = "/api/v1/spa/vehicles"

# ``retCode`` value the gateway uses for a logically failed request.
_RET_CODE_FAILED = "F"


def vehicle_path(vehicle_id: str, suffix: str) -> str:
    """Path on the vehicle service (``/api/v2``)."""
    return f"{_SPA_V2}/{vehicle_id}/{suffix.lstrip('/')}"


def api_path(vehicle_id: str, suffix: str) -> str:
    """Path on the legacy API service (``/api/v1``), used by trips/history."""
    return f"{_SPA_V1}/{vehicle_id}/{suffix.lstrip('/')}"


def require_ok(endpoint: str, response: HttpResponse) -> None:
    if not response.ok:
        raise BluelinkApiError(
            f"{endpoint} failed: HTTP {response.status_code} "
            f"{safe_str(get_path(response.body, 'resMsg')) or ''}".rstrip(),
            code=str(get_path(response.body, "resCode") or response.status_code),
            endpoint=endpoint,
        )


def unwrap_res_msg(endpoint: str, response: HttpResponse, *, required: bool = True) -> Any:
    """Return ``body.resMsg`` of a successful read.

    Raises
    ------
    BluelinkApiError
        On a non-2xx status, or when *required* and ``resMsg`` is missing.
    """
    require_ok(endpoint, response)
    res_msg = get_path(response.body, "resMsg")
    if res_msg is None and required:
        raise BluelinkApiError(
            f"{endpoint} returned no resMsg",
            code="missing_res_msg",
            endpoint=endpoint,
        )
    return res_msg


def command_result(command: RemoteCommand, response: HttpResponse) -> CommandResult:
    """Classify a command response.

    * non-2xx -> ``FAILED``
    * 2xx with ``retCode == "F"`` -> ``FAILED``
    * 204 or an empty body -> ``NOOP``
    * anything else 2xx -> ``SUCCESS``
    """
    body = response.body
    message = safe_str(get_path(body, "resMsg")) if not isinstance(get_path(body, "resMsg"), dict) else None
    if not response.ok:
        status = CommandStatus.FAILED
    elif str(get_path(body, "retCode", "")).upper() == _RET_CODE_FAILED:
        status = CommandStatus.FAILED
    elif response.status_code == 204 or body in (None, "", {}):
        status = CommandStatus.NOOP
    else:
        status = CommandStatus.SUCCESS
    return CommandResult(
        command=command,
        status=status,
        status_code=response.status_code,
        message=message,
        raw=body,
    )
