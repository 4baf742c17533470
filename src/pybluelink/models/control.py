"""Remote command models and results."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field

from pybluelink.models._base import BluelinkModel


class RemoteCommand(enum.StrEnum):
    """Remote commands the vehicle handle can issue."""

    START_CLIMATE = "start_climate"
    STOP_CLIMATE = "stop_climate"
    LOCK = "lock"
    UNLOCK = "unlock"
    START_CHARGE = "start_charge"
    STOP_CHARGE = "stop_charge"
    SET_WINDOWS = "set_windows"
    SET_CHARGE_TARGETS = "set_charge_targets"
    SET_NAVIGATION = "set_navigation"


class CommandStatus(enum.StrEnum):
    """Outcome of a remote command.

    ``NOOP`` means the API accepted the request without a body to act on
    (e.g. HTTP 204); ``FAILED`` covers both non-2xx answers and 2xx
    answers whose ``retCode`` reports a logical failure.
    """

    SUCCESS = "success"
    NOOP = "noop"
    FAILED = "failed"


class CommandResult(BluelinkModel):
    """Result of a remote command."""

    command: RemoteCommand
    status: CommandStatus
    status_code: int
    message: str | None = None
    raw: Any = Field(default=None, repr=False)

    @property
    def success(self) -> bool:
        return self.status == CommandStatus.SUCCESS
