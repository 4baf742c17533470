"""Custom exception hierarchy for pybluelink."""

from __future__ import annotations

from collections.abc import Iterable


class BluelinkError(Exception):
    """Base exception for all pybluelink errors."""


class BluelinkConfigError(BluelinkError):
    """Invalid or missing configuration."""


class BluelinkTransportError(BluelinkError):
    """HTTP-level failure (network, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class BluelinkApiError(BluelinkError):
    """API answered, but not with something a read can use.

    Raised for non-2xx status codes on read endpoints and for bodies
    without the ``resMsg`` payload the read expects.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class BluelinkMalformedPayloadError(BluelinkError):
    """A load-bearing vendor substructure is missing.

    The CCS2 status tree must carry ``state.Vehicle``,
    ``Chassis.Axle`` and ``Cabin.Door``.  Their absence means the vendor
    contract changed; the caller decides whether to fetch again.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class BluelinkInvalidChargeTargetError(BluelinkError):
    """Requested state-of-charge target is not one the vehicle accepts."""

    def __init__(self, message: str, *, allowed: Iterable[int] = ()) -> None:
        self.allowed = tuple(allowed)
        super().__init__(message)
