"""Session state consumed by the vehicle handle.

Obtaining and refreshing tokens is the embedding client's job; this
module only defines what the handle reads from a session.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class SessionProvider(Protocol):
    """Anything exposing the current device id and bearer token."""

    @property
    def device_id(self) -> str: ...

    @property
    def access_token(self) -> str: ...


class Session(BaseModel):
    """Static session state after a successful login.

    Parameters
    ----------
    access_token : str
        Bearer token sent as ``Authorization``.
    device_id : str
        Push device id registered with the API; sent with door and
        charge commands.
    created_at : float
        Monotonic timestamp (``time.monotonic()``) when the session
        was created.
    ttl : float
        Seconds after which the session should be considered stale.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    access_token: str
    device_id: str
    created_at: float = Field(default_factory=time.monotonic)
    ttl: float = 23 * 3600

    @property
    def is_expired(self) -> bool:
        """Whether the session has exceeded its TTL."""
        return (time.monotonic() - self.created_at) >= self.ttl
