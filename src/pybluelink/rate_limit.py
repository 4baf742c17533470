"""Adaptive rate-limit tracking from response headers.

The API reports its call budget through ``x-ratelimit-*`` headers on
some (not all) responses.  A response without the limit header says
nothing about the budget, so the previous observation is kept as is.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from multidict import CIMultiDict, CIMultiDictProxy
from pydantic import BaseModel, ConfigDict

from pybluelink._constants import RATE_LIMIT_HEADER, RATE_REMAINING_HEADER, RATE_RESET_HEADER
from pybluelink.ingestion.normalize import safe_int

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RateState(BaseModel):
    """Last observed call budget. ``-1`` means "never reported"."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max: int = -1
    current: int = -1
    """Calls remaining in the current window."""
    reset: datetime | None = None
    """When the window resets (UTC)."""
    updated_at: datetime | None = None
    """When this snapshot was taken; ``None`` until the first update."""

    @property
    def known(self) -> bool:
        return self.updated_at is not None


def _case_insensitive(headers: Mapping[str, Any]) -> CIMultiDict[Any] | CIMultiDictProxy[Any]:
    # aiohttp hands over a CIMultiDictProxy already; plain mappings come from fakes and callers.
    if isinstance(headers, (CIMultiDict, CIMultiDictProxy)):
        return headers
    return CIMultiDict(headers)


def _reset_time(reset_seconds: int | None, previous: datetime | None) -> datetime | None:
    if reset_seconds is None:
        return previous
    try:
        return datetime.fromtimestamp(reset_seconds, tz=UTC)
    except (ValueError, OverflowError, OSError):
        _logger.debug("Ignoring unusable %s header %r", RATE_RESET_HEADER, reset_seconds)
        return previous


def observe_rate_headers(
    headers: Mapping[str, Any] | None,
    previous: RateState | None = None,
    *,
    now: datetime | None = None,
) -> RateState:
    """Return the rate state after observing *headers*.

    Only a present, numeric ``x-ratelimit-limit`` produces a new snapshot.
    ``x-ratelimit-reset`` is Unix seconds; an unusable value keeps the
    previous reset.  Values a response leaves out (remaining, reset)
    carry over from *previous*.
    """
    state = previous if previous is not None else RateState()
    if not headers:
        return state

    lookup = _case_insensitive(headers)
    limit = safe_int(lookup.get(RATE_LIMIT_HEADER))
    if limit is None:
        return state

    remaining = safe_int(lookup.get(RATE_REMAINING_HEADER))
    reset = _reset_time(safe_int(lookup.get(RATE_RESET_HEADER)), state.reset)

    updated = RateState(
        max=limit,
        current=remaining if remaining is not None else state.current,
        reset=reset,
        updated_at=now if now is not None else _utcnow(),
    )
    _logger.debug("Rate limit observed max=%d current=%d reset=%s", updated.max, updated.current, updated.reset)
    return updated


class RateTracker:
    """Holds the rate state of one vehicle handle."""

    def __init__(
        self,
        state: RateState | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._state = state if state is not None else RateState()
        self._clock = clock

    @property
    def state(self) -> RateState:
        return self._state

    def observe(self, headers: Mapping[str, Any] | None) -> RateState:
        """Fold *headers* into the held state and return it."""
        self._state = observe_rate_headers(headers, self._state, now=self._clock())
        return self._state
