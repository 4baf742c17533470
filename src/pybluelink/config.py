"""Client configuration for pybluelink."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybluelink._constants import BASE_URL, USER_AGENT, Region
from pybluelink.exceptions import BluelinkConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class BluelinkConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API gateway base URL. Defaults to the Australian endpoint.
    region : Region
        Region whose temperature code table is used.
    brand : str
        ``"hyundai"`` or ``"kia"``; informational, sent nowhere.
    request_timeout : float
        Total timeout in seconds for one HTTP exchange.
    user_agent : str
        User agent sent by the default request issuer.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG level.
    """

    base_url: str = BASE_URL
    region: Region = Region.AU
    brand: str = "hyundai"
    request_timeout: float = 30.0
    user_agent: str = USER_AGENT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "region", Region(self.region))
        except ValueError as exc:
            raise BluelinkConfigError(f"Unsupported region {self.region!r}") from exc
        if self.request_timeout <= 0:
            raise BluelinkConfigError("request_timeout must be positive")

    @classmethod
    def from_env(cls, **overrides: Any) -> BluelinkConfig:
        """Create configuration from ``BLUELINK_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "BLUELINK_BASE_URL": "base_url",
            "BLUELINK_REGION": "region",
            "BLUELINK_BRAND": "brand",
            "BLUELINK_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("BLUELINK_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise BluelinkConfigError(f"BLUELINK_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("BLUELINK_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
