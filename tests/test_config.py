from __future__ import annotations

import pytest

from pybluelink._constants import BASE_URL, Region
from pybluelink.config import BluelinkConfig
from pybluelink.exceptions import BluelinkConfigError

_ENV_KEYS = (
    "BLUELINK_BASE_URL",
    "BLUELINK_REGION",
    "BLUELINK_BRAND",
    "BLUELINK_USER_AGENT",
    "BLUELINK_REQUEST_TIMEOUT",
    "BLUELINK_API_TRACE_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = BluelinkConfig()
    assert config.base_url == BASE_URL
    assert config.region == Region.AU
    assert config.request_timeout == 30.0
    assert config.api_trace_enabled is False


def test_region_string_is_coerced() -> None:
    assert BluelinkConfig(region="EU").region is Region.EU


def test_invalid_region() -> None:
    with pytest.raises(BluelinkConfigError):
        BluelinkConfig(region="US")


def test_non_positive_timeout() -> None:
    with pytest.raises(BluelinkConfigError):
        BluelinkConfig(request_timeout=0)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_BASE_URL", "https://example.invalid")
    monkeypatch.setenv("BLUELINK_REGION", "CA")
    monkeypatch.setenv("BLUELINK_BRAND", "kia")
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("BLUELINK_API_TRACE_ENABLED", "yes")

    config = BluelinkConfig.from_env()

    assert config.base_url == "https://example.invalid"
    assert config.region == Region.CA
    assert config.brand == "kia"
    assert config.request_timeout == 12.5
    assert config.api_trace_enabled is True


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("BLUELINK_API_TRACE_ENABLED", "1")

    config = BluelinkConfig.from_env(request_timeout=5.0, api_trace_enabled=False)

    assert config.request_timeout == 5.0
    assert config.api_trace_enabled is False


def test_from_env_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "soon")
    with pytest.raises(BluelinkConfigError):
        BluelinkConfig.from_env()
