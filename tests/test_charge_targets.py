from __future__ import annotations

import pytest

from pybluelink.charge_targets import build_charge_target_body, is_valid_charge_target, validate_charge_targets
from pybluelink.exceptions import BluelinkError, BluelinkInvalidChargeTargetError


@pytest.mark.parametrize("value", [50, 60, 70, 80, 90, 100])
def test_allowed_values(value: int) -> None:
    assert is_valid_charge_target(value)


@pytest.mark.parametrize("value", [0, 45, 55, 95, 101, True, "80", None])
def test_rejected_values(value: object) -> None:
    assert not is_valid_charge_target(value)


def test_valid_pair_passes() -> None:
    validate_charge_targets(50, 90)


def test_invalid_fast_target_lists_allowed_set() -> None:
    with pytest.raises(BluelinkInvalidChargeTargetError) as exc_info:
        validate_charge_targets(55, 90)
    assert exc_info.value.allowed == (50, 60, 70, 80, 90, 100)
    assert "50, 60, 70, 80, 90, 100" in str(exc_info.value)
    assert "fast=55" in str(exc_info.value)


def test_invalid_slow_target() -> None:
    with pytest.raises(BluelinkError):
        validate_charge_targets(80, 85)


def test_body_lists_fast_then_slow() -> None:
    assert build_charge_target_body(80, 100) == {
        "targetSOClist": [
            {"plugType": 0, "targetSOClevel": 80},
            {"plugType": 1, "targetSOClevel": 100},
        ]
    }


def test_body_not_built_for_invalid_targets() -> None:
    with pytest.raises(BluelinkInvalidChargeTargetError):
        build_charge_target_body(80, 0)
