"""State-of-charge target validation.

The vehicle only accepts a short list of checkpoints, not an arbitrary
0-100 range.  Both channels are validated before anything is sent.
"""

from __future__ import annotations

from typing import Any

from pybluelink._constants import POSSIBLE_CHARGE_LIMIT_VALUES
from pybluelink.exceptions import BluelinkInvalidChargeTargetError
from pybluelink.models.charging import ChargeModeType


def is_valid_charge_target(value: Any) -> bool:
    return not isinstance(value, bool) and value in POSSIBLE_CHARGE_LIMIT_VALUES


def validate_charge_targets(fast: int, slow: int) -> None:
    """Check both targets against the allowed set.

    Raises
    ------
    BluelinkInvalidChargeTargetError
        If either value is not allowed.  Nothing is applied in that case.
    """
    if is_valid_charge_target(fast) and is_valid_charge_target(slow):
        return
    allowed = ", ".join(str(value) for value in POSSIBLE_CHARGE_LIMIT_VALUES)
    raise BluelinkInvalidChargeTargetError(
        f"Charge target values are limited to {allowed} (got fast={fast!r}, slow={slow!r})",
        allowed=POSSIBLE_CHARGE_LIMIT_VALUES,
    )


def build_charge_target_body(fast: int, slow: int) -> dict[str, Any]:
    """Validate and build the ``/charge/target`` request body."""
    validate_charge_targets(fast, slow)
    return {
        "targetSOClist": [
            {"plugType": int(ChargeModeType.FAST), "targetSOClevel": fast},
            {"plugType": int(ChargeModeType.SLOW), "targetSOClevel": slow},
        ]
    }
