"""Charge target models.

Mapped from the ``/charge/target`` endpoint (``targetSOClist``).
"""

from __future__ import annotations

from pybluelink.models._base import BluelinkEnum, BluelinkModel


class ChargeModeType(BluelinkEnum):
    """Plug channel a state-of-charge target applies to."""

    UNKNOWN = -1
    FAST = 0
    SLOW = 1


class ChargeTargetSetting(BluelinkModel):
    """One configured state-of-charge target."""

    plug_type: ChargeModeType = ChargeModeType.UNKNOWN
    target_level: int | None = None
    """Target state of charge in percent."""
    distance: float | None = None
    """Range the vehicle estimates at ``target_level``."""
