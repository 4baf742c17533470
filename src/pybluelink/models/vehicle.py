"""Vehicle registration model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pybluelink.ingestion.normalize import safe_bool
from pybluelink.models.status import StatusProtocol


class VehicleRegistration(BaseModel):
    """A vehicle registered to the account.

    Fields are mapped from the ``/spa/vehicles`` list entries.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: str = Field(validation_alias=AliasChoices("vehicleId", "id"))
    """Vendor vehicle identifier used in every endpoint path."""
    vin: str = Field(default="", validation_alias=AliasChoices("vin"))
    """Vehicle Identification Number."""
    name: str = Field(default="", validation_alias=AliasChoices("vehicleName", "name"))
    """Model name."""
    nickname: str = Field(default="", validation_alias=AliasChoices("nickname", "nickName"))
    """User-defined alias."""
    reg_date: str = Field(default="", validation_alias=AliasChoices("regDate", "reg_date"))
    brand_indicator: str = Field(default="H", validation_alias=AliasChoices("brandIndicator", "brand_indicator"))
    generation: str = Field(default="", validation_alias=AliasChoices("generation", "type"))
    ccu_ccs2_protocol_support: bool = Field(
        default=False,
        validation_alias=AliasChoices("ccuCCS2ProtocolSupport", "ccu_ccs2_protocol_support"),
    )
    """Whether the vehicle reports status in the nested CCS2 shape."""

    raw: dict[str, Any] = Field(default_factory=dict)
    """Full API response dict for access to additional fields."""

    @property
    def status_protocol(self) -> StatusProtocol:
        return StatusProtocol.CCS2 if self.ccu_ccs2_protocol_support else StatusProtocol.LEGACY

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        return merged

    @field_validator("id", "generation", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("ccu_ccs2_protocol_support", mode="before")
    @classmethod
    def _coerce_ccs2(cls, value: Any) -> bool:
        return bool(safe_bool(value))
