"""Price data models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic import ConfigDict as PydanticConfigDict


class PriceRecord(BaseModel):
    """One hourly price quotation."""

    starts_at: datetime = Field(alias="startsAt")
    total: Decimal

    model_config = PydanticConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("starts_at")
    @classmethod
    def require_timezone(cls, value: datetime) -> datetime:
        """Reject naive timestamps, they cannot be compared with the clock."""
        if value.tzinfo is None:
            raise ValueError("starts_at must be timezone aware")
        return value

    @field_serializer("total", when_used="json")
    def serialize_decimal(self, value: Decimal) -> str:
        """Serialize Decimal to string."""
        return str(value)

    @field_serializer("starts_at", when_used="json")
    def serialize_datetime(self, value: datetime) -> str:
        """Serialize datetime to isoformat string."""
        return value.isoformat()
