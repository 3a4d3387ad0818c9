"""
Pydantic models for order data.

``OrderBase`` holds the fields shared by requests and responses,
``OrderCreate`` is the body accepted by ``POST /orders`` and
``OrderRead`` is what every read endpoint returns.  Fields travel in
camelCase on the wire (``entryDate``, ``isInvoiced``) and are accepted
in snake_case as well.

Name and description are deliberately neither required nor constrained
here (missing, null, blank and overlong values are all accepted):
an invalid value must reach ``OrderService.create_order`` so it is
answered with ``400 Invalid order name or description.`` rather than
FastAPI's generic ``422``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class OrderBase(BaseModel):
    entry_date: datetime = Field(..., examples=["2024-01-08T09:30:00"])
    name: Optional[str] = Field(None, examples=["Office chairs"])
    description: Optional[str] = Field(None, examples=["Twelve ergonomic chairs for floor 3"])
    is_invoiced: bool = True
    is_deleted: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("entry_date")
    @classmethod
    def normalize_entry_date(cls, value: datetime) -> datetime:
        """Store timestamps as naive UTC, keeping the instant the client sent."""
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class OrderCreate(OrderBase):
    """Schema for creating an order.

    ``id`` is optional; when omitted the store assigns the next free
    identifier.
    """

    id: Optional[int] = None


class OrderRead(OrderBase):
    """Schema for reading an order from the API."""

    id: int
    # Stored orders always passed validation.
    name: str
    description: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
