"""
Pydantic schemas for request/response validation in the Orders service.

These schemas define the structure of data for API requests and responses.
Responses use camelCase timestamp names (``createdAt``, ``updatedAt``).
"""
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_serializer


def format_utc(value: datetime) -> str:
    """Render a stored (naive UTC) timestamp as ISO 8601 with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class OrderCreate(BaseModel):
    """Schema for creating a new order."""
    product: str = Field(..., strict=True, min_length=1, description="Product name")
    price: float = Field(..., strict=True, gt=0, allow_inf_nan=False, description="Product price")


class OrderUpdate(BaseModel):
    """Schema for updating an existing order. All fields are optional."""
    product: Optional[str] = Field(default=None, strict=True, min_length=1)
    price: Optional[float] = Field(default=None, strict=True, gt=0, allow_inf_nan=False)


class Order(BaseModel):
    """
    Schema for order responses, includes all database fields.

    Attributes:
        id (int): Order's unique identifier
        product (str): Product name
        price (float): Product price
        created_at (datetime): When the order was created
        updated_at (datetime): When the order was last written
    """
    id: int
    product: str
    price: float
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: datetime) -> str:
        return format_utc(value)

    class Config:
        from_attributes = True
        populate_by_name = True
