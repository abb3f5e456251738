"""
Pydantic schemas for request/response validation in the Logs service.

These schemas define the structure of data for API requests and responses.
"""
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_serializer

class AccessLogCreate(BaseModel):
    """Schema for recording a new access log entry."""
    ip: str = Field(..., strict=True)
    user_agent: str = Field(..., strict=True, alias="userAgent")

    class Config:
        populate_by_name = True

class AccessLog(BaseModel):
    """
    Schema for access log responses.

    Attributes:
        id (int): Log entry identifier
        ip (str): Client IP address
        user_agent (str): Client User-Agent
        timestamp (datetime): When the entry was recorded
    """
    id: int
    ip: str
    user_agent: str = Field(..., alias="userAgent")
    timestamp: datetime

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    class Config:
        from_attributes = True
        populate_by_name = True

class UserAgentStat(BaseModel):
    """Number of recorded requests for one User-Agent."""
    user_agent: str = Field(..., alias="userAgent")
    count: int

    class Config:
        populate_by_name = True
