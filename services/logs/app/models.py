"""
SQLAlchemy ORM models for the Logs service.

Defines the database schema for access-log tables.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from .database import Base

class AccessLog(Base):
    """
    Access log model representing a single recorded request.

    Attributes:
        id (int): Primary key, auto-incremented log entry ID
        ip (str): Client IP address
        user_agent (str): Client User-Agent header value
        timestamp (datetime): When the entry was recorded
    """
    __tablename__ = "access_logs"

    id = Column(Integer, primary_key=True, index=True)
    ip = Column(String, nullable=False)
    user_agent = Column(String, index=True, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)
