"""
SQLAlchemy ORM models for the Orders service.

Defines the database schema for order-related tables.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float
from .database import Base

class Order(Base):
    """
    Order model representing a purchased product line.

    Attributes:
        id (int): Primary key, auto-incremented and never reused
        product (str): Name of the purchased product
        price (float): Price of the product, always positive
        created_at (datetime): Timestamp when the order was created
        updated_at (datetime): Timestamp of the last successful write
    """
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    product = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
