"""
CRUD (Create, Read, Update, Delete) operations for the Orders service.

``OrderRepository`` is the only code that reads or writes the orders table.
Missing rows are reported as ``None``; database errors propagate unchanged.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from . import models

UPDATABLE_FIELDS = ("product", "price")


class OrderRepository:
    """Persistence gateway over the ``orders`` table."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, product: str, price: float) -> models.Order:
        """
        Create a new order in the database.

        Args:
            product: Product name
            price: Product price

        Returns:
            Created Order object with its generated ID and timestamps
        """
        now = datetime.utcnow()
        db_order = models.Order(product=product, price=price, created_at=now, updated_at=now)
        self.db.add(db_order)
        self.db.commit()
        self.db.refresh(db_order)
        return db_order

    def list_all(self) -> List[models.Order]:
        """
        Retrieve every order, most recently created first.

        Returns:
            List of Order objects (empty if there are none)
        """
        return (
            self.db.query(models.Order)
            .order_by(models.Order.created_at.desc(), models.Order.id.desc())
            .all()
        )

    def find_by_id(self, order_id: int) -> Optional[models.Order]:
        """
        Retrieve a single order by ID.

        Args:
            order_id: ID of the order to retrieve

        Returns:
            Order object or None if not found
        """
        return self.db.query(models.Order).filter(models.Order.id == order_id).first()

    def update_by_id(self, order_id: int, fields: Dict[str, Any]) -> Optional[models.Order]:
        """
        Update an existing order.

        Only the supplied fields change; ``updated_at`` is always refreshed.

        Args:
            order_id: ID of the order to update
            fields: Column values to apply

        Returns:
            Updated Order object or None if not found
        """
        db_order = self.find_by_id(order_id)
        if db_order is None:
            return None

        for key, value in fields.items():
            if key in UPDATABLE_FIELDS:
                setattr(db_order, key, value)

        # updated_at must move forward even within the clock's resolution
        now = datetime.utcnow()
        if now <= db_order.updated_at:
            now = db_order.updated_at + timedelta(microseconds=1)
        db_order.updated_at = now

        self.db.commit()
        self.db.refresh(db_order)
        return db_order

    def delete_by_id(self, order_id: int) -> Optional[models.Order]:
        """
        Delete an order from the database.

        Args:
            order_id: ID of the order to delete

        Returns:
            The deleted Order object or None if not found
        """
        db_order = self.find_by_id(order_id)
        if db_order is None:
            return None

        self.db.delete(db_order)
        self.db.commit()
        return db_order
