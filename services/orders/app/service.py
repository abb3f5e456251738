"""
Order service: the domain-facing contract of the Orders API.

The service validates input, delegates to an ``OrderRepository`` and turns
missing rows into ``OrderNotFoundError``. It returns plain ``schemas.Order``
records that are detached from the database session.
"""
import logging
from typing import Any, Dict, List

from . import schemas, validators
from .crud import OrderRepository
from .exceptions import OrderNotFoundError, OrderValidationError

logger = logging.getLogger(__name__)


def _parse_id(order_id: Any) -> int:
    parsed, error = validators.parse_order_id(order_id)
    if parsed is None:
        raise OrderValidationError(error)
    return parsed


class OrderService:
    """Create, list, fetch, update and remove orders."""

    def __init__(self, repository: OrderRepository):
        self.repository = repository

    def create(self, data: Dict[str, Any]) -> schemas.Order:
        """
        Create a new order.

        Args:
            data: Mapping with ``product`` and ``price``

        Returns:
            The created order

        Raises:
            OrderValidationError: if the input is invalid
        """
        is_valid, error = validators.validate_order_create(data)
        if not is_valid:
            raise OrderValidationError(error)

        logger.info("Creating a new order")
        order = self.repository.insert(data["product"], data["price"])
        logger.debug(f"Order created with id: {order.id}")
        return schemas.Order.model_validate(order)

    def list_all(self) -> List[schemas.Order]:
        """Return every order, most recently created first."""
        logger.info("Retrieving all orders")
        orders = self.repository.list_all()
        logger.debug(f"Number of orders: {len(orders)}")
        return [schemas.Order.model_validate(order) for order in orders]

    def get_by_id(self, order_id: Any) -> schemas.Order:
        """
        Fetch a single order.

        Raises:
            OrderValidationError: if ``order_id`` is not a valid identifier
            OrderNotFoundError: if no order has this ID
        """
        parsed = _parse_id(order_id)
        logger.info(f"Retrieving order with id: {parsed}")
        order = self.repository.find_by_id(parsed)
        if order is None:
            logger.warning(f"Order with id {parsed} not found")
            raise OrderNotFoundError(parsed)
        return schemas.Order.model_validate(order)

    def update(self, order_id: Any, data: Dict[str, Any]) -> schemas.Order:
        """
        Apply a partial update to an order.

        Args:
            order_id: ID of the order to update
            data: Any of ``product`` and ``price``; absent keys are left unchanged

        Raises:
            OrderValidationError: if the ID or any supplied field is invalid
            OrderNotFoundError: if no order has this ID
        """
        parsed = _parse_id(order_id)
        is_valid, error = validators.validate_order_update(data)
        if not is_valid:
            raise OrderValidationError(error)

        logger.info(f"Updating order with id: {parsed}")
        order = self.repository.update_by_id(parsed, data)
        if order is None:
            logger.warning(f"Order with id {parsed} not found for update")
            raise OrderNotFoundError(parsed)
        logger.debug(f"Order with id {parsed} updated successfully")
        return schemas.Order.model_validate(order)

    def remove(self, order_id: Any) -> schemas.Order:
        """
        Delete an order and return it.

        Raises:
            OrderValidationError: if ``order_id`` is not a valid identifier
            OrderNotFoundError: if no order has this ID
        """
        parsed = _parse_id(order_id)
        logger.info(f"Removing order with id: {parsed}")
        order = self.repository.delete_by_id(parsed)
        if order is None:
            logger.warning(f"Order with id {parsed} not found for removal")
            raise OrderNotFoundError(parsed)
        logger.debug(f"Order with id {parsed} removed successfully")
        return schemas.Order.model_validate(order)
