"""
Domain errors raised by the Orders service layer.
"""


class OrderValidationError(ValueError):
    """Input failed validation before reaching the database."""


class OrderNotFoundError(LookupError):
    """No order exists for the requested identifier."""

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order with ID {order_id} not found")
