"""
Validation utilities for the Orders service.

Validation functions return ``(is_valid, error_message)`` tuples instead of
raising, so callers decide how to report a rejected input.
"""
import math
import re
from typing import Any, Dict, Optional, Tuple

ORDER_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value a 64-bit signed integer primary key can hold
MAX_ORDER_ID = 2 ** 63 - 1


def _validate_product(product: Any) -> Tuple[bool, str]:
    if not isinstance(product, str) or not product.strip():
        return False, "product must be a non-empty string"
    return True, ""


def _validate_price(price: Any) -> Tuple[bool, str]:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False, "price must be a number"
    if not math.isfinite(price):
        return False, "price must be a finite number"
    if price <= 0:
        return False, "price must be a positive number"
    return True, ""


def validate_order_create(data: Dict[str, Any]) -> Tuple[bool, str]:
    """
    Validate the fields of a new order.

    Args:
        data: Mapping with ``product`` and ``price``

    Returns:
        Tuple of (is_valid, error_message)
    """
    for field in ("product", "price"):
        if field not in data:
            return False, f"{field} is required"

    is_valid, error = _validate_product(data["product"])
    if not is_valid:
        return False, error

    return _validate_price(data["price"])


def validate_order_update(data: Dict[str, Any]) -> Tuple[bool, str]:
    """
    Validate a partial order update. Only the supplied fields are checked.

    Args:
        data: Mapping with any of ``product`` and ``price``

    Returns:
        Tuple of (is_valid, error_message)
    """
    unknown = set(data) - {"product", "price"}
    if unknown:
        return False, f"Unknown fields: {', '.join(sorted(unknown))}"

    if "product" in data:
        is_valid, error = _validate_product(data["product"])
        if not is_valid:
            return False, error

    if "price" in data:
        is_valid, error = _validate_price(data["price"])
        if not is_valid:
            return False, error

    return True, ""


def parse_order_id(raw_id: Any) -> Tuple[Optional[int], str]:
    """
    Convert an order identifier into the store's integer key.

    Args:
        raw_id: Identifier as received from the caller (string or int)

    Returns:
        Tuple of (order_id, error_message); order_id is None when invalid
    """
    if isinstance(raw_id, bool):
        return None, f"Invalid order ID: {raw_id}"

    text = str(raw_id)
    if not ORDER_ID_PATTERN.fullmatch(text):
        return None, f"Invalid order ID: {text}"

    order_id = int(text)
    if order_id < 1 or order_id > MAX_ORDER_ID:
        return None, f"Invalid order ID: {text}"

    return order_id, ""
