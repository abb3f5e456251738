import math

import pytest

from services.orders.app import validators


def test_validate_order_create_accepts_valid_input():
    assert validators.validate_order_create({"product": "Laptop", "price": 1299.99}) == (True, "")
    assert validators.validate_order_create({"product": "Laptop", "price": 3}) == (True, "")


@pytest.mark.parametrize("data, message", [
    ({"price": 1}, "product is required"),
    ({"product": "Laptop"}, "price is required"),
    ({"product": "", "price": 1}, "product must be a non-empty string"),
    ({"product": 42, "price": 1}, "product must be a non-empty string"),
    ({"product": "Laptop", "price": True}, "price must be a number"),
    ({"product": "Laptop", "price": "1"}, "price must be a number"),
    ({"product": "Laptop", "price": math.nan}, "price must be a finite number"),
    ({"product": "Laptop", "price": math.inf}, "price must be a finite number"),
    ({"product": "Laptop", "price": 0}, "price must be a positive number"),
])
def test_validate_order_create_rejects(data, message):
    assert validators.validate_order_create(data) == (False, message)


def test_validate_order_update_checks_only_present_fields():
    assert validators.validate_order_update({}) == (True, "")
    assert validators.validate_order_update({"price": 2.5}) == (True, "")
    assert validators.validate_order_update({"product": "Desk"}) == (True, "")


def test_validate_order_update_rejects_null_and_unknown_fields():
    assert validators.validate_order_update({"price": None})[0] is False
    assert validators.validate_order_update({"product": None})[0] is False
    assert validators.validate_order_update({"id": 3}) == (False, "Unknown fields: id")


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (7, 7), ("007", 7)])
def test_parse_order_id(raw, expected):
    assert validators.parse_order_id(raw) == (expected, "")


@pytest.mark.parametrize("raw", ["abc", "-3", "0", "1e3", " 1", "1\n", "", True, str(2 ** 63)])
def test_parse_order_id_rejects(raw):
    order_id, error = validators.parse_order_id(raw)
    assert order_id is None
    assert error.startswith("Invalid order ID")
