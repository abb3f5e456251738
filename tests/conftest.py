"""
Shared fixtures. Both services run against private in-memory SQLite databases.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from services.orders.app import database as orders_database
from services.orders.app import main as orders_main
from services.orders.app.crud import OrderRepository
from services.orders.app.service import OrderService
from services.logs.app import database as logs_database
from services.logs.app import main as logs_main


@pytest.fixture
def orders_db():
    orders_database.Base.metadata.drop_all(bind=orders_database.engine)
    orders_database.Base.metadata.create_all(bind=orders_database.engine)
    db = orders_database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def order_service(orders_db):
    return OrderService(OrderRepository(orders_db))


@pytest.fixture
def orders_client():
    orders_database.Base.metadata.drop_all(bind=orders_database.engine)
    orders_database.Base.metadata.create_all(bind=orders_database.engine)
    with TestClient(orders_main.app) as client:
        yield client


@pytest.fixture
def logs_client():
    logs_database.Base.metadata.drop_all(bind=logs_database.engine)
    logs_database.Base.metadata.create_all(bind=logs_database.engine)
    with TestClient(logs_main.app) as client:
        yield client
