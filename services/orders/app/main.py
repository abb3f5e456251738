"""
Orders Service API

This module implements a FastAPI-based microservice for managing orders with full CRUD operations.
It provides endpoints for creating, reading, updating, and deleting order data,
with relational database persistence through SQLAlchemy.

Endpoints:
    POST /orders: Create a new order
    GET /orders: List all orders, most recent first
    GET /orders/{order_id}: Get a single order by ID
    PATCH /orders/{order_id}: Partially update an order
    DELETE /orders/{order_id}: Delete an order and return it
    GET /healthz: Health check endpoint for orchestration systems

Attributes:
    app (FastAPI): The FastAPI application instance configured with the title "orders-service"
"""
import logging
import os
from typing import List
from fastapi import FastAPI, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import models, schemas
from .crud import OrderRepository
from .database import engine, get_db
from .exceptions import OrderNotFoundError, OrderValidationError
from .service import OrderService

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Create database tables
models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="orders-service")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected request body for {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(OrderValidationError)
async def order_validation_handler(request: Request, exc: OrderValidationError):
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(OrderNotFoundError)
async def order_not_found_handler(request: Request, exc: OrderNotFoundError):
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """
    Dependency function that builds an OrderService bound to the request's session.

    Args:
        db: Database session (injected)

    Returns:
        OrderService backed by an OrderRepository
    """
    return OrderService(OrderRepository(db))


@app.get("/healthz", response_model=dict)
def health():
    """
    Health check endpoint for the orders service.

    Returns:
        dict: A dictionary containing the health status of the service.
            - status (str): Always returns "healthy" when the service is operational.

    Example:
        GET /healthz
        Response: {"status": "healthy"}
    """
    return {"status": "healthy"}


@app.post("/orders", response_model=schemas.Order, status_code=status.HTTP_201_CREATED)
def create_order(order: schemas.OrderCreate, service: OrderService = Depends(get_order_service)):
    """
    Create a new order.

    Args:
        order: Order data to create
        service: Order service (injected)

    Returns:
        Created order object

    Raises:
        400 if product is empty or price is not a positive number
    """
    return service.create(order.model_dump())


@app.get("/orders", response_model=List[schemas.Order])
def list_orders(service: OrderService = Depends(get_order_service)):
    """
    List all orders, most recently created first.

    Args:
        service: Order service (injected)

    Returns:
        List of order objects
    """
    return service.list_all()


@app.get("/orders/{order_id}", response_model=schemas.Order)
def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """
    Get a single order by ID.

    Raises:
        400 if order_id is not numeric
        404 if order not found
    """
    return service.get_by_id(order_id)


@app.patch("/orders/{order_id}", response_model=schemas.Order)
def update_order(
    order_id: str,
    order: schemas.OrderUpdate,
    service: OrderService = Depends(get_order_service)
):
    """
    Update an existing order. Only provided fields are changed.

    Args:
        order_id: ID of the order to update
        order: Fields to update
        service: Order service (injected)

    Returns:
        Updated order object

    Raises:
        400 if order_id or a provided field is invalid
        404 if order not found
    """
    return service.update(order_id, order.model_dump(exclude_unset=True))


@app.delete("/orders/{order_id}", response_model=schemas.Order)
def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """
    Delete an order and return the deleted record.

    Raises:
        400 if order_id is not numeric
        404 if order not found
    """
    return service.remove(order_id)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3000")))
