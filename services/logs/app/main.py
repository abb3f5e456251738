"""
    Logs Service API

    This module implements a FastAPI-based microservice that collects access logs
    and reports how many requests each User-Agent made.

    The service exposes:
    - POST /logs: Record an access log entry
    - GET /stats: Request counts grouped by User-Agent, highest first
    - Health endpoint: Provides service health status for monitoring and orchestration
"""
import logging
import os
from typing import List
from fastapi import FastAPI, Depends, status
from sqlalchemy.orm import Session

from . import crud, models, schemas
from .database import engine, get_db

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Create database tables
models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="logs-service")

@app.get("/healthz", response_model=dict)
def health():
    """
    Health check endpoint for the logs service.

    Returns:
        dict: A dictionary containing the health status of the service.
            - status (str): "healthy" if the service is operational.
    """
    return {"status": "healthy"}

@app.post("/logs", response_model=schemas.AccessLog, status_code=status.HTTP_201_CREATED)
def create_access_log(entry: schemas.AccessLogCreate, db: Session = Depends(get_db)):
    """
    Record an access log entry.

    Args:
        entry: IP and User-Agent of the request
        db: Database session (injected)

    Returns:
        Created access log entry
    """
    db_log = crud.create_access_log(db, entry)
    logger.debug(f"Access log {db_log.id} recorded for {db_log.ip}")
    return db_log

@app.get("/stats", response_model=List[schemas.UserAgentStat])
def get_stats(db: Session = Depends(get_db)):
    """
    Request counts grouped by User-Agent.

    Returns:
        List of {userAgent, count}, highest count first
    """
    return [
        schemas.UserAgentStat(user_agent=user_agent, count=count)
        for user_agent, count in crud.get_user_agent_stats(db)
    ]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3001")))
