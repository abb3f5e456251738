"""
CRUD operations for the Logs service.

This module contains all database operations for access log collection.
"""
from datetime import datetime
from typing import List, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from . import models, schemas

def create_access_log(db: Session, entry: schemas.AccessLogCreate) -> models.AccessLog:
    """
    Record a new access log entry, stamped with the current time.

    Args:
        db: Database session
        entry: IP and User-Agent to record

    Returns:
        Created AccessLog object
    """
    db_log = models.AccessLog(ip=entry.ip, user_agent=entry.user_agent, timestamp=datetime.utcnow())
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    return db_log

def get_user_agent_stats(db: Session) -> List[Tuple[str, int]]:
    """
    Count recorded entries per User-Agent.

    Args:
        db: Database session

    Returns:
        List of (user_agent, count) tuples, highest count first
    """
    count = func.count(models.AccessLog.user_agent).label("count")
    rows = (
        db.query(models.AccessLog.user_agent, count)
        .group_by(models.AccessLog.user_agent)
        .order_by(count.desc(), models.AccessLog.user_agent)
        .all()
    )
    return [(user_agent, total) for user_agent, total in rows]
