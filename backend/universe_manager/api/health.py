"""
Health & Monitoring API Router

Endpoints for database health checks and ledger statistics.
"""
import logging
import time
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy import text, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pydantic import BaseModel

from universe_manager.config import settings
from universe_manager.database import get_db
from universe_manager.models import Show, ShowRoster, Title, TitleHolder, Wrestler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])


class DatabaseStats(BaseModel):
    """Database statistics response"""
    status: str
    connected: bool
    response_time_ms: float
    dialect: str
    tables: dict


class FullHealthResponse(BaseModel):
    """Complete health check response"""
    status: str
    timestamp: datetime
    database: DatabaseStats
    api_version: str


@router.get("/db", response_model=FullHealthResponse)
def check_database_health(db: Session = Depends(get_db)) -> FullHealthResponse:
    """
    Database health check with detailed statistics.

    Returns:
    - Connection status
    - Response time
    - Row counts, plus open reigns and active roster rows
    """
    start_time = time.time()
    connected = False
    tables_stats = {}

    try:
        db.execute(text("SELECT 1"))
        connected = True

        tables_stats = {
            "wrestlers": db.execute(select(func.count(Wrestler.id))).scalar() or 0,
            "shows": db.execute(select(func.count(Show.id))).scalar() or 0,
            "titles": db.execute(select(func.count(Title.id))).scalar() or 0,
            "title_holders": db.execute(select(func.count(TitleHolder.id))).scalar() or 0,
            "open_reigns": db.execute(
                select(func.count(TitleHolder.id)).where(TitleHolder.held_until.is_(None))
            ).scalar() or 0,
            "show_rosters": db.execute(select(func.count(ShowRoster.id))).scalar() or 0,
            "active_roster_entries": db.execute(
                select(func.count(ShowRoster.id)).where(ShowRoster.is_active.is_(True))
            ).scalar() or 0,
        }
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        connected = False
        tables_stats = {"error": str(e)}

    response_time = (time.time() - start_time) * 1000  # Convert to ms

    return FullHealthResponse(
        status="healthy" if connected else "unhealthy",
        timestamp=datetime.now(),
        database=DatabaseStats(
            status="connected" if connected else "disconnected",
            connected=connected,
            response_time_ms=round(response_time, 2),
            dialect=db.get_bind().dialect.name,
            tables=tables_stats,
        ),
        api_version=settings.app_version,
    )
