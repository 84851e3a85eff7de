"""
Seed API Router

Demo data for a fresh database.
"""
from dataclasses import asdict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from universe_manager.database import get_db
from universe_manager.services.seed_service import SeedService

router = APIRouter(prefix="/api/seed", tags=["seed"])


@router.post("")
def seed_demo_data(db: Session = Depends(get_db)) -> dict:
    """
    Create demo shows, wrestlers, rosters and vacant titles.

    Does nothing (created=false) once any title exists.
    """
    return asdict(SeedService(db).seed_demo_universe())
