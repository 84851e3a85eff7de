"""
Wrestler Service

Registration and lookup of wrestlers.
"""
import logging
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from universe_manager.database import transaction
from universe_manager.exceptions import NotFoundError
from universe_manager.models import Gender, Wrestler
from universe_manager.schemas.wrestler import WrestlerCreate

logger = logging.getLogger(__name__)


class WrestlerService:
    """Service class for Wrestler operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_wrestler(self, data: WrestlerCreate, is_user_created: bool = True) -> Wrestler:
        """Register a new wrestler"""
        wrestler = Wrestler(
            name=data.name.strip(),
            gender=Gender(data.gender),
            wins=data.wins,
            losses=data.losses,
            is_user_created=is_user_created,
        )
        with transaction(self.db):
            self.db.add(wrestler)
        logger.info(f"Wrestler '{wrestler.name}' registered (id={wrestler.id})")
        return wrestler

    def list_wrestlers(self, gender: Optional[Gender] = None) -> List[Wrestler]:
        """Get all wrestlers, optionally filtered by gender"""
        query = select(Wrestler)
        if gender is not None:
            query = query.where(Wrestler.gender == Gender(gender))
        query = query.order_by(Wrestler.name)
        return list(self.db.execute(query).scalars().all())

    def get_wrestler(self, wrestler_id: int) -> Optional[Wrestler]:
        """Get a single wrestler by ID"""
        return self.db.get(Wrestler, wrestler_id)

    def delete_wrestler(self, wrestler_id: int) -> None:
        """
        Hard-delete a wrestler.

        Refused by the store (ConflictError) while any reign or roster row
        references the wrestler; championship history never cascades.
        """
        wrestler = self.get_wrestler(wrestler_id)
        if wrestler is None:
            raise NotFoundError("Wrestler", wrestler_id)
        with transaction(self.db):
            self.db.delete(wrestler)
        logger.info(f"Wrestler {wrestler_id} deleted")
