"""
Show Service

Business logic for Show operations.
"""
import logging
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from universe_manager.database import transaction
from universe_manager.exceptions import NotFoundError
from universe_manager.models import Show
from universe_manager.schemas.show import ShowCreate

logger = logging.getLogger(__name__)


class ShowService:
    """Service class for Show operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_show(self, data: ShowCreate) -> Show:
        """Create a new show"""
        show = Show(name=data.name.strip(), description=data.description)
        with transaction(self.db):
            self.db.add(show)
        logger.info(f"Show '{show.name}' created (id={show.id})")
        return show

    def list_shows(self) -> List[Show]:
        """Get all shows ordered by name"""
        query = select(Show).order_by(Show.name)
        return list(self.db.execute(query).scalars().all())

    def get_show(self, show_id: int) -> Optional[Show]:
        """Get a single show by ID"""
        return self.db.get(Show, show_id)

    def get_show_by_name(self, name: str) -> Optional[Show]:
        """Get a single show by name"""
        query = select(Show).where(Show.name == name)
        return self.db.execute(query).scalars().first()

    def delete_show(self, show_id: int) -> None:
        """Delete a show; refused while roster history references it"""
        show = self.get_show(show_id)
        if show is None:
            raise NotFoundError("Show", show_id)
        with transaction(self.db):
            self.db.delete(show)
        logger.info(f"Show {show_id} deleted")
