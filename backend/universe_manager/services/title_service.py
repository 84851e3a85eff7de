"""
Title Service

Title creation and the "titles with current holders" listings. Holder data
is always read from the ledger's open reigns, never from
Title.current_holder_id.
"""
import logging
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from universe_manager.database import transaction
from universe_manager.exceptions import NotFoundError
from universe_manager.models import Show, Title, TitleGender, TitleType, prestige_tier_for_division
from universe_manager.schemas.title import (
    TitleCreate,
    TitleHolderInfoResponse,
    TitleResponse,
    TitleWithHolders,
)
from universe_manager.services.title_ledger import TitleHolderLedger

logger = logging.getLogger(__name__)


class TitleService:
    """Service class for Title operations"""

    def __init__(self, db: Session, ledger: Optional[TitleHolderLedger] = None):
        self.db = db
        self.ledger = ledger or TitleHolderLedger(db)

    def create_title(self, data: TitleCreate, is_user_created: bool = True) -> Title:
        """Create a vacant title; prestige tier comes from the division"""
        if data.show_id is not None and self.db.get(Show, data.show_id) is None:
            raise NotFoundError("Show", data.show_id)

        title = Title(
            name=data.name.strip(),
            title_type=TitleType(data.title_type),
            division=data.division.strip(),
            prestige_tier=prestige_tier_for_division(data.division.strip()),
            gender=TitleGender(data.gender),
            show_id=data.show_id,
            current_holder_id=None,
            is_active=True,
            is_user_created=is_user_created,
        )
        with transaction(self.db):
            self.db.add(title)
        logger.info(
            f"Title '{title.name}' created (id={title.id}, tier={title.prestige_tier})"
        )
        return title

    def get_title(self, title_id: int) -> Optional[Title]:
        """Get a single title by ID"""
        return self.db.get(Title, title_id)

    def list_titles(self) -> List[TitleWithHolders]:
        """All active titles with holders, by prestige tier then name"""
        return self._with_holders(self._active_titles())

    def titles_for_show(self, show_id: int) -> List[TitleWithHolders]:
        """Active titles owned by a show"""
        if self.db.get(Show, show_id) is None:
            raise NotFoundError("Show", show_id)
        return self._with_holders(self._active_titles(Title.show_id == show_id))

    def unassigned_titles(self) -> List[TitleWithHolders]:
        """Active cross-brand titles (no owning show)"""
        return self._with_holders(self._active_titles(Title.show_id.is_(None)))

    def title_with_holders(self, title_id: int) -> TitleWithHolders:
        title = self.get_title(title_id)
        if title is None:
            raise NotFoundError("Title", title_id)
        return self._with_holders([title])[0]

    def _active_titles(self, *criteria) -> List[Title]:
        query = (
            select(Title)
            .where(Title.is_active.is_(True), *criteria)
            .order_by(Title.prestige_tier, Title.name)
        )
        return list(self.db.execute(query).scalars().all())

    def _with_holders(self, titles: List[Title]) -> List[TitleWithHolders]:
        items = []
        for title in titles:
            holders = [
                TitleHolderInfoResponse.model_validate(info)
                for info in self.ledger.current_holders(title.id)
            ]
            items.append(
                TitleWithHolders(
                    title=TitleResponse.model_validate(title),
                    current_holders=holders,
                    days_held=holders[0].days_held if holders else None,
                )
            )
        return items
