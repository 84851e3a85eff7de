"""
Roster Assignment Manager

Exclusive show assignment: a wrestler is active on at most one roster.
Assigning to a new show transfers the wrestler out of the previous one.
Like the title ledger, this never commits.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from universe_manager.exceptions import NotFoundError
from universe_manager.models import Show, ShowRoster, Wrestler, utcnow

logger = logging.getLogger(__name__)


class RosterAssignmentManager:
    """Owns the show_rosters table"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    def assign_to_show(self, show_id: int, wrestler_id: int) -> ShowRoster:
        """
        Make show_id the wrestler's only active roster.

        Idempotent when the wrestler is already active there; otherwise any
        active row on another show is deactivated first.
        """
        self._require_show(show_id)
        self._require_wrestler(wrestler_id)

        current = self._active_assignment(wrestler_id)
        if current is not None and current.show_id == show_id:
            logger.debug(f"Wrestler {wrestler_id} already on show {show_id}")
            return current

        if current is not None:
            current.is_active = False
            # Deactivation must be flushed before the new active row exists.
            self.db.flush()
            logger.info(
                f"Wrestler {wrestler_id} transferred from show {current.show_id} "
                f"to show {show_id}"
            )
        else:
            logger.info(f"Wrestler {wrestler_id} assigned to show {show_id}")

        entry = ShowRoster(
            show_id=show_id,
            wrestler_id=wrestler_id,
            assigned_at=self.clock(),
            is_active=True,
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def remove_from_show(self, show_id: int, wrestler_id: int) -> bool:
        """Deactivate the (show, wrestler) pairing; False if it was not active"""
        query = (
            select(ShowRoster)
            .where(
                ShowRoster.show_id == show_id,
                ShowRoster.wrestler_id == wrestler_id,
                ShowRoster.is_active.is_(True),
            )
            .with_for_update()
        )
        entries = self.db.execute(query).scalars().all()
        if not entries:
            logger.debug(f"Wrestler {wrestler_id} not active on show {show_id}, nothing to remove")
            return False

        for entry in entries:
            entry.is_active = False
        self.db.flush()
        logger.info(f"Wrestler {wrestler_id} removed from show {show_id}")
        return True

    def roster_for_show(self, show_id: int) -> List[Wrestler]:
        """Wrestlers currently active on the show, by name"""
        self._require_show(show_id)
        query = (
            select(Wrestler)
            .join(ShowRoster, ShowRoster.wrestler_id == Wrestler.id)
            .where(ShowRoster.show_id == show_id, ShowRoster.is_active.is_(True))
            .order_by(Wrestler.name)
        )
        return list(self.db.execute(query).scalars().all())

    def shows_for_wrestler(self, wrestler_id: int) -> List[Show]:
        """The wrestler's current show, as a list of zero or one"""
        self._require_wrestler(wrestler_id)
        query = (
            select(Show)
            .join(ShowRoster, ShowRoster.show_id == Show.id)
            .where(ShowRoster.wrestler_id == wrestler_id, ShowRoster.is_active.is_(True))
            .order_by(Show.name)
        )
        return list(self.db.execute(query).scalars().all())

    def _active_assignment(self, wrestler_id: int) -> Optional[ShowRoster]:
        query = (
            select(ShowRoster)
            .where(ShowRoster.wrestler_id == wrestler_id, ShowRoster.is_active.is_(True))
            .order_by(ShowRoster.assigned_at.desc(), ShowRoster.id.desc())
            .with_for_update()
        )
        return self.db.execute(query).scalars().first()

    def _require_show(self, show_id: int) -> Show:
        show = self.db.get(Show, show_id)
        if show is None:
            raise NotFoundError("Show", show_id)
        return show

    def _require_wrestler(self, wrestler_id: int) -> Wrestler:
        wrestler = self.db.get(Wrestler, wrestler_id)
        if wrestler is None:
            raise NotFoundError("Wrestler", wrestler_id)
        return wrestler
