"""
Title Holder Ledger

Championship reigns as an append-only history with one open row per title.

Assigning a title closes whatever reign is open and opens a new one, so
normal succession and "vacate by replacement" share one code path. Nothing
here commits: the caller owns the transaction (see UniverseCommands), which
is what makes close-then-insert atomic.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from universe_manager.exceptions import NotFoundError, ValidationError
from universe_manager.models import (
    ChangeMethod,
    Gender,
    Title,
    TitleGender,
    TitleHolder,
    Wrestler,
    utcnow,
)

logger = logging.getLogger(__name__)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, floor-rounded, never negative"""
    return max((end - start).days, 0)


@dataclass
class TitleHolderInfo:
    """Open reign joined with the holder's display fields"""
    holder: TitleHolder
    wrestler_name: str
    wrestler_gender: Gender
    days_held: int


class TitleHolderLedger:
    """Owns the title_holders table and Title.current_holder_id"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    # ----- writes -----

    def assign_title(
        self,
        title_id: int,
        wrestler_id: int,
        event_name: Optional[str] = None,
        event_location: Optional[str] = None,
        change_method: ChangeMethod = ChangeMethod.WON,
    ) -> TitleHolder:
        """
        Crown a new holder.

        Closes the open reign (if any), opens a new one for wrestler_id and
        points Title.current_holder_id at it. Re-crowning the current holder
        is a new reign, not a no-op.

        Raises:
            NotFoundError: title or wrestler missing
            ValidationError: wrestler gender not admitted by the title
        """
        title = self._get_title(title_id)
        wrestler = self._get_wrestler(wrestler_id)

        if not TitleGender(title.gender).admits(wrestler.gender):
            raise ValidationError(
                f"{wrestler.name} ({Gender(wrestler.gender).value}) is not eligible for "
                f"{title.name} ({TitleGender(title.gender).value} division)",
                "Title",
            )

        now = self.clock()
        closed = self._close_open_reigns(title_id, now)
        # UPDATE must reach the store before the INSERT or the open-reign
        # unique index sees two open rows.
        self.db.flush()

        reign = self._open_reign(
            title_id,
            wrestler_id,
            now,
            event_name=event_name,
            event_location=event_location,
            change_method=ChangeMethod(change_method),
        )
        title.current_holder_id = wrestler_id
        self.db.flush()

        previous = ", ".join(str(r.wrestler_id) for r in closed) or "vacant"
        logger.info(
            f"Title {title_id} ({title.name}) -> wrestler {wrestler_id} "
            f"[{reign.change_method.value}], previous holder: {previous}"
        )
        return reign

    def vacate_title(
        self,
        title_id: int,
        event_name: Optional[str] = None,
        event_location: Optional[str] = None,
        change_method: ChangeMethod = ChangeMethod.VACATED,
    ) -> Optional[TitleHolder]:
        """
        Close the open reign and clear the current holder.

        Only held_until and change_method are written on the closed row; the
        vacancy's event_name/event_location are logged, not stored, so the
        reign keeps the event where it was won.

        Returns the closed reign, or None when the title was already vacant
        (in which case nothing is written).
        """
        title = self._get_title(title_id)
        open_reigns = self._open_reigns(title_id)
        if not open_reigns:
            logger.debug(f"Title {title_id} already vacant, nothing to vacate")
            return None

        now = self.clock()
        for reign in open_reigns:
            reign.held_until = now
            reign.change_method = ChangeMethod(change_method)
        title.current_holder_id = None
        self.db.flush()

        at = ", ".join(v for v in (event_name, event_location) if v)
        logger.info(
            f"Title {title_id} ({title.name}) vacated [{ChangeMethod(change_method).value}]"
            + (f" at {at}" if at else "")
        )
        return open_reigns[-1]

    # ----- reads -----

    def current_holders(self, title_id: int) -> List[TitleHolderInfo]:
        """Open reign(s) with wrestler name/gender and whole days held"""
        self._get_title(title_id)
        now = self.clock()
        rows = self.db.execute(
            select(TitleHolder, Wrestler)
            .join(Wrestler, TitleHolder.wrestler_id == Wrestler.id)
            .where(TitleHolder.title_id == title_id, TitleHolder.held_until.is_(None))
            .order_by(TitleHolder.held_since, TitleHolder.id)
        ).all()

        return [
            TitleHolderInfo(
                holder=holder,
                wrestler_name=wrestler.name,
                wrestler_gender=wrestler.gender,
                days_held=days_between(holder.held_since, now),
            )
            for holder, wrestler in rows
        ]

    def history(self, title_id: int) -> List[TitleHolder]:
        """Every reign of the title, oldest first"""
        self._get_title(title_id)
        query = (
            select(TitleHolder)
            .where(TitleHolder.title_id == title_id)
            .order_by(TitleHolder.held_since, TitleHolder.id)
        )
        return list(self.db.execute(query).scalars().all())

    def current_titles_for_wrestler(self, wrestler_id: int) -> List[Tuple[Title, int]]:
        """Titles whose open reign belongs to the wrestler, with days held"""
        self._get_wrestler(wrestler_id)

        now = self.clock()
        rows = self.db.execute(
            select(Title, TitleHolder)
            .join(TitleHolder, TitleHolder.title_id == Title.id)
            .where(
                TitleHolder.wrestler_id == wrestler_id,
                TitleHolder.held_until.is_(None),
            )
            .order_by(Title.prestige_tier, Title.name)
        ).all()
        return [(title, days_between(reign.held_since, now)) for title, reign in rows]

    def assignable_titles(self, wrestler_id: int, gender: Gender) -> List[Title]:
        """Active titles the wrestler does not hold and whose restriction admits gender"""
        self._get_wrestler(wrestler_id)
        gender = Gender(gender)
        held_ids = select(TitleHolder.title_id).where(
            TitleHolder.wrestler_id == wrestler_id,
            TitleHolder.held_until.is_(None),
        )
        admitted = [g for g in TitleGender if g.admits(gender)]
        query = (
            select(Title)
            .where(
                Title.is_active.is_(True),
                Title.gender.in_(admitted),
                Title.id.not_in(held_ids),
            )
            .order_by(Title.prestige_tier, Title.name)
        )
        return list(self.db.execute(query).scalars().all())

    # ----- helpers -----

    def _get_title(self, title_id: int) -> Title:
        title = self.db.get(Title, title_id)
        if title is None:
            raise NotFoundError("Title", title_id)
        return title

    def _get_wrestler(self, wrestler_id: int) -> Wrestler:
        wrestler = self.db.get(Wrestler, wrestler_id)
        if wrestler is None:
            raise NotFoundError("Wrestler", wrestler_id)
        return wrestler

    def _open_reigns(self, title_id: int) -> List[TitleHolder]:
        query = (
            select(TitleHolder)
            .where(TitleHolder.title_id == title_id, TitleHolder.held_until.is_(None))
            .order_by(TitleHolder.held_since, TitleHolder.id)
            .with_for_update()
        )
        return list(self.db.execute(query).scalars().all())

    def _close_open_reigns(self, title_id: int, now: datetime) -> List[TitleHolder]:
        reigns = self._open_reigns(title_id)
        for reign in reigns:
            reign.held_until = now
        return reigns

    def _open_reign(
        self,
        title_id: int,
        wrestler_id: int,
        now: datetime,
        event_name: Optional[str] = None,
        event_location: Optional[str] = None,
        change_method: ChangeMethod = ChangeMethod.WON,
    ) -> TitleHolder:
        reign = TitleHolder(
            title_id=title_id,
            wrestler_id=wrestler_id,
            held_since=now,
            held_until=None,
            event_name=event_name,
            event_location=event_location,
            change_method=change_method,
        )
        self.db.add(reign)
        return reign
