"""
Universe Commands

The command surface a UI or the HTTP API calls. Each write runs as a single
storage transaction around the title ledger or the roster manager; reads
surface storage faults as StorageError.
"""
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from sqlalchemy.orm import Session

from universe_manager.database import storage_errors, transaction
from universe_manager.exceptions import ValidationError
from universe_manager.models import (
    ChangeMethod,
    Gender,
    Show,
    ShowRoster,
    Title,
    TitleHolder,
    Wrestler,
    utcnow,
)
from universe_manager.services.roster_manager import RosterAssignmentManager
from universe_manager.services.title_ledger import TitleHolderInfo, TitleHolderLedger

VACANCY_METHODS = (ChangeMethod.STRIPPED, ChangeMethod.VACATED)


def _require_id(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return value


def _coerce_enum(enum_cls, name: str, value):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {name} {value!r}; expected one of: {allowed}")


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class UniverseCommands:
    """Service class for championship and roster commands"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.ledger = TitleHolderLedger(db, clock=clock)
        self.rosters = RosterAssignmentManager(db, clock=clock)

    # ----- titles -----

    def assign_title(
        self,
        title_id: int,
        wrestler_id: int,
        event_name: Optional[str] = None,
        event_location: Optional[str] = None,
        change_method: ChangeMethod = ChangeMethod.WON,
    ) -> TitleHolder:
        """Crown wrestler_id as holder of title_id in one transaction"""
        _require_id("title_id", title_id)
        _require_id("wrestler_id", wrestler_id)
        change_method = _coerce_enum(ChangeMethod, "change_method", change_method)

        with transaction(self.db):
            return self.ledger.assign_title(
                title_id,
                wrestler_id,
                event_name=_clean_text(event_name),
                event_location=_clean_text(event_location),
                change_method=change_method,
            )

    def vacate_title(
        self,
        title_id: int,
        event_name: Optional[str] = None,
        event_location: Optional[str] = None,
        change_method: ChangeMethod = ChangeMethod.VACATED,
    ) -> Optional[TitleHolder]:
        """Close the open reign; None if the title was already vacant"""
        _require_id("title_id", title_id)
        change_method = _coerce_enum(ChangeMethod, "change_method", change_method)
        if change_method not in VACANCY_METHODS:
            raise ValidationError(
                f"A vacancy is recorded as Stripped or Vacated, not {change_method.value}",
                "Title",
            )

        with transaction(self.db):
            return self.ledger.vacate_title(
                title_id,
                event_name=_clean_text(event_name),
                event_location=_clean_text(event_location),
                change_method=change_method,
            )

    def current_holders(self, title_id: int) -> List[TitleHolderInfo]:
        _require_id("title_id", title_id)
        with storage_errors():
            return self.ledger.current_holders(title_id)

    def title_history(self, title_id: int) -> List[TitleHolder]:
        _require_id("title_id", title_id)
        with storage_errors():
            return self.ledger.history(title_id)

    def current_titles_for_wrestler(self, wrestler_id: int) -> List[Tuple[Title, int]]:
        _require_id("wrestler_id", wrestler_id)
        with storage_errors():
            return self.ledger.current_titles_for_wrestler(wrestler_id)

    def assignable_titles(self, wrestler_id: int, gender: Gender) -> List[Title]:
        _require_id("wrestler_id", wrestler_id)
        gender = _coerce_enum(Gender, "gender", gender)
        with storage_errors():
            return self.ledger.assignable_titles(wrestler_id, gender)

    # ----- rosters -----

    def assign_to_show(self, show_id: int, wrestler_id: int) -> ShowRoster:
        """Put the wrestler on show_id's roster, transferring out of any other"""
        _require_id("show_id", show_id)
        _require_id("wrestler_id", wrestler_id)

        with transaction(self.db):
            return self.rosters.assign_to_show(show_id, wrestler_id)

    def remove_from_show(self, show_id: int, wrestler_id: int) -> bool:
        _require_id("show_id", show_id)
        _require_id("wrestler_id", wrestler_id)

        with transaction(self.db):
            return self.rosters.remove_from_show(show_id, wrestler_id)

    def roster_for_show(self, show_id: int) -> List[Wrestler]:
        _require_id("show_id", show_id)
        with storage_errors():
            return self.rosters.roster_for_show(show_id)

    def shows_for_wrestler(self, wrestler_id: int) -> List[Show]:
        _require_id("wrestler_id", wrestler_id)
        with storage_errors():
            return self.rosters.shows_for_wrestler(wrestler_id)
