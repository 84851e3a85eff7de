"""
Titles API Router

Endpoints for titles, reigns and title changes.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from universe_manager.database import get_db
from universe_manager.services.commands import UniverseCommands
from universe_manager.services.title_service import TitleService
from universe_manager.schemas.title import (
    AssignTitleRequest,
    TitleCreate,
    TitleHolderInfoResponse,
    TitleHolderResponse,
    TitleResponse,
    TitleWithHolders,
    VacateTitleRequest,
    VacateTitleResponse,
)

router = APIRouter(prefix="/api/titles", tags=["titles"])


@router.post("", response_model=TitleResponse, status_code=status.HTTP_201_CREATED)
def create_title(
    payload: TitleCreate,
    db: Session = Depends(get_db),
) -> TitleResponse:
    """
    Create a vacant title.

    Prestige tier is derived from **division** (World = 1, Secondary = 2,
    Tag Team = 3, anything else = 4).
    """
    title = TitleService(db).create_title(payload)
    return TitleResponse.model_validate(title)


@router.get("", response_model=List[TitleWithHolders])
def list_titles(db: Session = Depends(get_db)) -> List[TitleWithHolders]:
    """Get all active titles with current holders, by prestige tier then name."""
    return TitleService(db).list_titles()


@router.get("/unassigned", response_model=List[TitleWithHolders])
def list_unassigned_titles(db: Session = Depends(get_db)) -> List[TitleWithHolders]:
    """Get active cross-brand titles (not owned by any show)."""
    return TitleService(db).unassigned_titles()


@router.get("/{title_id}", response_model=TitleWithHolders)
def get_title(
    title_id: int,
    db: Session = Depends(get_db),
) -> TitleWithHolders:
    """Get a single title with its current holders."""
    return TitleService(db).title_with_holders(title_id)


@router.get("/{title_id}/holders", response_model=List[TitleHolderInfoResponse])
def get_current_holders(
    title_id: int,
    db: Session = Depends(get_db),
) -> List[TitleHolderInfoResponse]:
    """Get the open reign (empty list when vacant) with days held."""
    holders = UniverseCommands(db).current_holders(title_id)
    return [TitleHolderInfoResponse.model_validate(h) for h in holders]


@router.get("/{title_id}/history", response_model=List[TitleHolderResponse])
def get_title_history(
    title_id: int,
    db: Session = Depends(get_db),
) -> List[TitleHolderResponse]:
    """Get every reign of the title, oldest first."""
    reigns = UniverseCommands(db).title_history(title_id)
    return [TitleHolderResponse.model_validate(r) for r in reigns]


@router.post("/{title_id}/assign", response_model=TitleHolderResponse)
def assign_title(
    title_id: int,
    payload: AssignTitleRequest,
    db: Session = Depends(get_db),
) -> TitleHolderResponse:
    """
    Crown a new champion.

    Closes the current reign (if any) and opens a new one. The wrestler's
    gender must match the title's restriction unless the title is Mixed.
    """
    reign = UniverseCommands(db).assign_title(
        title_id,
        payload.wrestler_id,
        event_name=payload.event_name,
        event_location=payload.event_location,
        change_method=payload.change_method,
    )
    return TitleHolderResponse.model_validate(reign)


@router.post("/{title_id}/vacate", response_model=VacateTitleResponse)
def vacate_title(
    title_id: int,
    payload: Optional[VacateTitleRequest] = None,
    db: Session = Depends(get_db),
) -> VacateTitleResponse:
    """
    Vacate a title.

    Vacating an already-vacant title is a no-op and returns a null reign.
    """
    payload = payload or VacateTitleRequest()
    closed = UniverseCommands(db).vacate_title(
        title_id,
        event_name=payload.event_name,
        event_location=payload.event_location,
        change_method=payload.change_method,
    )
    return VacateTitleResponse(
        title_id=title_id,
        closed_reign=TitleHolderResponse.model_validate(closed) if closed else None,
    )
