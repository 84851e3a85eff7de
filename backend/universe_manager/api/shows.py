"""
Shows API Router

Endpoints for shows and their exclusive rosters.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from universe_manager.database import get_db
from universe_manager.services.commands import UniverseCommands
from universe_manager.services.show_service import ShowService
from universe_manager.services.title_service import TitleService
from universe_manager.schemas.common import ListResponse
from universe_manager.schemas.show import (
    RosterRemovalResponse,
    ShowCreate,
    ShowResponse,
    ShowRosterResponse,
)
from universe_manager.schemas.title import TitleWithHolders
from universe_manager.schemas.wrestler import WrestlerResponse

router = APIRouter(prefix="/api/shows", tags=["shows"])


@router.post("", response_model=ShowResponse, status_code=status.HTTP_201_CREATED)
def create_show(
    payload: ShowCreate,
    db: Session = Depends(get_db),
) -> ShowResponse:
    """Create a new show."""
    show = ShowService(db).create_show(payload)
    return ShowResponse.model_validate(show)


@router.get("", response_model=ListResponse[ShowResponse])
def list_shows(db: Session = Depends(get_db)) -> ListResponse[ShowResponse]:
    """Get all shows ordered by name."""
    shows = ShowService(db).list_shows()
    return ListResponse[ShowResponse](
        items=[ShowResponse.model_validate(s) for s in shows],
        total=len(shows),
    )


@router.get("/{show_id}", response_model=ShowResponse)
def get_show(
    show_id: int,
    db: Session = Depends(get_db),
) -> ShowResponse:
    """Get a single show by ID."""
    show = ShowService(db).get_show(show_id)

    if not show:
        raise HTTPException(status_code=404, detail="Show not found")

    return ShowResponse.model_validate(show)


@router.delete("/{show_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_show(
    show_id: int,
    db: Session = Depends(get_db),
) -> Response:
    """Delete a show. Returns 409 while roster rows reference it."""
    ShowService(db).delete_show(show_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{show_id}/roster", response_model=List[WrestlerResponse])
def get_roster(
    show_id: int,
    db: Session = Depends(get_db),
) -> List[WrestlerResponse]:
    """Get the wrestlers currently active on the show, by name."""
    wrestlers = UniverseCommands(db).roster_for_show(show_id)
    return [WrestlerResponse.model_validate(w) for w in wrestlers]


@router.put("/{show_id}/roster/{wrestler_id}", response_model=ShowRosterResponse)
def assign_to_show(
    show_id: int,
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> ShowRosterResponse:
    """
    Assign a wrestler to this show.

    A wrestler belongs to one show at a time: assigning moves them off any
    other roster. Repeating the call is a no-op.
    """
    entry = UniverseCommands(db).assign_to_show(show_id, wrestler_id)
    return ShowRosterResponse.model_validate(entry)


@router.delete("/{show_id}/roster/{wrestler_id}", response_model=RosterRemovalResponse)
def remove_from_show(
    show_id: int,
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> RosterRemovalResponse:
    """Remove a wrestler from this show; changed=false if they were not on it."""
    changed = UniverseCommands(db).remove_from_show(show_id, wrestler_id)
    return RosterRemovalResponse(show_id=show_id, wrestler_id=wrestler_id, changed=changed)


@router.get("/{show_id}/titles", response_model=List[TitleWithHolders])
def get_show_titles(
    show_id: int,
    db: Session = Depends(get_db),
) -> List[TitleWithHolders]:
    """Get active titles owned by this show with their current holders."""
    return TitleService(db).titles_for_show(show_id)
