"""
Wrestlers API Router

Endpoints for wrestler registration and per-wrestler title/show lookups.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from universe_manager.database import get_db
from universe_manager.services.commands import UniverseCommands
from universe_manager.services.wrestler_service import WrestlerService
from universe_manager.schemas.common import Gender, ListResponse
from universe_manager.schemas.show import ShowResponse
from universe_manager.schemas.title import HeldTitle, TitleResponse
from universe_manager.schemas.wrestler import WrestlerCreate, WrestlerResponse

router = APIRouter(prefix="/api/wrestlers", tags=["wrestlers"])


@router.post("", response_model=WrestlerResponse, status_code=status.HTTP_201_CREATED)
def create_wrestler(
    payload: WrestlerCreate,
    db: Session = Depends(get_db),
) -> WrestlerResponse:
    """Register a new wrestler."""
    wrestler = WrestlerService(db).create_wrestler(payload)
    return WrestlerResponse.model_validate(wrestler)


@router.get("", response_model=ListResponse[WrestlerResponse])
def list_wrestlers(
    gender: Optional[Gender] = Query(None, description="Filter by gender"),
    db: Session = Depends(get_db),
) -> ListResponse[WrestlerResponse]:
    """
    Get all wrestlers ordered by name.

    - **gender**: Optional filter (Male, Female, Other)
    """
    wrestlers = WrestlerService(db).list_wrestlers(gender=gender)
    return ListResponse[WrestlerResponse](
        items=[WrestlerResponse.model_validate(w) for w in wrestlers],
        total=len(wrestlers),
    )


@router.get("/{wrestler_id}", response_model=WrestlerResponse)
def get_wrestler(
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> WrestlerResponse:
    """Get a single wrestler by ID."""
    wrestler = WrestlerService(db).get_wrestler(wrestler_id)

    if not wrestler:
        raise HTTPException(status_code=404, detail="Wrestler not found")

    return WrestlerResponse.model_validate(wrestler)


@router.delete("/{wrestler_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_wrestler(
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> Response:
    """
    Delete a wrestler.

    Returns 409 while any title reign or roster row references the wrestler.
    """
    WrestlerService(db).delete_wrestler(wrestler_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{wrestler_id}/titles", response_model=List[HeldTitle])
def get_current_titles(
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> List[HeldTitle]:
    """Get the titles the wrestler currently holds, with days held."""
    held = UniverseCommands(db).current_titles_for_wrestler(wrestler_id)
    return [
        HeldTitle(title=TitleResponse.model_validate(title), days_held=days)
        for title, days in held
    ]


@router.get("/{wrestler_id}/assignable-titles", response_model=List[TitleResponse])
def get_assignable_titles(
    wrestler_id: int,
    gender: Optional[Gender] = Query(None, description="Defaults to the wrestler's gender"),
    db: Session = Depends(get_db),
) -> List[TitleResponse]:
    """
    Get active titles the wrestler could be awarded.

    Excludes titles the wrestler already holds and titles whose gender
    restriction does not admit the wrestler.
    """
    if gender is None:
        wrestler = WrestlerService(db).get_wrestler(wrestler_id)
        if not wrestler:
            raise HTTPException(status_code=404, detail="Wrestler not found")
        gender = wrestler.gender

    titles = UniverseCommands(db).assignable_titles(wrestler_id, gender)
    return [TitleResponse.model_validate(t) for t in titles]


@router.get("/{wrestler_id}/shows", response_model=List[ShowResponse])
def get_wrestler_shows(
    wrestler_id: int,
    db: Session = Depends(get_db),
) -> List[ShowResponse]:
    """Get the wrestler's current show (zero or one entries)."""
    shows = UniverseCommands(db).shows_for_wrestler(wrestler_id)
    return [ShowResponse.model_validate(s) for s in shows]
