"""
Title Schemas

Pydantic models for Title and reign endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from universe_manager.schemas.common import ChangeMethod, Gender, TitleGender, TitleType


class TitleBase(BaseModel):
    """Base title schema"""
    name: str = Field(..., min_length=1, max_length=200)
    title_type: TitleType = TitleType.SINGLES
    division: str = Field(..., min_length=1, max_length=100)
    gender: TitleGender
    show_id: Optional[int] = Field(None, description="Owning show; cross-brand when empty")


class TitleCreate(TitleBase):
    """Title creation payload; prestige tier is derived from division"""

    model_config = {"str_strip_whitespace": True}


class TitleResponse(TitleBase):
    """Title response schema"""
    id: int
    prestige_tier: int = Field(..., ge=1, le=4)
    current_holder_id: Optional[int] = None
    is_active: bool
    is_user_created: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TitleHolderResponse(BaseModel):
    """One reign record"""
    id: int
    title_id: int
    wrestler_id: int
    held_since: datetime
    held_until: Optional[datetime] = None
    event_name: Optional[str] = None
    event_location: Optional[str] = None
    change_method: Optional[ChangeMethod] = None

    model_config = {"from_attributes": True}


class TitleHolderInfoResponse(BaseModel):
    """Current holder with display details"""
    holder: TitleHolderResponse
    wrestler_name: str
    wrestler_gender: Gender
    days_held: int = Field(..., ge=0)

    model_config = {"from_attributes": True}


class TitleWithHolders(BaseModel):
    """Title with its current holders"""
    title: TitleResponse
    current_holders: List[TitleHolderInfoResponse]
    days_held: Optional[int] = None


class HeldTitle(BaseModel):
    """A title a wrestler currently holds"""
    title: TitleResponse
    days_held: int


class AssignTitleRequest(BaseModel):
    """Payload for assigning a title to a wrestler"""
    wrestler_id: int
    event_name: Optional[str] = Field(None, max_length=200)
    event_location: Optional[str] = Field(None, max_length=200)
    change_method: ChangeMethod = ChangeMethod.WON


class VacateTitleRequest(BaseModel):
    """Payload for vacating a title"""
    event_name: Optional[str] = Field(None, max_length=200)
    event_location: Optional[str] = Field(None, max_length=200)
    change_method: ChangeMethod = ChangeMethod.VACATED


class VacateTitleResponse(BaseModel):
    """Closed reign, or null when the title was already vacant"""
    title_id: int
    closed_reign: Optional[TitleHolderResponse] = None
