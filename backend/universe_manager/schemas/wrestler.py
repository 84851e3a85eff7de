"""
Wrestler Schemas

Pydantic models for Wrestler endpoints.
"""
from pydantic import BaseModel, Field
from datetime import datetime

from universe_manager.schemas.common import Gender


class WrestlerBase(BaseModel):
    """Base wrestler schema"""
    name: str = Field(..., min_length=1, max_length=200)
    gender: Gender


class WrestlerCreate(WrestlerBase):
    """Wrestler registration payload"""
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)

    model_config = {"str_strip_whitespace": True}


class WrestlerResponse(WrestlerBase):
    """Wrestler response schema"""
    id: int
    wins: int
    losses: int
    is_user_created: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
