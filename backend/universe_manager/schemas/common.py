"""
Common Schemas

Shared list wrapper and the enums that match database constraints.
"""
from pydantic import BaseModel, Field
from typing import Generic, TypeVar, List

from universe_manager.models.types import ChangeMethod, Gender, TitleGender, TitleType

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """Generic list response wrapper"""
    items: List[T]
    total: int = Field(..., description="Total number of items")


__all__ = [
    "ListResponse",
    "ChangeMethod",
    "Gender",
    "TitleGender",
    "TitleType",
]
