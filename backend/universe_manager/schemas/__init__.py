"""
Pydantic Schemas

Export all schemas for easy importing.
"""
from universe_manager.schemas.common import (
    ListResponse,
    ChangeMethod,
    Gender,
    TitleGender,
    TitleType,
)
from universe_manager.schemas.wrestler import (
    WrestlerBase,
    WrestlerCreate,
    WrestlerResponse,
)
from universe_manager.schemas.show import (
    ShowBase,
    ShowCreate,
    ShowResponse,
    ShowRosterResponse,
    RosterRemovalResponse,
)
from universe_manager.schemas.title import (
    TitleBase,
    TitleCreate,
    TitleResponse,
    TitleHolderResponse,
    TitleHolderInfoResponse,
    TitleWithHolders,
    HeldTitle,
    AssignTitleRequest,
    VacateTitleRequest,
    VacateTitleResponse,
)

__all__ = [
    # Common
    "ListResponse",
    "ChangeMethod",
    "Gender",
    "TitleGender",
    "TitleType",
    # Wrestler
    "WrestlerBase",
    "WrestlerCreate",
    "WrestlerResponse",
    # Show
    "ShowBase",
    "ShowCreate",
    "ShowResponse",
    "ShowRosterResponse",
    "RosterRemovalResponse",
    # Title
    "TitleBase",
    "TitleCreate",
    "TitleResponse",
    "TitleHolderResponse",
    "TitleHolderInfoResponse",
    "TitleWithHolders",
    "HeldTitle",
    "AssignTitleRequest",
    "VacateTitleRequest",
    "VacateTitleResponse",
]
