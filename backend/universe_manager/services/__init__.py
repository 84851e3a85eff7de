"""
Services Package

Business logic layer for the API.
"""
from universe_manager.services.title_ledger import TitleHolderLedger, TitleHolderInfo
from universe_manager.services.roster_manager import RosterAssignmentManager
from universe_manager.services.commands import UniverseCommands
from universe_manager.services.wrestler_service import WrestlerService
from universe_manager.services.show_service import ShowService
from universe_manager.services.title_service import TitleService
from universe_manager.services.seed_service import SeedService, SeedResult

__all__ = [
    "TitleHolderLedger",
    "TitleHolderInfo",
    "RosterAssignmentManager",
    "UniverseCommands",
    "WrestlerService",
    "ShowService",
    "TitleService",
    "SeedService",
    "SeedResult",
]
