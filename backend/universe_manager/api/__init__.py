"""
API Package

FastAPI routers for all endpoints.
"""
from universe_manager.api.wrestlers import router as wrestlers_router
from universe_manager.api.shows import router as shows_router
from universe_manager.api.titles import router as titles_router
from universe_manager.api.health import router as health_router
from universe_manager.api.seed import router as seed_router

__all__ = [
    "wrestlers_router",
    "shows_router",
    "titles_router",
    "health_router",
    "seed_router",
]
