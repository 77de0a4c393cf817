"""
API route modules.
"""

from .odds_routes import router as odds_router

__all__ = ["odds_router"]
