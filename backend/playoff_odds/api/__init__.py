"""
API module.
"""

from .routes import odds_router

__all__ = [
    "odds_router",
]
