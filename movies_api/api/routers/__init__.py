"""
API route handlers.
"""

from movies_api.api.routers import movies

__all__ = ["movies"]
