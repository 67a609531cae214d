"""
API v1 package.

Contains the versioned routes served under /api/1.0 for the User Registration API.
"""

from src.api.v1.routes import router

__all__ = ["router"]
