"""
API route modules.
"""

from .feeds import router as feeds_router
from .misc import router as misc_router
from .scans import router as scans_router
from .users import router as users_router

__all__ = [
    "feeds_router",
    "misc_router",
    "scans_router",
    "users_router",
]
