"""
API route modules.
"""

from .articles import router as articles_router
from .catalog import router as catalog_router
from .engagement import router as engagement_router
from .misc import router as misc_router
from .rss import router as rss_router
from .users import router as users_router

__all__ = [
    "articles_router",
    "catalog_router",
    "engagement_router",
    "misc_router",
    "rss_router",
    "users_router",
]
