"""
Service layer for business logic.

Services encapsulate business logic, keeping routes as thin HTTP adapters.
Each service receives its dependencies via constructor injection.

Usage in routes:
    from ..services import ArticleServiceDep

    @router.get("/articles")
    async def list_articles(service: ArticleServiceDep):
        return service.list_articles()
"""

from typing import Annotated

from fastapi import Depends

from ..config import get_db
from ..database import Database

from .article_service import ArticleService
from .engagement_service import EngagementService
from .enrichment_service import ArticleWithRelations, EnrichmentService

__all__ = [
    # Services
    "ArticleService",
    "EngagementService",
    "EnrichmentService",
    "ArticleWithRelations",
    # Dependency factories
    "get_article_service",
    "get_engagement_service",
    # Type aliases for dependency injection
    "ArticleServiceDep",
    "EngagementServiceDep",
]


def get_article_service(db: Annotated[Database, Depends(get_db)]) -> ArticleService:
    """Dependency to get ArticleService instance."""
    return ArticleService(db=db)


def get_engagement_service(db: Annotated[Database, Depends(get_db)]) -> EngagementService:
    """Dependency to get EngagementService instance."""
    return EngagementService(db=db)


# Re-export the service factories for convenience
ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]
EngagementServiceDep = Annotated[EngagementService, Depends(get_engagement_service)]
