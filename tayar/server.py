"""
Tayar API Server

FastAPI application providing endpoints for:
- Article listing, search, detail and authoring
- Tags and sources
- Bookmarks, reading history, reactions and comments
- Manual feed ingestion
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .config import config, state
from .database import Database
from .feeds import FeedParser
from .feed_sources import load_feed_sources
from .ingestion import FeedIngestor
from .rate_limit import setup_rate_limiting
from .scheduler import IngestionScheduler
from .routes import (
    articles_router,
    catalog_router,
    engagement_router,
    misc_router,
    rss_router,
    users_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application resources."""
    # Startup - skip if already initialized (e.g., by tests)
    if state.db is None:
        state.db = Database(config.DB_PATH)

        default_user = state.db.ensure_user(
            username=config.DEFAULT_USERNAME,
            password=config.DEFAULT_USER_PASSWORD,
            email=config.DEFAULT_USER_EMAIL,
            avatar_url=config.DEFAULT_USER_AVATAR,
        )
        if default_user:
            logger.info(f"Running as user {default_user.username} (id {default_user.id})")
        else:
            logger.warning(
                f"Could not create default user {config.DEFAULT_USERNAME}: "
                f"email {config.DEFAULT_USER_EMAIL} is already taken"
            )

        sources = load_feed_sources(config.FEED_SOURCES_PATH)
        state.feed_parser = FeedParser(timeout=config.FETCH_TIMEOUT)
        state.ingestor = FeedIngestor(state.db, state.feed_parser, sources)
        logger.info(f"Feed ingestion configured with {len(sources)} sources")

        if config.ENABLE_SCHEDULER:
            state.scheduler = IngestionScheduler(
                state.ingestor,
                initial_delay=config.INITIAL_FETCH_DELAY,
                interval_minutes=config.REFRESH_INTERVAL_MINUTES,
            )
            await state.scheduler.start()

    yield

    # Shutdown
    if state.scheduler:
        try:
            await state.scheduler.stop()
        except Exception as e:
            logger.warning(f"Error stopping ingestion scheduler: {e}")
        state.scheduler = None


app = FastAPI(
    title="Tayar API",
    version=__version__,
    lifespan=lifespan
)

setup_rate_limiting(app)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed requests with field-level errors."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Invalid request data",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic error."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Include routers
app.include_router(misc_router)
app.include_router(articles_router)
app.include_router(catalog_router)
app.include_router(users_router)
app.include_router(engagement_router)
app.include_router(rss_router)


def main():
    """Run the API server with uvicorn."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
