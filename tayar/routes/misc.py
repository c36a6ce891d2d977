"""
Miscellaneous routes: health check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import state, get_db
from ..database import Database
from ..schemas import StatusResponse

router = APIRouter(prefix="/api", tags=["misc"])


@router.get("/status")
async def health_check(
    db: Annotated[Database, Depends(get_db)]
) -> StatusResponse:
    """API health check."""
    return StatusResponse(
        version=__version__,
        articles=db.count_articles(),
        ingestion_in_progress=bool(state.ingestor and state.ingestor.in_progress),
    )
