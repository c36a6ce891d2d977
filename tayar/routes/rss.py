"""
Feed ingestion routes: manual fetch trigger.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..config import get_ingestor
from ..ingestion import FeedIngestor
from ..schemas import IngestionReportResponse

router = APIRouter(prefix="/api/rss", tags=["rss"])


@router.post("/fetch")
async def fetch_feeds(
    ingestor: Annotated[FeedIngestor, Depends(get_ingestor)],
) -> IngestionReportResponse:
    """
    Run feed ingestion now and report per-source outcomes.

    Waits for any run already in progress before starting. Individual
    feed failures are reported, not raised.
    """
    report = await ingestor.run()
    return IngestionReportResponse.from_report(report)
