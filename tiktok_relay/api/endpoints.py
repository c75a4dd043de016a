import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Query, Request

from tiktok_relay.core.errors import InvalidUrlShape, MissingParameter
from tiktok_relay.models.schemas import ApiEnvelope, HealthStatus
from tiktok_relay.services.validator import is_valid_url

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/api/download", response_model=ApiEnvelope)
async def download(request: Request, url: Optional[str] = Query(None)):
    if not url:
        raise MissingParameter()

    if not is_valid_url(url):
        logger.info("Rejected URL: %s", url)
        raise InvalidUrlShape()

    logger.info("Processing URL: %s", url)
    result = await request.app.state.upstream.fetch(url)
    return ApiEnvelope(success=True, data=result)

@router.get("/health", response_model=HealthStatus)
async def health(request: Request):
    return HealthStatus(
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        uptime=time.monotonic() - request.app.state.started_at,
    )
