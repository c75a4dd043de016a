import logging
import time
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from tiktok_relay.api.endpoints import router as api_router
from tiktok_relay.core.config import Settings
from tiktok_relay.core.errors import InternalFault, RelayError, RouteNotFound
from tiktok_relay.core.log import configure_logging
from tiktok_relay.models.schemas import ApiEnvelope
from tiktok_relay.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    body = ApiEnvelope(success=False, message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return _envelope(exc.status_code, exc.message, exc.error)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # no method/path pair outside the routes is served
    if exc.status_code in (404, 405):
        return _envelope(404, RouteNotFound.message)
    return _envelope(exc.status_code, str(exc.detail))


async def catch_unhandled(request: Request, call_next) -> Response:
    """Turn any uncaught fault into the 500 envelope, inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _envelope(500, InternalFault.message)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the relay application.

    ``transport`` replaces the network for outbound upstream calls, which is
    how tests plug in a fake extraction API.
    """
    settings = settings or Settings()

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.upstream = UpstreamClient(settings, transport=transport)
    app.state.started_at = time.monotonic()

    # registered first so CORSMiddleware wraps it
    app.middleware("http")(catch_unhandled)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    return app


def run(app: FastAPI, settings: Settings) -> None:
    logger.info("TikTok Downloader API running on port %s", settings.PORT)
    logger.info("Health check: http://localhost:%s/health", settings.PORT)
    logger.info("Download endpoint: http://localhost:%s/api/download?url=<tiktok_url>", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


def main() -> None:
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    run(create_app(settings), settings)
