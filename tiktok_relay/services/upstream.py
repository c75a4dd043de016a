import asyncio
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from tiktok_relay.core.config import Settings
from tiktok_relay.core.errors import UpstreamRejected, UpstreamTimeout, UpstreamUnexpectedFailure
from tiktok_relay.models.schemas import NormalizedResult

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "TikTok Video"
# unreserved marks left unescaped in the query value
URI_COMPONENT_SAFE = "!~*'()"


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _section(result: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = result.get(key)
    return value if isinstance(value, dict) else {}


def normalize_result(result: Dict[str, Any]) -> NormalizedResult:
    """Map the upstream ``result`` object onto the response contract.

    This is the only place that knows the upstream field names.
    """
    music = _section(result, 'music')
    media = _section(result, 'media')
    return NormalizedResult(
        title=_text(result.get('title')) or DEFAULT_TITLE,
        author=_text(music.get('author')),
        duration=None,
        likes=None,
        video_url=_text(media.get('video_hd')) or _text(media.get('video')),
        video_url_sd=_text(media.get('video')),
        audio_url=_text(music.get('url')),
        thumbnail=None,
    )


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return _text(body.get('message'))
    return None


class UpstreamClient:
    """Calls the third-party extraction API. One short-lived connection per call."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint = settings.UPSTREAM_URL
        self.timeout = settings.UPSTREAM_TIMEOUT
        self.transport = transport
        self.headers = {
            'User-Agent': settings.USER_AGENT,
            'Accept': 'application/json',
        }

    def build_url(self, video_url: str) -> str:
        return f"{self.endpoint}?url={quote(video_url, safe=URI_COMPONENT_SAFE)}"

    async def fetch(self, video_url: str) -> NormalizedResult:
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            ) as client:
                # httpx timeouts are per phase; this bounds the whole exchange
                resp = await asyncio.wait_for(client.get(self.build_url(video_url)), self.timeout)
                resp.raise_for_status()
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error("Upstream timeout after %ss: %r", self.timeout, e)
            raise UpstreamTimeout() from e
        except httpx.HTTPStatusError as e:
            detail = _error_message(e.response) or str(e)
            logger.error("Upstream returned HTTP %s: %s", e.response.status_code, detail)
            raise UpstreamUnexpectedFailure(detail) from e
        except httpx.HTTPError as e:
            detail = str(e) or type(e).__name__
            logger.error("Upstream request failed: %s", detail)
            raise UpstreamUnexpectedFailure(detail) from e

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict) or not payload.get('status'):
            logger.warning("Upstream reported failure for %s", video_url)
            raise UpstreamRejected()

        result = payload.get('result')
        if not isinstance(result, dict):
            logger.warning("Upstream response has no result for %s", video_url)
            raise UpstreamRejected()

        return normalize_result(result)
