"""
HTTP client for the talks registry.

Each call opens its own ``aiohttp`` session, issues exactly one request and
reads the whole body before the response is released, so callers never
hold on to a live connection.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import asyncio
import logging

import aiohttp

from talks_cli import USER_AGENT
from talks_cli.config.settings import DEFAULT_BASE_URL, TalksCliSettings
from .errors import ServerError, TimeoutError, classify_error
from .models import JSON_CONTENT_TYPE, Talk, decode_talks, encode_talk

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """A fully read HTTP response."""
    status: int
    reason: str = ""
    content_type: str = ""
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class TalksClient:
    """Client for the two registry endpoints."""

    VISIBLE_TALKS_PATH = "/api/talks/visible"
    SUBMIT_PATH = "/api/postTalk"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        user_agent: str = USER_AGENT,
    ):
        """Initialize the client.

        Args:
            base_url: Registry root, without trailing slash
            timeout: Total timeout per request in seconds, None for no limit
            user_agent: Value of the User-Agent header
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: TalksCliSettings) -> "TalksClient":
        return cls(base_url=settings.base_url, timeout=settings.timeout)

    @property
    def visible_talks_url(self) -> str:
        return f"{self.base_url}{self.VISIBLE_TALKS_PATH}"

    @property
    def submit_url(self) -> str:
        return f"{self.base_url}{self.SUBMIT_PATH}"

    async def get(self, url: str) -> HttpResponse:
        """Perform a plain GET and return the fully read response."""
        return await self._request("GET", url)

    async def post(self, url: str, body: bytes, content_type: str) -> HttpResponse:
        """POST a buffered body with the given content type."""
        return await self._request("POST", url, data=body, headers={"Content-Type": content_type})

    async def fetch_visible_talks(self) -> List[Talk]:
        """
        Fetch every talk whose hidden flag is off.

        Raises:
            NetworkError: If the registry cannot be reached
            TimeoutError: If the request exceeds the timeout
            ServerError: If the registry answers with a non-2xx status
            DecodeError: If the body is not a list of talks
        """
        response = await self.get(self.visible_talks_url)
        if not response.ok:
            raise ServerError(
                "Listing talks failed",
                status=response.status,
                body=response.text,
            )
        return decode_talks(response.body)

    async def post_talk(self, talk: Talk) -> HttpResponse:
        """Submit a talk and return the registry's response unchecked."""
        return await self.post(self.submit_url, encode_talk(talk), JSON_CONTENT_TYPE)

    async def _request(
        self,
        method: str,
        url: str,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        logger.debug(f"{method} {url}")

        try:
            session_headers = {"User-Agent": self.user_agent}
            async with aiohttp.ClientSession(headers=session_headers, timeout=timeout) as session:
                async with session.request(method, url, data=data, headers=headers) as response:
                    body = await response.read()
                    result = HttpResponse(
                        status=response.status,
                        reason=response.reason or "",
                        content_type=response.headers.get("Content-Type", ""),
                        body=body,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            error = classify_error(e)
            if self.timeout and isinstance(error, TimeoutError):
                error.details["timeout_seconds"] = self.timeout
            logger.debug(f"{method} {url} failed: {error}")
            raise error from e

        logger.debug(f"{method} {url} -> {result.status}")
        return result
