"""
Singleton places webhook client with rate limiting using aiolimiter.
"""
import asyncio
import json
from aiohttp import ClientError, ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from typing import Any, Optional
from loguru import logger

from placescout.config import CONCURRENCY, PLACES_WEBHOOK_URL, REQUEST_TIMEOUT
from placescout.exceptions import WebhookError
from placescout.models import WebhookResponse


def parse_body(text: str) -> Any:
    """Decode a response body as JSON, falling back to the raw text."""
    try:
        return json.loads(text)
    except ValueError:
        return text


class PlacesClient:
    """
    Singleton client for the places search webhook.
    Uses AsyncLimiter so bursts of searches don't hammer the webhook.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not PlacesClient._initialized:
            self.base_url = PLACES_WEBHOOK_URL
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            self._session: Optional[ClientSession] = None
            PlacesClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=REQUEST_TIMEOUT))
        return self._session

    async def search(self, location: str, search_term: str, limit: int) -> WebhookResponse:
        """
        Ask the webhook for places matching a search term around a location.

        Args:
            location: Free-text area, e.g. "London, UK".
            search_term: Business category, e.g. "gyms".
            limit: Number of entries requested (the selected page size).

        Returns:
            WebhookResponse with the decoded body (JSON, or text if it isn't JSON),
            the HTTP status and the response headers.

        Raises:
            WebhookError: The request could not be completed.
        """
        params = {"field1": location, "field2": search_term, "limit": str(limit)}
        headers = {"Content-Type": "application/json"}

        async with self.rate_limiter:
            session = await self._get_session()
            try:
                logger.debug(f"▶️ Webhook search for '{search_term}' in '{location}' (limit={limit})")
                async with session.get(self.base_url, params=params, headers=headers) as resp:
                    text = await resp.text()
                    response = WebhookResponse(
                        data=parse_body(text),
                        status=resp.status,
                        status_text=resp.reason or "",
                        headers={k.lower(): v for k, v in resp.headers.items()},
                    )
                    logger.debug(f"✅ Webhook answered {resp.status} for '{search_term}' in '{location}'")
                    return response
            except asyncio.TimeoutError as e:
                logger.debug(f"⏱️ Webhook search timed out after {REQUEST_TIMEOUT}s")
                raise WebhookError(f"Request timed out after {REQUEST_TIMEOUT}s") from e
            except ClientError as e:
                logger.debug(f"⚠️ Webhook search failed: {e}")
                raise WebhookError(str(e) or "An error occurred") from e

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
