"""Shared transport for the JSON provider APIs.

Every client issues one GET per call, checks the status and the expected
top-level array, and raises UpstreamError instead of returning partial data.
"""

import logging
import time
from typing import Any

import httpx

from city_explorer.errors import UpstreamError

logger = logging.getLogger(__name__)


class JsonApiClient:
    """Base for async provider clients."""

    name = "provider"
    # Dotted path to the array of raw records in the response body
    records_field = "results"

    def __init__(self, api_key: str = "", timeout: int = 30):
        self.api_key = api_key
        self.timeout = timeout

    async def get_records(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        label: str = "",
    ) -> list[dict[str, Any]]:
        start = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.warning("%s timeout | %dms | %s", self.name, elapsed_ms, label)
            raise UpstreamError(self.name, "timeout") from e
        except httpx.HTTPError as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.error("%s error | %dms | %s", self.name, elapsed_ms, str(e)[:200])
            raise UpstreamError(self.name, str(e)[:200] or type(e).__name__) from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if not resp.is_success:
            logger.warning("%s | status=%d | %dms | %s", self.name, resp.status_code, elapsed_ms, label)
            raise UpstreamError(self.name, "unexpected status", resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            logger.error("%s | malformed body | %dms", self.name, elapsed_ms)
            raise UpstreamError(self.name, "response is not JSON", resp.status_code) from e

        records = _dig(body, self.records_field)
        if not isinstance(records, list):
            logger.error("%s | missing '%s' | %dms", self.name, self.records_field, elapsed_ms)
            raise UpstreamError(self.name, f"response has no '{self.records_field}' list", resp.status_code)

        logger.info("%s OK | results=%d | %dms | %s", self.name, len(records), elapsed_ms, label)
        return records


def _dig(body: Any, path: str) -> Any:
    for part in path.split("."):
        if not isinstance(body, dict):
            return None
        body = body.get(part)
    return body
