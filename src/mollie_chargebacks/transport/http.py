"""
REST HTTP client for the Mollie v2 API.

Split in two steps the way every resource accessor uses it:
``new_api_request`` builds an ``httpx.Request``, ``do`` sends it and hands
back the raw response once the status is known to be a success.
"""

import logging
from typing import Any, Optional

import httpx

from mollie_chargebacks.errors import RequestConstructionError, TransportError

DEFAULT_BASE_URL = "https://api.mollie.com"
API_VERSION = "v2"
USER_AGENT = "mollie-chargebacks/0.1.0"

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/{API_VERSION}",
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def set_api_key(self, api_key: str) -> None:
        self._api_key = api_key

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def new_api_request(
        self, method: str, path: str, body: Optional[dict[str, Any]] = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the versioned API root."""
        if not path:
            raise RequestConstructionError("empty request path")
        if "://" in path or path.startswith("//"):
            raise RequestConstructionError(f"absolute URL not allowed: {path!r}")
        headers = self._auth_headers()
        try:
            return self._client.build_request(
                method, path.lstrip("/"), json=body, headers=headers,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestConstructionError(f"invalid request {method} {path!r}: {e}") from e

    async def do(self, request: httpx.Request) -> httpx.Response:
        """Send ``request``; raise TransportError on network faults and HTTP >= 400."""
        logger.debug("%s %s", request.method, request.url)
        try:
            resp = await self._client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        if resp.status_code >= 400:
            details = self._error_details(resp)
            logger.warning("%s %s -> HTTP %d", request.method, request.url, resp.status_code)
            message = details.get("detail") or resp.text[:200]
            raise TransportError(
                f"HTTP {resp.status_code}: {message}",
                status_code=resp.status_code,
                details=details,
            )
        return resp

    @staticmethod
    def _error_details(resp: httpx.Response) -> dict[str, Any]:
        """Pick the documented fields out of a Mollie error document, if any."""
        try:
            body = resp.json()
        except ValueError:
            return {}
        if not isinstance(body, dict):
            return {}
        return {k: body[k] for k in ("status", "title", "detail", "field") if k in body}

    async def close(self) -> None:
        await self._client.aclose()
