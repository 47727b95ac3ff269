"""
HTTP Client Module

Async HTTP client shared by the resource accessors. Wraps httpx and
turns every transport failure, non-2xx status or undecodable body
into a single RequestError.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..config import config


logger = logging.getLogger(__name__)


class RequestError(Exception):
    """Raised when a request fails for any reason."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code


@dataclass
class Response:
    """Decoded response from the API."""
    status_code: int
    data: Any
    url: str


class HttpClient:
    """
    Async HTTP client for the Blog API.

    Holds only settings. Each request opens its own httpx.AsyncClient,
    so one instance can be shared by concurrent callers.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: API root (uses config default if None).
            timeout: Request timeout in seconds (uses config default if None).
            headers: Extra headers merged over the configured defaults.
            transport: Optional httpx transport, e.g. httpx.MockTransport.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.headers = {**config.api.default_headers, **(headers or {})}
        self.transport = transport
        logger.debug(f"HttpClient initialized (base_url: {self.base_url})")

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Response:
        """Send a GET request with optional query parameters."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any) -> Response:
        """Send a POST request with a JSON body."""
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Any) -> Response:
        """Send a PATCH request with a JSON body."""
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Response:
        """
        Send a request and decode the JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, e.g. "/posts/1".
            params: Query parameters.
            json: JSON body for POST/PATCH.

        Returns:
            Response with the decoded body in `data`.

        Raises:
            RequestError: On transport errors, non-2xx status or invalid JSON.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params}")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
        ) as client:
            try:
                response = await client.request(method, url, params=params, json=json)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise RequestError(
                    f"{method} {url} returned HTTP {e.response.status_code}",
                    method=method,
                    url=url,
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise RequestError(
                    f"{method} {url} failed: {e}",
                    method=method,
                    url=url,
                ) from e

        try:
            data = response.json() if response.content else None
        except ValueError as e:
            raise RequestError(
                f"{method} {url} returned invalid JSON",
                method=method,
                url=url,
                status_code=response.status_code,
            ) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return Response(
            status_code=response.status_code,
            data=data,
            url=str(response.url),
        )


_shared_client: Optional[HttpClient] = None


def get_client() -> HttpClient:
    """Return the process-wide shared client, creating it on first use."""
    global _shared_client
    if _shared_client is None:
        _shared_client = HttpClient()
    return _shared_client


def set_client(client: Optional[HttpClient]) -> None:
    """Replace the shared client. Passing None resets it to the default."""
    global _shared_client
    _shared_client = client
