"""Figma API Base Client.

Provides the async HTTP client shared by all Figma API endpoint methods.
"""
import logging
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from .config import ClientOptions
from .errors import FigmaAPIError


logger = logging.getLogger(__name__)


def build_params(**values: Any) -> dict:
    """Build query parameters, dropping unset values.

    Lists and tuples are joined with commas; everything else is passed
    through as-is. Insertion order is kept.
    """
    params = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        params[key] = value
    return params


def encode_query(params: Optional[dict]) -> str:
    """Encode query parameters the way the Figma API expects them.

    Node ids keep their literal `:` and `,` separators, and booleans are
    sent as "true"/"false".
    """
    if not params:
        return ""
    values = {
        key: str(value).lower() if isinstance(value, bool) else value
        for key, value in params.items()
    }
    return urlencode(values, safe=":,")


def pagination_params(
    page_size: Optional[int] = None,
    cursor: Optional[dict] = None,
) -> dict:
    """Query parameters for paginated library listings.

    Args:
        page_size: Number of items per page
        cursor: Mapping with "before" and/or "after" markers from a previous page
    """
    cursor = cursor or {}
    return build_params(
        page_size=page_size,
        before=cursor.get("before"),
        after=cursor.get("after"),
    )


class FigmaClient:
    """Async client for the Figma REST API.

    One underlying ``httpx.AsyncClient`` carries the resolved auth header
    and base URL and is shared by every endpoint call.
    """

    def __init__(
        self,
        options: ClientOptions,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.options = options
        self.headers = options.auth_headers()
        self.http = httpx.AsyncClient(
            base_url=options.base_url,
            headers=self.headers,
            timeout=options.timeout,
            transport=transport,
        )

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "FigmaClient":
        return cls(ClientOptions.from_env(), transport=transport)

    @property
    def base_url(self) -> str:
        return str(self.http.base_url)

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json_data: Optional[dict] = None,
    ) -> Any:
        """Make a request to Figma API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: Path relative to the API root (e.g., files/{file_key})
            params: Query parameters
            json_data: JSON body for POST requests

        Returns:
            Decoded response JSON, or an empty dict for an empty body

        Raises:
            FigmaAPIError: The service answered with a 4xx/5xx status
            httpx.TransportError: The request never completed
        """
        url = endpoint.lstrip("/")
        query = encode_query(params)
        if query:
            url = f"{url}?{query}"

        logger.debug("%s %s", method, url)
        response = await self.http.request(
            method=method,
            url=url,
            json=json_data,
        )

        if response.status_code >= 400:
            error = FigmaAPIError.from_response(response)
            logger.warning("%s %s failed: %s", method, endpoint, error)
            raise error

        if not response.content:
            return {}
        return response.json()

    async def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """GET request to Figma API."""
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json_data: dict) -> Any:
        """POST request to Figma API."""
        return await self.request("POST", endpoint, json_data=json_data)

    async def delete(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """DELETE request to Figma API."""
        return await self.request("DELETE", endpoint, params=params)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
