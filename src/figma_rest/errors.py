"""Figma API errors."""
from typing import Any, Optional

import httpx


class FigmaAPIError(Exception):
    """Raised when the Figma API answers with an HTTP error status.

    Attributes:
        status_code: HTTP status of the response
        message: Error message reported by the service (or the raw body)
        body: Decoded JSON error payload, if the service sent one
        response: The originating httpx response
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Optional[Any] = None,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body
        self.response = response

    @classmethod
    def from_response(cls, response: httpx.Response) -> "FigmaAPIError":
        try:
            body = response.json()
        except ValueError:
            body = None

        message = response.text
        if isinstance(body, dict):
            for key in ("err", "message"):
                if isinstance(body.get(key), str):
                    message = body[key]
                    break

        return cls(response.status_code, message, body=body, response=response)
