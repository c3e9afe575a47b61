"""Figma API client configuration."""
import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_API_ROOT = "api.figma.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientOptions:
    """Configuration for the Figma API client.

    Args:
        access_token: OAuth access token, sent as a bearer token
        personal_access_token: Personal access token from account settings
        api_root: Custom API host (without scheme or version)
        timeout: Request timeout in seconds
    """
    access_token: Optional[str] = None
    personal_access_token: Optional[str] = None
    api_root: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"https://{self.api_root or DEFAULT_API_ROOT}/v1/"

    def auth_headers(self) -> dict:
        """Resolve the authentication header.

        The OAuth token wins when both tokens are configured.
        """
        if self.access_token:
            return {"Authorization": f"Bearer {self.access_token}"}
        if self.personal_access_token:
            return {"X-Figma-Token": self.personal_access_token}
        raise ValueError("Either access_token or personal_access_token is required")

    @classmethod
    def from_env(cls) -> "ClientOptions":
        """Create options from FIGMA_* environment variables."""
        access_token = os.getenv("FIGMA_ACCESS_TOKEN")
        personal_access_token = os.getenv("FIGMA_API_KEY")
        if not access_token and not personal_access_token:
            raise ValueError("FIGMA_ACCESS_TOKEN or FIGMA_API_KEY environment variable is required")
        timeout = os.getenv("FIGMA_TIMEOUT")
        return cls(
            access_token=access_token or None,
            personal_access_token=personal_access_token or None,
            api_root=os.getenv("FIGMA_API_ROOT") or None,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
