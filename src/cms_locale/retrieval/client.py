"""Delivery API client used as the projector's entries source."""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, field_validator

from cms_locale.retrieval.errors import FetchError
from cms_locale.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "cdn.contentful.com"
DEFAULT_ENVIRONMENT = "master"


class ClientConfig(BaseModel):
    """Connection parameters for the delivery API."""

    space: str
    access_token: str
    host: Optional[str] = None
    environment: str = DEFAULT_ENVIRONMENT
    timeout_seconds: float = 20
    user_agent: str = "cms-locale/0.1"

    @field_validator("space", "access_token")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value


class DeliveryClient:
    """
    Minimal client for the entries endpoint.

    Constructing a client performs no I/O. Each get_entries() call is a
    single GET; pagination is left to the caller via `skip`/`limit` params.
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self.base_url = self._build_base_url(config.host or DEFAULT_HOST)
        self.timeout = config.timeout_seconds

    @staticmethod
    def _build_base_url(host: str) -> str:
        """Accept `cdn.contentful.com` or `https://cdn.contentful.com/`."""
        parsed = urlparse(host if "://" in host else f"https://{host}")
        return f"{parsed.scheme}://{parsed.netloc}".rstrip("/")

    @property
    def entries_url(self) -> str:
        return (
            f"{self.base_url}/spaces/{self.config.space}"
            f"/environments/{self.config.environment}/entries"
        )

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def get_entries(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch one page of entries.

        Args:
            params: Query parameters passed through unchanged
                (e.g. {"content_type": "post", "locale": "*"})

        Returns:
            Decoded JSON response with an `items` list

        Raises:
            FetchError: On network failure, HTTP error status or a body
                that is not JSON
        """
        url = self.entries_url
        try:
            response = requests.get(
                url,
                params=params or {},
                headers=self._get_headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            status_code = None
            if getattr(e, "response", None) is not None:
                status_code = e.response.status_code
            logger.error(f"Entries request to {url} failed: {e}")
            raise FetchError(f"Failed to fetch entries from {url}: {e}", status_code=status_code) from e

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                f"Failed to parse entries response from {url}: {e}",
                status_code=response.status_code,
            ) from e
