"""USDA National Nutrient Database (NDB) API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

_logger = logging.getLogger(__name__)

LIST_ENDPOINT = "/list/"
SEARCH_ENDPOINT = "/search/"
REPORTS_ENDPOINT = "/V2/reports"


class NdbClient(Protocol):
    """Interface for NDB API interactions."""

    def list_foods(self, max_results: int = 50) -> dict[str, object]:
        """List foods sorted by name and return raw API data."""

    def search_foods(self, query: str, max_results: int = 50) -> dict[str, object]:
        """Search foods by relevance and return raw API data."""

    def get_food_report(self, ndbno: str) -> dict[str, object]:
        """Fetch the basic food report for an ndbno and return raw API data."""


@dataclass
class HttpxNdbClient(NdbClient):
    """HTTPX-backed NDB client."""

    api_key: str
    base_url: str
    http_client: httpx.Client

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 15
    ) -> "HttpxNdbClient":
        """Create an NDB client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.Client(timeout=timeout),
        )

    def list_foods(self, max_results: int = 50) -> dict[str, object]:
        """List foods (``lt=f``) sorted by name."""
        return self._get(
            LIST_ENDPOINT,
            {"format": "json", "lt": "f", "max": max_results, "sort": "n"},
        )

    def search_foods(self, query: str, max_results: int = 50) -> dict[str, object]:
        """Search foods sorted by relevance."""
        return self._get(
            SEARCH_ENDPOINT,
            {"format": "json", "sort": "r", "q": query, "max": max_results},
        )

    def get_food_report(self, ndbno: str) -> dict[str, object]:
        """Fetch a basic (``type=b``) food report."""
        return self._get(
            REPORTS_ENDPOINT,
            {"format": "json", "type": "b", "ndbno": ndbno},
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()

    def _get(self, endpoint: str, params: dict[str, object]) -> dict[str, object]:
        url = f"{self.base_url}{endpoint}"
        _logger.debug("GET %s params=%s", url, params)
        response = self.http_client.get(
            url,
            params={**params, "api_key": self.api_key},
        )
        response.raise_for_status()
        return response.json()
