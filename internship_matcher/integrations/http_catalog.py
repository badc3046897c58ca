"""
Catalog served over HTTP.

Expects a JSON endpoint that lists internships at its base URL and returns a
single internship at ``<base URL>/<id>``.
"""

from typing import Any, Optional

import requests

from .base import CatalogProvider
from internship_matcher.core.errors import InvalidInputError
from internship_matcher.core.models import Internship


class HttpCatalogProvider(CatalogProvider):
    """Fetches internships from a catalog API."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the provider.

        Args:
            base_url: URL of the internships collection
            api_key: Optional bearer token for the catalog API
            timeout: Request timeout in seconds
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "HTTP"

    def list_internships(self, active_only: bool = True) -> list[Internship]:
        params = {"status": "active"} if active_only else {}

        response = requests.get(
            self.base_url,
            params=params,
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()

        return self._parse_catalog(self._json(response), active_only)

    def get_internship(self, internship_id: Any) -> Optional[Internship]:
        response = requests.get(
            f"{self.base_url}/{internship_id}",
            headers=self._headers(),
            timeout=self.timeout,
        )

        if response.status_code == 404:
            return None
        response.raise_for_status()

        data = self._json(response)
        if isinstance(data, dict) and "id" not in data:
            data = {"id": internship_id, **data}

        return Internship.from_dict(data)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _json(self, response):
        try:
            return response.json()
        except ValueError as e:
            raise InvalidInputError(f"Catalog returned invalid JSON from {response.url}") from e
