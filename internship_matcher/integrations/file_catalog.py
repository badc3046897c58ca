"""
Catalog stored in a local JSON file.
"""

from pathlib import Path
from typing import Any, Optional
import json

from .base import CatalogProvider
from internship_matcher.core.errors import InvalidInputError
from internship_matcher.core.models import Internship


class FileCatalogProvider(CatalogProvider):
    """Reads internships from a JSON export of the catalog."""

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self._internships: Optional[list[Internship]] = None

    @property
    def name(self) -> str:
        return "File"

    def list_internships(self, active_only: bool = True) -> list[Internship]:
        internships = self._load()
        if active_only:
            return [i for i in internships if i.is_active]
        return list(internships)

    def get_internship(self, internship_id: Any) -> Optional[Internship]:
        for internship in self._load():
            if str(internship.id) == str(internship_id):
                return internship
        return None

    def _load(self) -> list[Internship]:
        if self._internships is None:
            if not self.path.exists():
                raise FileNotFoundError(f"File not found: {self.path}")

            with open(self.path, 'r', encoding='utf-8') as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise InvalidInputError(f"Invalid catalog JSON in {self.path}: {e}") from e

            self._internships = self._parse_catalog(data, active_only=False)

        return self._internships
