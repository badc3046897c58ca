"""
Base class for internship catalog providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

from internship_matcher.core.errors import InvalidInputError
from internship_matcher.core.models import Internship


class CatalogProvider(ABC):
    """Abstract base class for sources of internship postings."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    def list_internships(self, active_only: bool = True) -> list[Internship]:
        """
        List the internships in the catalog.

        Args:
            active_only: Leave out postings whose status is not active

        Returns:
            List of Internship objects in catalog order
        """
        pass

    @abstractmethod
    def get_internship(self, internship_id: Any) -> Optional[Internship]:
        """
        Get a single internship.

        Args:
            internship_id: The internship's identifier

        Returns:
            Internship, or None if it does not exist
        """
        pass

    def _parse_catalog(self, data, active_only: bool) -> list[Internship]:
        """Parse a JSON list, or an object with an "internships" list."""
        if isinstance(data, dict):
            data = data.get("internships")
        if not isinstance(data, list):
            raise InvalidInputError(
                f"{self.name} catalog must be a list of internships"
            )

        internships = [Internship.from_dict(item) for item in data]

        if active_only:
            internships = [i for i in internships if i.is_active]

        self.logger.debug(f"{self.name}: Loaded {len(internships)} internships")
        return internships
