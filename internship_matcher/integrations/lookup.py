"""
Internship lookups by ID, tolerant of individual failures.
"""

from typing import Any, Optional
import logging

import requests

from .base import CatalogProvider
from internship_matcher.core.errors import InvalidInputError
from internship_matcher.core.matcher import BULK_MATCH_LIMIT, InternshipMatcher
from internship_matcher.core.models import BulkMatch, Internship


logger = logging.getLogger(__name__)


def fetch_internships(
    internship_ids: list[Any],
    provider: CatalogProvider,
) -> list[Optional[Internship]]:
    """
    Look up each ID with the provider.

    Returns one entry per ID, None where the internship is missing or the
    lookup failed.
    """
    results = []

    for internship_id in internship_ids:
        try:
            internship = provider.get_internship(internship_id)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error processing internship {internship_id}: {e}")
            internship = None

        if internship is None:
            logger.debug(f"{provider.name}: Internship {internship_id} not available")

        results.append(internship)

    return results


def bulk_match_ids(
    profile,
    internship_ids: list[Any],
    provider: CatalogProvider,
    max_count: int = BULK_MATCH_LIMIT,
) -> list[BulkMatch]:
    """Bulk match internships by ID, omitting any that cannot be found."""
    if not isinstance(internship_ids, (list, tuple)):
        raise InvalidInputError("internship IDs must be a list")
    if len(internship_ids) > max_count:
        raise InvalidInputError(
            f"Maximum {max_count} internships allowed per request, got {len(internship_ids)}"
        )

    matcher = InternshipMatcher(profile)
    return matcher.match_bulk(fetch_internships(internship_ids, provider), max_count=max_count)
