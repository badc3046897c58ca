"""
Preference matching - scores an internship against the user's stated
location, work type, interests and industry.

Every scorer returns 0-100. Missing preferences score a neutral value so
that an empty profile is driven by the skills match alone.
"""

from types import MappingProxyType
import logging

from .models import Internship, Preferences, WorkType
from .skills import round_half_up


REMOTE_SENTINEL = "remote"

INDUSTRY_KEYWORDS = MappingProxyType({
    "technology": ("tech", "software", "ai", "ml", "data", "cloud"),
    "finance": ("bank", "finance", "fintech", "trading", "investment"),
    "healthcare": ("health", "medical", "pharma", "biotech"),
    "education": ("education", "learning", "university", "school"),
    "ecommerce": ("ecommerce", "retail", "marketplace", "shopping"),
})


class PreferenceMatcher:
    """Rule-table scorers for the non-skill parts of a match."""

    NEUTRAL_LOCATION = 70
    NEUTRAL_WORK_TYPE = 70
    NEUTRAL_INTEREST = 60
    BASE_COMPANY = 70
    INDUSTRY_BONUS = 20

    def __init__(self, industry_keywords=INDUSTRY_KEYWORDS):
        self.industry_keywords = industry_keywords
        self.logger = logging.getLogger(self.__class__.__name__)

    def location_score(self, preferences: Preferences, internship: Internship) -> int:
        """
        Score location fit. Rules are checked in order, first match wins:

        1. Remote preference and remote internship -> 100
        2. City preference found in the internship location -> 100
        3. City preference found and the internship is hybrid -> 85 (shadowed by 2)
        4. No preference -> 70
        5. Preference missed but internship is remote -> 60
        6. Preference missed but internship is hybrid -> 50
        7. Anything else -> 30
        """
        preferred = preferences.location
        work_type = internship.type

        if preferred == REMOTE_SENTINEL and work_type == WorkType.REMOTE:
            return 100

        if preferred and preferred != REMOTE_SENTINEL:
            if preferred.lower() in internship.location.lower():
                return 100

        if not preferred:
            return self.NEUTRAL_LOCATION

        if work_type == WorkType.REMOTE:
            return 60
        if work_type == WorkType.HYBRID:
            return 50

        return 30

    def work_type_score(self, preferences: Preferences, internship: Internship) -> int:
        """Score work type fit (0-100)."""
        preferred = preferences.work_type

        if preferred is None:
            return self.NEUTRAL_WORK_TYPE

        if preferred == internship.type:
            return 100

        # Hybrid seekers can live with either extreme
        if preferred == WorkType.HYBRID and internship.type in (WorkType.REMOTE, WorkType.ON_SITE):
            return 75

        return 40

    def interest_score(self, interests: list[str], internship: Internship) -> int:
        """Share of the user's interests mentioned anywhere in the posting."""
        if not interests:
            return self.NEUTRAL_INTEREST

        haystack = " ".join(
            list(internship.tags) + [internship.title, internship.company, internship.description]
        ).lower()

        hits = sum(1 for interest in interests if interest.lower() in haystack)

        return round_half_up(min(hits / len(interests) * 100, 100))

    def company_score(self, preferences: Preferences, internship: Internship) -> int:
        """
        Score industry fit from keywords in the company name and description.

        Company size is accepted as a preference but there is no company
        data to score it against.
        """
        score = self.BASE_COMPANY

        if preferences.industry:
            company_info = f"{internship.company} {internship.description}".lower()
            keywords = self.industry_keywords.get(preferences.industry.lower(), ())

            if any(keyword in company_info for keyword in keywords):
                score += self.INDUSTRY_BONUS
            elif not keywords:
                self.logger.debug(f"No keywords for industry '{preferences.industry}'")

        return min(score, 100)
