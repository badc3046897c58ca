"""
Internship Matcher - Scoring and ranking of internships for a user profile.

Calculates five scores and combines them with fixed weights:
- Skills match (40%): How well user skills cover the requirements
- Location match (20%): Remote/city preference against the posting
- Work type match (15%): Remote, on-site or hybrid preference
- Interest match (15%): User interests mentioned in the posting
- Company match (10%): Preferred industry keywords

Everything here is a pure function of its inputs, so a matcher can be
shared between threads.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Optional
import logging

from .errors import InvalidInputError
from .models import (
    BulkMatch,
    Internship,
    MatchBreakdown,
    MatchResult,
    Recommendation,
    UserProfile,
)
from .preferences import PreferenceMatcher
from .reasons import ReasonGenerator
from .skills import SkillMatcher, round_half_up


DEFAULT_RECOMMENDATION_LIMIT = 10
BULK_MATCH_LIMIT = 50


class InternshipMatcher:
    """Matches one user profile against internship postings."""

    # Weights for overall score calculation
    WEIGHTS = {
        "skills": 0.40,
        "location": 0.20,
        "work_type": 0.15,
        "interest": 0.15,
        "company": 0.10,
    }

    def __init__(
        self,
        profile,
        skill_matcher: Optional[SkillMatcher] = None,
        preference_matcher: Optional[PreferenceMatcher] = None,
        reason_generator: Optional[ReasonGenerator] = None,
    ):
        """
        Initialize the matcher.

        Args:
            profile: UserProfile or its stored mapping form
            skill_matcher: Skill scorer (default relation table, no cap)
            preference_matcher: Location/work type/interest/company scorer
            reason_generator: Builds explanations for recommendations
        """
        self.profile = UserProfile.coerce(profile)
        self.skill_matcher = skill_matcher or SkillMatcher()
        self.preference_matcher = preference_matcher or PreferenceMatcher()
        self.reason_generator = reason_generator or ReasonGenerator()
        self.logger = logging.getLogger(self.__class__.__name__)

    def match_internship(self, internship) -> MatchResult:
        """Calculate the match result for a single internship."""
        internship = Internship.coerce(internship)
        preferences = self.profile.preferences

        skills = self.skill_matcher.match(self.profile.skills, internship.requirements)

        breakdown = MatchBreakdown(
            skills_score=skills.score,
            location_score=self.preference_matcher.location_score(preferences, internship),
            work_type_score=self.preference_matcher.work_type_score(preferences, internship),
            interest_score=self.preference_matcher.interest_score(self.profile.interests, internship),
            company_score=self.preference_matcher.company_score(preferences, internship),
        )

        result = MatchResult(
            overall_score=self.overall_score(breakdown),
            breakdown=breakdown,
            skills_matched=skills.matched,
            skills_gap=skills.gap,
        )

        self.logger.debug(
            f"Scored {internship.id} '{internship.title}': {result.overall_score} "
            f"(skills {breakdown.skills_score})"
        )

        return result

    @classmethod
    def overall_score(cls, breakdown: MatchBreakdown) -> int:
        """Weighted sum of the five sub-scores, rounded to an integer."""
        return round_half_up(
            breakdown.skills_score * cls.WEIGHTS["skills"] +
            breakdown.location_score * cls.WEIGHTS["location"] +
            breakdown.work_type_score * cls.WEIGHTS["work_type"] +
            breakdown.interest_score * cls.WEIGHTS["interest"] +
            breakdown.company_score * cls.WEIGHTS["company"]
        )

    def explain(self, internship, match: Optional[MatchResult] = None) -> tuple[str, ...]:
        """Reasons for a match, scoring the internship first if needed."""
        internship = Internship.coerce(internship)
        if match is None:
            match = self.match_internship(internship)
        return self.reason_generator.generate(self.profile, internship, match)

    def recommend(
        self,
        catalog,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
        exclude_ids: Iterable[Any] = (),
        parallel: bool = False,
        max_workers: int = 4,
    ) -> list[Recommendation]:
        """
        Rank a catalog of internships by overall match.

        Args:
            catalog: Internships (or their mapping form) to score
            limit: Maximum number of recommendations; <= 0 returns none
            exclude_ids: Internship IDs to leave out, e.g. already applied to
            parallel: Score the catalog on a thread pool
            max_workers: Thread pool size when parallel

        Returns:
            Recommendations sorted by overall score, ties in catalog order
        """
        limit = _check_limit(limit)
        internships = [Internship.coerce(item) for item in _check_sequence(catalog, "catalog")]

        # IDs compare as strings, the same way catalog lookups do
        excluded = {str(internship_id) for internship_id in exclude_ids}
        if excluded:
            internships = [i for i in internships if str(i.id) not in excluded]

        if limit == 0:
            return []

        if parallel and len(internships) > 1:
            # map() yields in submission order, keeping the tie-break stable
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                recommendations = list(executor.map(self._recommend_one, internships))
        else:
            recommendations = [self._recommend_one(i) for i in internships]

        recommendations.sort(key=lambda r: r.overall_score, reverse=True)

        self.logger.info(
            f"Ranked {len(recommendations)} internships, returning top {min(limit, len(recommendations))}"
        )

        return recommendations[:limit]

    def _recommend_one(self, internship: Internship) -> Recommendation:
        match = self.match_internship(internship)
        return Recommendation(
            internship=internship,
            match=match,
            reasons=self.reason_generator.generate(self.profile, internship, match),
        )

    def match_bulk(self, internships, max_count: int = BULK_MATCH_LIMIT) -> list[BulkMatch]:
        """
        Score several internships and sort them by overall score.

        Entries that are None (their lookup failed upstream) are skipped.
        """
        items = _check_sequence(internships, "internships")
        max_count = _check_limit(max_count)

        if len(items) > max_count:
            raise InvalidInputError(
                f"Maximum {max_count} internships allowed per request, got {len(items)}"
            )

        matches = []
        for item in items:
            if item is None:
                continue
            internship = Internship.coerce(item)
            matches.append(BulkMatch(
                internship_id=internship.id,
                title=internship.title,
                company=internship.company,
                match=self.match_internship(internship),
            ))

        matches.sort(key=lambda m: m.overall_score, reverse=True)

        skipped = len(items) - len(matches)
        if skipped:
            self.logger.info(f"Bulk match skipped {skipped} missing internships")

        return matches


def _check_sequence(value, field_name: str) -> list:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"{field_name} must be a sequence, got {type(value).__name__}")
    return list(value)


def _check_limit(value) -> int:
    """Validate a count argument; negatives clamp to zero."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"limit must be an integer, got {type(value).__name__}")
    return max(0, value)


def match_one(profile, internship) -> MatchResult:
    """Match result for one profile and one internship."""
    return InternshipMatcher(profile).match_internship(internship)


def match_bulk(profile, internships, max_count: int = BULK_MATCH_LIMIT) -> list[BulkMatch]:
    """Bulk match rows for up to ``max_count`` internships, best first."""
    return InternshipMatcher(profile).match_bulk(internships, max_count=max_count)


def recommend(
    profile,
    catalog,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    exclude_ids: Iterable[Any] = (),
    parallel: bool = False,
) -> list[Recommendation]:
    """Top ``limit`` recommendations from a catalog, with reasons."""
    return InternshipMatcher(profile).recommend(
        catalog, limit=limit, exclude_ids=exclude_ids, parallel=parallel
    )
