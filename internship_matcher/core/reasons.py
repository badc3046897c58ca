"""
Reason Generator - short explanations shown next to a recommendation.
"""

from typing import Optional

from .models import Internship, MatchResult, UserProfile, WorkType
from .preferences import REMOTE_SENTINEL


class ReasonGenerator:
    """Turns a match breakdown into human-readable reasons."""

    MAX_REASONS = 4

    # (minimum overall score, headline), checked top down
    HEADLINES = (
        (90, "Excellent match for your profile!"),
        (75, "Great match for your skills and preferences"),
        (60, "Good opportunity to expand your skills"),
    )

    def generate(
        self,
        profile: UserProfile,
        internship: Internship,
        match: MatchResult,
    ) -> tuple[str, ...]:
        """
        Build at most four reasons in priority order: headline, matched
        skills, location, work type, skills to learn.
        """
        reasons = []

        headline = self._headline(match.overall_score)
        if headline:
            reasons.append(headline)

        matched = match.skills_matched
        if len(matched) == 1:
            reasons.append(f"You have the required skill: {matched[0]}")
        elif matched:
            reasons.append(
                f"You have {len(matched)} matching skills: {', '.join(matched[:3])}"
            )

        preferences = profile.preferences
        preferred_location = preferences.location
        if preferred_location == REMOTE_SENTINEL and internship.type == WorkType.REMOTE:
            reasons.append("Matches your remote work preference")
        elif (
            preferred_location
            and internship.location
            and preferred_location.lower() in internship.location.lower()
        ):
            reasons.append(f"Located in your preferred area: {internship.location}")

        if preferences.work_type and preferences.work_type == internship.type:
            reasons.append(f"Matches your {internship.type.value} work preference")

        if 1 <= len(match.skills_gap) <= 2:
            reasons.append(
                f"Consider learning: {', '.join(match.skills_gap)} to be a perfect match"
            )

        return tuple(reasons[:self.MAX_REASONS])

    def _headline(self, overall_score: int) -> Optional[str]:
        for threshold, headline in self.HEADLINES:
            if overall_score >= threshold:
                return headline
        return None
