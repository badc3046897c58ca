"""
Matching insights - skill demand across the catalog, skill suggestions and
a re-scored history of the user's applications.
"""

from collections import Counter
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Optional
import logging

from .matcher import InternshipMatcher
from .models import ApplicationRecord, Internship, UserProfile
from .skills import normalize_skill, round_half_up


HIGH_MATCH_SCORE = 75

# Skills that usually travel together
SKILL_CLUSTERS = MappingProxyType({
    "web-development": ("React", "Node.js", "JavaScript", "HTML", "CSS", "MongoDB", "Express"),
    "data-science": ("Python", "Pandas", "NumPy", "Scikit-learn", "TensorFlow", "SQL", "Matplotlib"),
    "mobile-development": ("React Native", "Flutter", "Swift", "Kotlin", "iOS", "Android"),
    "devops": ("Docker", "Kubernetes", "AWS", "Git", "CI/CD", "Linux", "Terraform"),
    "ai-ml": ("Python", "TensorFlow", "PyTorch", "OpenCV", "NLP", "Deep Learning"),
})

logger = logging.getLogger(__name__)


def _demand_priority(demand: int) -> str:
    if demand >= 10:
        return "high"
    if demand >= 5:
        return "medium"
    return "low"


def identify_skill_gaps(
    profile,
    catalog,
    min_demand: int = 3,
    limit: int = 10,
) -> list[dict]:
    """
    Find in-demand requirements the user does not have.

    Args:
        profile: UserProfile or its mapping form
        catalog: Internships to count requirements over
        min_demand: Minimum number of postings asking for a skill
        limit: Maximum number of gaps to return

    Returns:
        Dicts with skill, demand and priority, most demanded first
    """
    profile = UserProfile.coerce(profile)
    user_skills = {normalize_skill(skill) for skill in profile.skills}

    frequency = Counter()
    for item in catalog:
        internship = Internship.coerce(item)
        for requirement in internship.requirements:
            frequency[normalize_skill(requirement)] += 1

    # most_common keeps first-seen order among equal counts
    gaps = [
        (skill, demand)
        for skill, demand in frequency.most_common()
        if skill and skill not in user_skills and demand >= min_demand
    ]

    return [
        {
            "skill": skill[:1].upper() + skill[1:],
            "demand": demand,
            "priority": _demand_priority(demand),
        }
        for skill, demand in gaps[:max(0, limit)]
    ]


def suggest_skills(profile, max_clusters: int = 3) -> list[dict]:
    """Suggest skills from clusters where the user already has a foothold."""
    profile = UserProfile.coerce(profile)
    user_skills = [skill.lower() for skill in profile.skills]

    def has_skill(skill: str) -> bool:
        return any(skill.lower() in user_skill for user_skill in user_skills)

    suggestions = []
    for cluster, skills in SKILL_CLUSTERS.items():
        owned = [skill for skill in skills if has_skill(skill)]
        if len(owned) < 2:
            continue

        missing = [skill for skill in skills if not has_skill(skill)]
        if missing:
            suggestions.append({
                "cluster": cluster.replace("-", " ").upper(),
                "suggestedSkills": missing[:3],
                "reason": f"You have {len(owned)} skills in this area",
            })

    return suggestions[:max_clusters]


def _applied_sort_key(entry: dict) -> datetime:
    applied_at = entry.get("appliedAt")
    if applied_at:
        try:
            parsed = datetime.fromisoformat(applied_at.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Unparseable appliedAt '{applied_at}'")
            return datetime.min
        # Naive timestamps are taken as UTC
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    return datetime.min


def application_insights(
    profile,
    applications,
    lookup: Callable[[Any], Optional[Internship]],
) -> dict:
    """
    Re-score every internship the user applied to.

    Applications whose internship cannot be looked up are skipped.

    Args:
        profile: UserProfile or its mapping form
        applications: ApplicationRecords (or mappings) for this user
        lookup: Returns the Internship for an ID, or None if it is gone

    Returns:
        Totals, average match, high match count and the history, newest first
    """
    matcher = InternshipMatcher(profile)
    history = []

    for item in applications:
        application = item if isinstance(item, ApplicationRecord) else ApplicationRecord.from_dict(item)

        try:
            found = lookup(application.internship_id)
        except Exception as e:
            logger.error(f"Lookup failed for internship {application.internship_id}: {e}")
            continue

        if found is None:
            logger.debug(f"Internship {application.internship_id} not found, skipping")
            continue

        internship = Internship.coerce(found)
        match = matcher.match_internship(internship)

        history.append({
            "internshipId": application.internship_id,
            "title": internship.title,
            "company": internship.company,
            "appliedAt": application.applied_at,
            "status": application.status,
            "matchScore": match.overall_score,
            "skillsMatch": match.breakdown.skills_score,
        })

    total_score = sum(entry["matchScore"] for entry in history)
    history.sort(key=_applied_sort_key, reverse=True)

    return {
        "total": len(history),
        "averageMatchScore": round_half_up(total_score / len(history)) if history else 0,
        "highMatches": sum(1 for entry in history if entry["matchScore"] >= HIGH_MATCH_SCORE),
        "applicationHistory": history,
    }


def build_insights(profile, applications, catalog, lookup=None) -> dict:
    """
    Combined insights report for a user.

    Args:
        profile: UserProfile or its mapping form
        applications: The user's application records
        catalog: Active internships used for demand analysis
        lookup: Internship lookup by ID (defaults to searching the catalog)
    """
    profile = UserProfile.coerce(profile)
    internships = [Internship.coerce(item) for item in catalog]

    if lookup is None:
        by_id = {internship.id: internship for internship in internships}
        lookup = by_id.get

    return {
        "profile": {
            "skills": list(profile.skills),
            "skillsCount": len(profile.skills),
            "profileCompleteness": 100 if profile.profile_complete else 60,
        },
        "applications": application_insights(profile, applications, lookup),
        "recommendations": {
            "skillGaps": identify_skill_gaps(profile, internships),
            "suggestedSkills": suggest_skills(profile),
        },
    }
