"""Core models and scoring for internship matching."""

from .errors import InvalidInputError
from .models import (
    WorkType,
    Preferences,
    UserProfile,
    Internship,
    MatchBreakdown,
    MatchResult,
    Recommendation,
    BulkMatch,
    ApplicationRecord,
)
from .skills import SkillMatcher, SkillMatch, normalize_skill, match_skills
from .preferences import PreferenceMatcher
from .reasons import ReasonGenerator
from .matcher import InternshipMatcher, match_one, match_bulk, recommend
from .insights import (
    identify_skill_gaps,
    suggest_skills,
    application_insights,
    build_insights,
)

__all__ = [
    "InvalidInputError",
    "WorkType",
    "Preferences",
    "UserProfile",
    "Internship",
    "MatchBreakdown",
    "MatchResult",
    "Recommendation",
    "BulkMatch",
    "ApplicationRecord",
    "SkillMatcher",
    "SkillMatch",
    "normalize_skill",
    "match_skills",
    "PreferenceMatcher",
    "ReasonGenerator",
    "InternshipMatcher",
    "match_one",
    "match_bulk",
    "recommend",
    "identify_skill_gaps",
    "suggest_skills",
    "application_insights",
    "build_insights",
]
