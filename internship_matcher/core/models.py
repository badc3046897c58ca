"""
Core data models for the internship matching engine.

Profiles and internships arrive already deserialized from the document
store, so every record accepts the store's camelCase field names through
``from_dict`` and emits the same shape from ``to_dict``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import InvalidInputError


class WorkType(Enum):
    """Where the internship work happens."""
    REMOTE = "remote"
    ON_SITE = "on-site"
    HYBRID = "hybrid"


def _string_list(value: Any, field_name: str) -> list[str]:
    """Validate a sequence of strings, treating None as empty."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidInputError(
            f"{field_name} must be a sequence of strings, got {type(value).__name__}"
        )
    for item in value:
        if not isinstance(item, str):
            raise InvalidInputError(
                f"{field_name} entries must be strings, got {type(item).__name__}"
            )
    return list(value)


def _optional_str(value: Any, field_name: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise InvalidInputError(f"{field_name} must be a string, got {type(value).__name__}")


def _text(value: Any, field_name: str) -> str:
    return _optional_str(value, field_name) or ""


def _work_type(value: Any, field_name: str) -> Optional[WorkType]:
    """Parse a work type; empty means no value."""
    if value is None or value == "":
        return None
    if isinstance(value, WorkType):
        return value
    if isinstance(value, str):
        try:
            return WorkType(value)
        except ValueError:
            pass
    valid = ", ".join(w.value for w in WorkType)
    raise InvalidInputError(f"{field_name} must be one of {valid}, got {value!r}")


def _mapping(data: Any, record: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise InvalidInputError(f"{record} must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class Preferences:
    """Optional matching preferences; None means no preference."""
    location: Optional[str] = None  # "remote" is a reserved sentinel
    work_type: Optional[WorkType] = None
    company_size: Optional[str] = None
    industry: Optional[str] = None

    def __post_init__(self):
        self.location = _optional_str(self.location, "preferences.location")
        self.work_type = _work_type(self.work_type, "preferences.workType")
        self.company_size = _optional_str(self.company_size, "preferences.companySize")
        self.industry = _optional_str(self.industry, "preferences.industry")

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "Preferences":
        if data is None:
            return cls()
        data = _mapping(data, "preferences")
        return cls(
            location=data.get("location"),
            work_type=data.get("workType"),
            company_size=data.get("companySize"),
            industry=data.get("industry"),
        )

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "workType": self.work_type.value if self.work_type else None,
            "companySize": self.company_size,
            "industry": self.industry,
        }


@dataclass
class UserProfile:
    """Skills, preferences and interests of the user being matched."""
    skills: list[str] = field(default_factory=list)
    preferences: Preferences = field(default_factory=Preferences)
    interests: list[str] = field(default_factory=list)
    profile_complete: bool = False

    def __post_init__(self):
        self.skills = _string_list(self.skills, "skills")
        self.interests = _string_list(self.interests, "interests")
        if self.preferences is None:
            self.preferences = Preferences()
        elif isinstance(self.preferences, Mapping):
            self.preferences = Preferences.from_dict(self.preferences)
        elif not isinstance(self.preferences, Preferences):
            raise InvalidInputError(
                f"preferences must be a mapping, got {type(self.preferences).__name__}"
            )

    @classmethod
    def from_dict(cls, data: Mapping) -> "UserProfile":
        data = _mapping(data, "user profile")
        return cls(
            skills=data.get("skills"),
            preferences=Preferences.from_dict(data.get("preferences")),
            interests=data.get("interests"),
            profile_complete=bool(data.get("profileComplete", False)),
        )

    @classmethod
    def coerce(cls, value: Any) -> "UserProfile":
        """Accept a UserProfile or its stored mapping form."""
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)

    def to_dict(self) -> dict:
        return {
            "skills": list(self.skills),
            "preferences": self.preferences.to_dict(),
            "interests": list(self.interests),
            "profileComplete": self.profile_complete,
        }


@dataclass
class Internship:
    """An internship posting from the catalog."""
    id: Any = ""
    title: str = ""
    company: str = ""
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    location: str = ""
    type: Optional[WorkType] = None
    tags: list[str] = field(default_factory=list)
    status: str = "active"
    application_deadline: Optional[str] = None

    def __post_init__(self):
        self.title = _text(self.title, "title")
        self.company = _text(self.company, "company")
        self.description = _text(self.description, "description")
        self.location = _text(self.location, "location")
        self.requirements = _string_list(self.requirements, "requirements")
        self.tags = _string_list(self.tags, "tags")
        self.type = _work_type(self.type, "type")
        self.status = _text(self.status, "status")

    @classmethod
    def from_dict(cls, data: Mapping) -> "Internship":
        data = _mapping(data, "internship")
        deadline = data.get("applicationDeadline")
        return cls(
            id=data.get("id", ""),
            title=data.get("title"),
            company=data.get("company"),
            description=data.get("description"),
            requirements=data.get("requirements"),
            location=data.get("location"),
            type=data.get("type"),
            tags=data.get("tags"),
            status=data.get("status", "active"),
            application_deadline=str(deadline) if deadline is not None else None,
        )

    @classmethod
    def coerce(cls, value: Any) -> "Internship":
        """Accept an Internship or its stored mapping form."""
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)

    @property
    def is_active(self) -> bool:
        return self.status.lower() == "active"

    def display(self) -> dict:
        """Projection of the fields shown next to a recommendation."""
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type.value if self.type else None,
            "requirements": list(self.requirements),
            "tags": list(self.tags),
            "description": self.description,
            "applicationDeadline": self.application_deadline,
        }

    def to_dict(self) -> dict:
        data = self.display()
        data["status"] = self.status
        return data


@dataclass(frozen=True)
class MatchBreakdown:
    """The five sub-scores behind an overall score, each 0-100."""
    skills_score: int = 0
    location_score: int = 0
    work_type_score: int = 0
    interest_score: int = 0
    company_score: int = 0

    def to_dict(self) -> dict:
        return {
            "skillsScore": self.skills_score,
            "locationScore": self.location_score,
            "workTypeScore": self.work_type_score,
            "interestScore": self.interest_score,
            "companyScore": self.company_score,
        }


@dataclass(frozen=True)
class MatchResult:
    """Scoring result for one profile against one internship."""
    overall_score: int = 0
    breakdown: MatchBreakdown = field(default_factory=MatchBreakdown)
    skills_matched: tuple[str, ...] = ()  # unique, first-seen order
    skills_gap: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "breakdown": self.breakdown.to_dict(),
            "skillsMatched": list(self.skills_matched),
            "skillsGap": list(self.skills_gap),
        }


@dataclass(frozen=True)
class Recommendation:
    """A ranked internship with its match and the reasons behind it."""
    internship: Internship
    match: MatchResult
    reasons: tuple[str, ...] = ()

    @property
    def overall_score(self) -> int:
        return self.match.overall_score

    def to_dict(self) -> dict:
        return {
            "internship": self.internship.display(),
            "match": self.match.to_dict(),
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class BulkMatch:
    """Flattened match row returned by bulk matching."""
    internship_id: Any
    title: str
    company: str
    match: MatchResult

    @property
    def overall_score(self) -> int:
        return self.match.overall_score

    def to_dict(self) -> dict:
        data = {
            "internshipId": self.internship_id,
            "title": self.title,
            "company": self.company,
        }
        data.update(self.match.to_dict())
        return data


@dataclass
class ApplicationRecord:
    """An application the user has submitted, as kept by the tracker store."""
    internship_id: Any
    status: str = "applied"
    applied_at: Optional[str] = None  # ISO-8601

    def __post_init__(self):
        self.status = _text(self.status, "status")
        self.applied_at = _optional_str(self.applied_at, "appliedAt")

    @classmethod
    def from_dict(cls, data: Mapping) -> "ApplicationRecord":
        data = _mapping(data, "application")
        if "internshipId" not in data:
            raise InvalidInputError("application is missing internshipId")
        applied_at = data.get("appliedAt")
        return cls(
            internship_id=data["internshipId"],
            status=data.get("status", "applied"),
            applied_at=str(applied_at) if applied_at is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "internshipId": self.internship_id,
            "status": self.status,
            "appliedAt": self.applied_at,
        }
