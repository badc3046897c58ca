"""
Skill matching - compares a user's skills against an internship's requirements.

Each requirement can be satisfied three ways:
- Direct match: identical after normalization (worth 1.0)
- Partial match: one is a substring of the other (worth 0.7 per user skill)
- Related match: the user knows a closely related technology (worth 0.5)

Requirements with no match of any kind make up the skills gap.
"""

from dataclasses import dataclass
from types import MappingProxyType
import math

from .errors import InvalidInputError


DIRECT_MATCH_WEIGHT = 1.0
PARTIAL_MATCH_WEIGHT = 0.7
RELATED_MATCH_WEIGHT = 0.5

# user skill -> requirements it counts towards
SKILL_RELATIONS = MappingProxyType({
    "javascript": ("react", "node.js", "vue", "angular", "express"),
    "python": ("django", "flask", "pandas", "numpy", "scikit-learn"),
    "java": ("spring", "hibernate", "maven", "gradle"),
    "react": ("javascript", "jsx", "redux", "next.js"),
    "node.js": ("javascript", "express", "mongodb", "npm"),
    "sql": ("mysql", "postgresql", "database", "oracle"),
    "aws": ("cloud", "ec2", "s3", "lambda", "devops"),
    "docker": ("kubernetes", "devops", "containerization"),
    "git": ("github", "version control", "gitlab", "bitbucket"),
})


def normalize_skill(skill: str) -> str:
    """Canonical comparison form of a skill label."""
    if not isinstance(skill, str):
        raise InvalidInputError(f"skill must be a string, got {type(skill).__name__}")
    return skill.strip().lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class SkillMatch:
    """Outcome of matching skills against requirements."""
    score: int
    matched: tuple[str, ...]
    gap: tuple[str, ...]


class SkillMatcher:
    """Scores how well a set of skills covers a list of requirements."""

    def __init__(self, relations=SKILL_RELATIONS, cap_per_requirement: bool = False):
        """
        Args:
            relations: Mapping of normalized user skill to related requirements
            cap_per_requirement: Limit each requirement's contribution to 1.0
                instead of summing every partial and related match
        """
        self.relations = relations
        self.cap_per_requirement = cap_per_requirement

    def match(self, user_skills, requirements) -> SkillMatch:
        """Calculate the 0-100 skills score with matched skills and gap."""
        user_skills = self._validate(user_skills, "skills")
        requirements = self._validate(requirements, "requirements")

        if not user_skills or not requirements:
            return SkillMatch(score=0, matched=(), gap=tuple(requirements))

        # A blank skill normalizes to "" and so partially matches every requirement
        user_pairs = [(normalize_skill(skill), skill) for skill in user_skills]

        normalized_user = {norm for norm, _ in user_pairs}
        matched: dict[str, None] = {}
        gap = []
        raw_total = 0.0

        for requirement in requirements:
            req = normalize_skill(requirement)
            contribution = 0.0

            if req in normalized_user:
                contribution += DIRECT_MATCH_WEIGHT
                original = next(orig for norm, orig in user_pairs if norm == req)
                matched.setdefault(original)
            else:
                for norm, original in user_pairs:
                    if req in norm or norm in req:
                        contribution += PARTIAL_MATCH_WEIGHT
                        matched.setdefault(original)

                for norm, _ in user_pairs:
                    if req in self.relations.get(norm, ()):
                        contribution += RELATED_MATCH_WEIGHT

            if contribution == 0:
                gap.append(requirement)
            elif self.cap_per_requirement:
                contribution = min(contribution, DIRECT_MATCH_WEIGHT)

            raw_total += contribution

        percentage = min(raw_total / len(requirements) * 100, 100)

        return SkillMatch(
            score=round_half_up(percentage),
            matched=tuple(matched),
            gap=tuple(gap),
        )

    def _validate(self, values, field_name: str) -> list:
        if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
            raise InvalidInputError(
                f"{field_name} must be a sequence of strings, got {type(values).__name__}"
            )
        for value in values:
            if not isinstance(value, str):
                raise InvalidInputError(
                    f"{field_name} entries must be strings, got {type(value).__name__}"
                )
        return list(values)


def match_skills(user_skills, requirements) -> SkillMatch:
    """Match with the default relation table and no per-requirement cap."""
    return SkillMatcher().match(user_skills, requirements)
