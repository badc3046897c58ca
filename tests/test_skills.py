"""Tests for skill normalization and skill matching."""

import pytest

from internship_matcher.core import InvalidInputError, SkillMatcher, match_skills, normalize_skill
from internship_matcher.core.skills import SKILL_RELATIONS, round_half_up


def test_normalize_trims_and_lowercases():
    assert normalize_skill("  ReAct.JS ") == "react.js"
    assert normalize_skill("") == ""
    assert normalize_skill("Машинное обучение") == "машинное обучение"


def test_normalize_rejects_non_strings():
    with pytest.raises(InvalidInputError):
        normalize_skill(None)


def test_direct_and_related_matches():
    result = match_skills(["JavaScript", "React"], ["JavaScript", "React", "Node.js"])

    # 1.0 + 1.0 + 0.5 (javascript -> node.js) over three requirements
    assert result.score == 83
    assert set(result.matched) == {"JavaScript", "React"}
    assert result.gap == ()


def test_empty_skills_leave_every_requirement_in_gap():
    result = match_skills([], ["Python"])

    assert result.score == 0
    assert result.matched == ()
    assert result.gap == ("Python",)


def test_empty_requirements_score_zero():
    result = match_skills(["Python"], [])

    assert result.score == 0
    assert result.gap == ()


def test_partial_match_in_either_direction():
    assert match_skills(["React.js"], ["React"]).score == 70
    assert match_skills(["React"], ["React.js"]).score == 70
    assert match_skills(["React.js"], ["React"]).matched == ("React.js",)


def test_related_match_counts_without_marking_skill_matched():
    result = match_skills(["Python"], ["Django"])

    assert result.score == 50
    assert result.matched == ()
    assert result.gap == ()


def test_partial_matches_add_up_per_user_skill():
    result = match_skills(["React Native", "React.js"], ["React", "Rust"])

    assert result.score == 70  # (0.7 + 0.7) / 2
    assert result.matched == ("React Native", "React.js")
    assert result.gap == ("Rust",)


def test_cap_per_requirement_limits_over_count():
    matcher = SkillMatcher(cap_per_requirement=True)
    result = matcher.match(["React Native", "React.js"], ["React", "Rust"])

    assert result.score == 50


def test_gap_keeps_requirement_order_and_casing():
    result = match_skills(["Go"], ["Rust", "C++", "go"])

    assert result.gap == ("Rust", "C++")
    assert result.score == 33


def test_matched_uses_original_casing_without_duplicates():
    result = match_skills(["Python", "python", "  PANDAS "], ["python", "pandas"])

    assert result.matched == ("Python", "  PANDAS ")
    assert result.score == 100


def test_blank_user_skill_partially_matches_every_requirement():
    result = match_skills(["Python", "   "], ["SQL", "Go"])

    assert result.score == 70  # 0.7 per requirement from the blank skill
    assert result.matched == ("   ",)
    assert result.gap == ()


def test_only_blank_skills_still_score():
    result = match_skills(["   "], ["Python", "SQL"])

    assert result.score == 70
    assert result.gap == ()


def test_score_is_bounded_integer():
    cases = [
        (["JavaScript", "React", "Node.js", "Express"], ["React", "Express"]),
        (["SQL", "MySQL", "PostgreSQL"], ["sql"]),
        (["Docker"], ["Kubernetes", "DevOps", "Terraform"]),
        (["C"], ["C", "C++", "C#", "Objective-C"]),
    ]
    for skills, requirements in cases:
        score = match_skills(skills, requirements).score
        assert isinstance(score, int)
        assert 0 <= score <= 100


def test_rejects_non_sequence_requirements():
    with pytest.raises(InvalidInputError):
        match_skills(["Python"], "Python")

    with pytest.raises(InvalidInputError):
        match_skills(["Python", 3], ["Python"])


def test_relation_table_is_read_only():
    with pytest.raises(TypeError):
        SKILL_RELATIONS["rust"] = ("cargo",)

    assert "node.js" in SKILL_RELATIONS["javascript"]


def test_round_half_up():
    assert round_half_up(80.5) == 81
    assert round_half_up(82.49) == 82
    assert round_half_up(0) == 0
