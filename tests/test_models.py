"""Tests for record parsing and validation."""

from datetime import datetime

import pytest

from internship_matcher.core import (
    ApplicationRecord,
    Internship,
    InvalidInputError,
    Preferences,
    UserProfile,
    WorkType,
)


def test_profile_from_stored_dict():
    profile = UserProfile.from_dict({
        "skills": ["Python"],
        "preferences": {"location": "remote", "workType": "remote", "companySize": "large"},
        "interests": ["ai"],
        "profileComplete": True,
    })

    assert profile.skills == ["Python"]
    assert profile.preferences.work_type == WorkType.REMOTE
    assert profile.preferences.company_size == "large"
    assert profile.profile_complete is True


def test_profile_missing_fields_default_to_no_preference():
    profile = UserProfile.from_dict({})

    assert profile.skills == []
    assert profile.interests == []
    assert profile.preferences == Preferences()


def test_profile_rejects_bad_shapes():
    with pytest.raises(InvalidInputError):
        UserProfile.from_dict({"skills": "python"})
    with pytest.raises(InvalidInputError):
        UserProfile.from_dict({"skills": ["python"], "preferences": "remote"})
    with pytest.raises(InvalidInputError):
        UserProfile.from_dict(["python"])
    with pytest.raises(InvalidInputError):
        UserProfile.from_dict({"preferences": {"workType": "office"}})


def test_internship_from_stored_dict():
    internship = Internship.from_dict({
        "id": "abc",
        "title": "Intern",
        "company": "Acme",
        "requirements": ["SQL"],
        "type": "hybrid",
        "status": "closed",
        "applicationDeadline": "2026-12-01",
    })

    assert internship.type == WorkType.HYBRID
    assert internship.requirements == ["SQL"]
    assert internship.description == ""
    assert internship.is_active is False
    assert internship.display()["applicationDeadline"] == "2026-12-01"
    assert internship.display()["type"] == "hybrid"


def test_internship_rejects_bad_shapes():
    with pytest.raises(InvalidInputError):
        Internship(requirements="Python")
    with pytest.raises(InvalidInputError):
        Internship(tags=[1, 2])
    with pytest.raises(InvalidInputError):
        Internship(title=42)
    with pytest.raises(InvalidInputError):
        Internship(type="office")


def test_internship_copies_input_lists():
    requirements = ["Python"]
    internship = Internship(requirements=requirements)
    requirements.append("SQL")

    assert internship.requirements == ["Python"]


def test_application_record_requires_internship_id():
    record = ApplicationRecord.from_dict({"internshipId": "a", "appliedAt": "2026-01-02"})
    assert record.status == "applied"
    assert record.to_dict()["appliedAt"] == "2026-01-02"

    with pytest.raises(InvalidInputError):
        ApplicationRecord.from_dict({"status": "applied"})


def test_application_record_rejects_non_string_dates():
    with pytest.raises(InvalidInputError):
        ApplicationRecord("a", applied_at=datetime(2026, 1, 2))
    with pytest.raises(InvalidInputError):
        ApplicationRecord("a", status=3)
