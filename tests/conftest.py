"""Shared fixtures: a sample profile and a small internship catalog."""

import pytest

from internship_matcher.core import Internship, Preferences, UserProfile, WorkType


@pytest.fixture
def web_profile():
    return UserProfile(
        skills=["JavaScript", "React"],
        preferences=Preferences(location="Boston", work_type=WorkType.HYBRID, industry="technology"),
        interests=["frontend", "design"],
    )


@pytest.fixture
def empty_profile():
    return UserProfile(skills=["Python"])


@pytest.fixture
def frontend_internship():
    return Internship(
        id="intern-1",
        title="Frontend Intern",
        company="Pixel Software",
        description="Build UI components for our design system.",
        requirements=["JavaScript", "React", "Node.js"],
        location="Boston, MA",
        type=WorkType.HYBRID,
        tags=["frontend", "web"],
    )


@pytest.fixture
def catalog():
    return [
        Internship(
            id="data-1",
            title="Data Intern",
            company="Numbers Bank",
            requirements=["Python", "SQL", "Pandas"],
            location="New York, NY",
            type=WorkType.ON_SITE,
            tags=["data"],
        ),
        Internship(
            id="web-1",
            title="Web Intern",
            company="Pixel Software",
            requirements=["JavaScript", "React"],
            location="Remote",
            type=WorkType.REMOTE,
            tags=["frontend"],
        ),
        Internship(
            id="ops-1",
            title="DevOps Intern",
            company="Cloudy",
            requirements=["Docker", "AWS"],
            location="Austin, TX",
            type=WorkType.ON_SITE,
            tags=["infrastructure"],
        ),
    ]
