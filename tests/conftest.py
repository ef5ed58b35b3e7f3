"""Shared test fixtures."""

from __future__ import annotations

import pytest

from careercatalyst.models.actions import (
    AddEducation,
    AddExperience,
    AddProject,
    AddSkill,
    SetPersonalInfo,
)
from careercatalyst.models.document import (
    CVDocument,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)
from careercatalyst.store.dispatcher import CVStore
from careercatalyst.store.transition import transition


@pytest.fixture
def sample_personal_info() -> PersonalInfo:
    return PersonalInfo(
        full_name="Jane Doe",
        email="jane.doe@example.com",
        phone="+1 555 0100",
        address="Berlin, Germany",
        summary="Backend engineer focused on reliable data services.",
    )


@pytest.fixture
def sample_education() -> EducationEntry:
    return EducationEntry(school="X Univ", degree="B.Sc", start_year=2018, end_year=2022)


@pytest.fixture
def sample_experience() -> ExperienceEntry:
    return ExperienceEntry(
        company="Acme Corp",
        title="Software Engineer",
        start_year=2022,
        description="Built the billing API.",
    )


@pytest.fixture
def sample_project() -> ProjectEntry:
    return ProjectEntry(name="cvlint", description="Linter for resume markdown files.")


@pytest.fixture
def empty_document() -> CVDocument:
    return CVDocument.empty()


@pytest.fixture
def populated_document(
    sample_personal_info,
    sample_education,
    sample_experience,
    sample_project,
) -> CVDocument:
    doc = CVDocument.empty()
    for action in (
        SetPersonalInfo(info=sample_personal_info),
        AddEducation(entry=sample_education),
        AddEducation(entry=EducationEntry(school="Y College", degree="M.Sc", start_year=2022)),
        AddExperience(entry=sample_experience),
        AddSkill(skill="Python"),
        AddSkill(skill="Docker"),
        AddProject(entry=sample_project),
    ):
        doc = transition(doc, action)
    return doc


@pytest.fixture
def store() -> CVStore:
    return CVStore()


@pytest.fixture
def populated_store(populated_document) -> CVStore:
    return CVStore(populated_document)
