"""Tests for derived views over a CV document."""

import pytest

from careercatalyst.models.actions import (
    AddEducation,
    AddExperience,
    AddProject,
    AddSkill,
    SetPersonalInfo,
)
from careercatalyst.models.document import CVDocument, PersonalInfo
from careercatalyst.store.selectors import (
    completeness,
    find_skill,
    has_content,
    section_status,
)
from careercatalyst.store.transition import transition


class TestCompleteness:
    def test_empty_is_zero(self, empty_document):
        """An empty document is 0% complete."""
        assert completeness(empty_document) == 0

    def test_full_is_hundred(self, populated_document):
        """A document with every section is 100% complete."""
        assert completeness(populated_document) == 100

    def test_each_section_is_twenty_percent(self, empty_document, sample_education):
        """Each populated section adds 20%."""
        doc = transition(empty_document, AddEducation(entry=sample_education))
        assert completeness(doc) == 20
        doc = transition(doc, AddSkill(skill="Python"))
        assert completeness(doc) == 40

    def test_personal_info_needs_full_name(self, empty_document):
        """Personal info counts only once a name is set."""
        doc = transition(
            empty_document,
            SetPersonalInfo(info=PersonalInfo(email="a@b.co", phone="123")),
        )
        assert completeness(doc) == 0
        doc = transition(doc, SetPersonalInfo(info=PersonalInfo(full_name="Jane")))
        assert completeness(doc) == 20

    def test_pure(self, populated_document):
        """Completeness depends only on the document."""
        assert completeness(populated_document) == completeness(populated_document)

    def test_monotonic_under_additions(
        self, empty_document, sample_personal_info, sample_education,
        sample_experience, sample_project,
    ):
        """Adding content never lowers completeness."""
        actions = [
            AddSkill(skill="Python"),
            AddSkill(skill="python"),
            AddProject(entry=sample_project),
            AddEducation(entry=sample_education),
            AddEducation(entry=sample_education),
            SetPersonalInfo(info=sample_personal_info),
            AddExperience(entry=sample_experience),
        ]
        doc = empty_document
        previous = completeness(doc)
        for action in actions:
            doc = transition(doc, action)
            current = completeness(doc)
            assert current >= previous
            previous = current
        assert previous == 100

    @pytest.mark.parametrize("sections,expected", [(0, 0), (1, 20), (3, 60), (5, 100)])
    def test_result_in_range(self, sections, expected):
        """Completeness scales with populated sections."""
        fields = {
            "education": [{"school": "s", "degree": "d", "start_year": 2000}],
            "experience": [{"company": "c", "title": "t"}],
            "skills": ["x"],
            "projects": [{"name": "p"}],
            "personal_info": {"full_name": "n"},
        }
        doc = CVDocument(**dict(list(fields.items())[:sections]))
        assert completeness(doc) == expected


class TestSectionStatus:
    def test_order_and_flags(self, empty_document, sample_project):
        """Section flags come in display order."""
        doc = transition(empty_document, AddProject(entry=sample_project))
        status = section_status(doc)
        assert list(status) == ["personal_info", "education", "experience", "skills", "projects"]
        assert status["projects"] is True
        assert status["skills"] is False


class TestHasContent:
    def test_empty(self, empty_document):
        """An empty document has no content."""
        assert has_content(empty_document) is False

    def test_any_section_counts(self, empty_document):
        """A single populated section counts as content."""
        assert has_content(transition(empty_document, AddSkill(skill="Go"))) is True


class TestFindSkill:
    def test_case_insensitive(self, populated_document):
        """Skills are found regardless of case."""
        assert find_skill(populated_document, "DOCKER") == 1
        assert find_skill(populated_document, "python") == 0

    def test_missing(self, populated_document):
        """A missing skill returns None."""
        assert find_skill(populated_document, "Rust") is None

    def test_lowercase_not_casefold(self):
        """Matching uses lower(), so "ß" and "SS" differ."""
        doc = CVDocument(skills=("Straße",))
        assert find_skill(doc, "STRAßE") == 0
        assert find_skill(doc, "STRASSE") is None
