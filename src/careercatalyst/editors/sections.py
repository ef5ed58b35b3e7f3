"""Section editors: turn local user input into store actions.

Editors hold no document state of their own beyond an input draft; they read
the store for display and write to it only through ``store.dispatch``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from careercatalyst.config import EditorConfig
from careercatalyst.editors.debounce import DEFAULT_DELAY, Debouncer
from careercatalyst.editors.validation import (
    validate_education,
    validate_experience,
    validate_personal_info,
    validate_project,
)
from careercatalyst.models.actions import (
    AddEducation,
    AddExperience,
    AddProject,
    AddSkill,
    RemoveEducation,
    RemoveExperience,
    RemoveProject,
    RemoveSkill,
    SetPersonalInfo,
    UpdateEducation,
    UpdateExperience,
    UpdateProject,
)
from careercatalyst.models.document import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)
from careercatalyst.store.dispatcher import CVStore
from careercatalyst.store.selectors import find_skill

logger = logging.getLogger(__name__)

SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Programming": ("JavaScript", "Python", "Java", "C++", "Ruby"),
    "Web": ("React", "Angular", "Vue", "HTML5", "CSS3"),
    "Database": ("SQL", "MongoDB", "PostgreSQL", "Firebase"),
    "Tools": ("Git", "Docker", "AWS", "Jenkins", "Jira"),
    "Soft Skills": ("Leadership", "Communication", "Teamwork"),
}


class PersonalInfoEditor:
    """Buffers personal-info keystrokes and commits them after a quiet period.

    The whole record is dispatched at once (the store does not merge), and
    only when the draft passes validation.
    """

    def __init__(self, store: CVStore, delay: float = DEFAULT_DELAY):
        self.store = store
        self.draft: PersonalInfo = store.document.personal_info
        self.errors: dict[str, str] = {}
        self._debouncer = Debouncer(self._commit, delay)

    @classmethod
    def from_config(cls, store: CVStore, config: EditorConfig) -> PersonalInfoEditor:
        return cls(store, delay=config.debounce_seconds)

    @property
    def delay(self) -> float:
        return self._debouncer.delay

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def update_field(self, name: str, value: str) -> None:
        if name not in PersonalInfo.model_fields:
            raise ValueError(f"Unknown personal info field: {name}")
        self.draft = self.draft.model_copy(update={name: value})
        self.errors.pop(name, None)
        self._debouncer.schedule()

    def close(self) -> None:
        """Drop any uncommitted edit."""
        self._debouncer.cancel()

    def _commit(self) -> None:
        self.errors = validate_personal_info(self.draft)
        if self.errors:
            logger.debug("Personal info not committed: %s", ", ".join(self.errors))
            return
        self.store.dispatch(SetPersonalInfo(info=self.draft))


class _EntryEditor:
    """Add/update/remove for one positional collection."""

    add_action: type
    update_action: type
    remove_action: type
    validator: Callable[..., dict[str, str]]

    def __init__(self, store: CVStore):
        self.store = store

    def validate(self, entry) -> dict[str, str]:
        return type(self).validator(entry)

    def add(self, entry) -> dict[str, str]:
        """Dispatch ``entry`` if valid; returns the validation errors."""
        errors = self.validate(entry)
        if not errors:
            self.store.dispatch(self.add_action(entry=entry))
        return errors

    def update(self, index: int, entry) -> dict[str, str]:
        errors = self.validate(entry)
        if not errors:
            self.store.dispatch(self.update_action(index=index, data=entry))
        return errors

    def remove(self, index: int) -> None:
        self.store.dispatch(self.remove_action(index=index))


class EducationEditor(_EntryEditor):
    add_action = AddEducation
    update_action = UpdateEducation
    remove_action = RemoveEducation
    validator = validate_education

    @property
    def entries(self) -> tuple[EducationEntry, ...]:
        return self.store.document.education


class ExperienceEditor(_EntryEditor):
    add_action = AddExperience
    update_action = UpdateExperience
    remove_action = RemoveExperience
    validator = validate_experience

    @property
    def entries(self) -> tuple[ExperienceEntry, ...]:
        return self.store.document.experience


class ProjectsEditor(_EntryEditor):
    """Projects can be edited in place: pick one, then submit the new data."""

    add_action = AddProject
    update_action = UpdateProject
    remove_action = RemoveProject
    validator = validate_project

    def __init__(self, store: CVStore):
        super().__init__(store)
        self.edit_index: int | None = None

    @property
    def entries(self) -> tuple[ProjectEntry, ...]:
        return self.store.document.projects

    @property
    def is_editing(self) -> bool:
        return self.edit_index is not None

    def begin_edit(self, index: int) -> ProjectEntry | None:
        """Select the project at ``index`` for editing and return it."""
        if not 0 <= index < len(self.entries):
            return None
        self.edit_index = index
        return self.entries[index]

    def cancel_edit(self) -> None:
        self.edit_index = None

    def submit(self, entry: ProjectEntry) -> dict[str, str]:
        """Update the project being edited, or add a new one."""
        if self.edit_index is None:
            return self.add(entry)
        errors = self.update(self.edit_index, entry)
        if not errors:
            self.edit_index = None
        return errors

    def remove(self, index: int) -> None:
        before = len(self.entries)
        super().remove(index)
        if self.edit_index is None or len(self.entries) == before:
            return
        if self.edit_index == index:
            self.cancel_edit()
        elif self.edit_index > index:
            self.edit_index -= 1


class SkillsEditor:
    """Adds and removes skills, telling the user about blanks and duplicates.

    The store already ignores duplicates; the check here only exists to
    produce a message.
    """

    def __init__(self, store: CVStore):
        self.store = store

    @property
    def skills(self) -> tuple[str, ...]:
        return self.store.document.skills

    def add(self, text: str) -> str | None:
        """Dispatch the trimmed skill; returns an error message or None."""
        skill = text.strip()
        if not skill:
            return "Please enter a skill"
        if find_skill(self.store.document, skill) is not None:
            return f'"{skill}" is already in your skills list'
        self.store.dispatch(AddSkill(skill=skill))
        return None

    def add_suggested(self, category: str, skill: str) -> str | None:
        if skill not in SKILL_CATEGORIES.get(category, ()):
            return f'"{skill}" is not a suggestion for {category}'
        return self.add(skill)

    def remove(self, index: int) -> None:
        self.store.dispatch(RemoveSkill(index=index))


@dataclass
class SectionEditors:
    """One editor per CV section, all writing to the same store."""

    personal_info: PersonalInfoEditor
    education: EducationEditor
    experience: ExperienceEditor
    projects: ProjectsEditor
    skills: SkillsEditor

    @classmethod
    def create(cls, store: CVStore, config: EditorConfig | None = None) -> SectionEditors:
        """Build every editor; the personal info debounce comes from ``config``."""
        config = config or EditorConfig()
        return cls(
            personal_info=PersonalInfoEditor.from_config(store, config),
            education=EducationEditor(store),
            experience=ExperienceEditor(store),
            projects=ProjectsEditor(store),
            skills=SkillsEditor(store),
        )

    def close(self) -> None:
        self.personal_info.close()
