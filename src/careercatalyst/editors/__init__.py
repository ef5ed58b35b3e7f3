"""Section editors that feed actions into the CV store."""

from careercatalyst.editors.debounce import Debouncer
from careercatalyst.editors.sections import (
    SKILL_CATEGORIES,
    EducationEditor,
    ExperienceEditor,
    PersonalInfoEditor,
    ProjectsEditor,
    SectionEditors,
    SkillsEditor,
)

__all__ = [
    "Debouncer",
    "EducationEditor",
    "ExperienceEditor",
    "PersonalInfoEditor",
    "ProjectsEditor",
    "SKILL_CATEGORIES",
    "SectionEditors",
    "SkillsEditor",
]
