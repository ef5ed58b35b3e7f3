"""Document and action models for the CV store."""

from careercatalyst.models.actions import (
    Action,
    ActionKind,
    AddEducation,
    AddExperience,
    AddProject,
    AddSkill,
    RemoveEducation,
    RemoveExperience,
    RemoveProject,
    RemoveSkill,
    SetPersonalInfo,
    UnrecognizedAction,
    UpdateEducation,
    UpdateExperience,
    UpdateProject,
    parse_action,
)
from careercatalyst.models.document import (
    CVDocument,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)

__all__ = [
    "Action",
    "ActionKind",
    "AddEducation",
    "AddExperience",
    "AddProject",
    "AddSkill",
    "CVDocument",
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "ProjectEntry",
    "RemoveEducation",
    "RemoveExperience",
    "RemoveProject",
    "RemoveSkill",
    "SetPersonalInfo",
    "UnrecognizedAction",
    "UpdateEducation",
    "UpdateExperience",
    "UpdateProject",
    "parse_action",
]
