"""Action vocabulary: the only requests that can change a CV document.

Each action is a frozen model tagged by a literal ``kind``. Anything else that
reaches the store is treated as an unrecognized action and ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from careercatalyst.exceptions import ActionParseError
from careercatalyst.models.document import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)


class ActionKind(str, Enum):
    SET_PERSONAL_INFO = "SET_PERSONAL_INFO"
    ADD_EDUCATION = "ADD_EDUCATION"
    REMOVE_EDUCATION = "REMOVE_EDUCATION"
    UPDATE_EDUCATION = "UPDATE_EDUCATION"
    ADD_EXPERIENCE = "ADD_EXPERIENCE"
    REMOVE_EXPERIENCE = "REMOVE_EXPERIENCE"
    UPDATE_EXPERIENCE = "UPDATE_EXPERIENCE"
    ADD_SKILL = "ADD_SKILL"
    REMOVE_SKILL = "REMOVE_SKILL"
    ADD_PROJECT = "ADD_PROJECT"
    REMOVE_PROJECT = "REMOVE_PROJECT"
    UPDATE_PROJECT = "UPDATE_PROJECT"


class _ActionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping form, the inverse of :func:`parse_action`."""
        return self.model_dump(mode="json")


class SetPersonalInfo(_ActionBase):
    kind: Literal["SET_PERSONAL_INFO"] = "SET_PERSONAL_INFO"
    info: PersonalInfo


class AddEducation(_ActionBase):
    kind: Literal["ADD_EDUCATION"] = "ADD_EDUCATION"
    entry: EducationEntry


class RemoveEducation(_ActionBase):
    kind: Literal["REMOVE_EDUCATION"] = "REMOVE_EDUCATION"
    index: int


class UpdateEducation(_ActionBase):
    kind: Literal["UPDATE_EDUCATION"] = "UPDATE_EDUCATION"
    index: int
    data: EducationEntry


class AddExperience(_ActionBase):
    kind: Literal["ADD_EXPERIENCE"] = "ADD_EXPERIENCE"
    entry: ExperienceEntry


class RemoveExperience(_ActionBase):
    kind: Literal["REMOVE_EXPERIENCE"] = "REMOVE_EXPERIENCE"
    index: int


class UpdateExperience(_ActionBase):
    kind: Literal["UPDATE_EXPERIENCE"] = "UPDATE_EXPERIENCE"
    index: int
    data: ExperienceEntry


class AddSkill(_ActionBase):
    kind: Literal["ADD_SKILL"] = "ADD_SKILL"
    skill: str


class RemoveSkill(_ActionBase):
    kind: Literal["REMOVE_SKILL"] = "REMOVE_SKILL"
    index: int


class AddProject(_ActionBase):
    kind: Literal["ADD_PROJECT"] = "ADD_PROJECT"
    entry: ProjectEntry


class RemoveProject(_ActionBase):
    kind: Literal["REMOVE_PROJECT"] = "REMOVE_PROJECT"
    index: int


class UpdateProject(_ActionBase):
    kind: Literal["UPDATE_PROJECT"] = "UPDATE_PROJECT"
    index: int
    data: ProjectEntry


class UnrecognizedAction(_ActionBase):
    """An action-shaped value whose kind is outside the vocabulary."""

    kind: str
    payload: Any = None


Action = Union[
    SetPersonalInfo,
    AddEducation,
    RemoveEducation,
    UpdateEducation,
    AddExperience,
    RemoveExperience,
    UpdateExperience,
    AddSkill,
    RemoveSkill,
    AddProject,
    RemoveProject,
    UpdateProject,
]

ACTION_TYPES: dict[str, type[_ActionBase]] = {
    ActionKind.SET_PERSONAL_INFO.value: SetPersonalInfo,
    ActionKind.ADD_EDUCATION.value: AddEducation,
    ActionKind.REMOVE_EDUCATION.value: RemoveEducation,
    ActionKind.UPDATE_EDUCATION.value: UpdateEducation,
    ActionKind.ADD_EXPERIENCE.value: AddExperience,
    ActionKind.REMOVE_EXPERIENCE.value: RemoveExperience,
    ActionKind.UPDATE_EXPERIENCE.value: UpdateExperience,
    ActionKind.ADD_SKILL.value: AddSkill,
    ActionKind.REMOVE_SKILL.value: RemoveSkill,
    ActionKind.ADD_PROJECT.value: AddProject,
    ActionKind.REMOVE_PROJECT.value: RemoveProject,
    ActionKind.UPDATE_PROJECT.value: UpdateProject,
}


def parse_action(data: Mapping[str, Any]) -> Action | UnrecognizedAction:
    """Build a typed action from a ``{"kind": ..., **fields}`` mapping.

    Unknown kinds come back as :class:`UnrecognizedAction` so the store can
    log and ignore them. A known kind with a bad payload raises
    :class:`ActionParseError`.
    """
    if not isinstance(data, Mapping) or "kind" not in data:
        raise ActionParseError(f"Action must be a mapping with a 'kind' key: {data!r}")

    kind = data["kind"]
    action_type = ACTION_TYPES.get(kind) if isinstance(kind, str) else None
    if action_type is None:
        fields = {k: v for k, v in data.items() if k != "kind"}
        return UnrecognizedAction(kind=str(kind), payload=fields or None)

    try:
        return action_type.model_validate(dict(data))
    except ValidationError as e:
        raise ActionParseError(f"Invalid payload for {kind}: {e}") from e
