"""Transition function: (document, action) -> next document.

This is the only code that produces a changed CVDocument. It never raises:
stale indices and duplicate skills leave the document untouched, and
unrecognized actions are logged and ignored. When nothing changes the input
document object itself is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

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
    UnrecognizedAction,
    UpdateEducation,
    UpdateExperience,
    UpdateProject,
)
from careercatalyst.models.document import CVDocument
from careercatalyst.store.selectors import find_skill

logger = logging.getLogger(__name__)


def _append(document: CVDocument, field: str, item: Any) -> CVDocument:
    items = getattr(document, field)
    return document.model_copy(update={field: (*items, item)})


def _remove(document: CVDocument, field: str, index: int) -> CVDocument:
    items = getattr(document, field)
    if not 0 <= index < len(items):
        return document
    return document.model_copy(update={field: items[:index] + items[index + 1:]})


def _replace(document: CVDocument, field: str, index: int, item: Any) -> CVDocument:
    items = getattr(document, field)
    if not 0 <= index < len(items) or items[index] == item:
        return document
    return document.model_copy(
        update={field: items[:index] + (item,) + items[index + 1:]}
    )


def _set_personal_info(document: CVDocument, action: SetPersonalInfo) -> CVDocument:
    if document.personal_info == action.info:
        return document
    return document.model_copy(update={"personal_info": action.info})


def _add_skill(document: CVDocument, action: AddSkill) -> CVDocument:
    if find_skill(document, action.skill) is not None:
        return document
    return _append(document, "skills", action.skill)


_HANDLERS: dict[type, Callable[[CVDocument, Any], CVDocument]] = {
    SetPersonalInfo: _set_personal_info,
    AddEducation: lambda d, a: _append(d, "education", a.entry),
    RemoveEducation: lambda d, a: _remove(d, "education", a.index),
    UpdateEducation: lambda d, a: _replace(d, "education", a.index, a.data),
    AddExperience: lambda d, a: _append(d, "experience", a.entry),
    RemoveExperience: lambda d, a: _remove(d, "experience", a.index),
    UpdateExperience: lambda d, a: _replace(d, "experience", a.index, a.data),
    AddSkill: _add_skill,
    RemoveSkill: lambda d, a: _remove(d, "skills", a.index),
    AddProject: lambda d, a: _append(d, "projects", a.entry),
    RemoveProject: lambda d, a: _remove(d, "projects", a.index),
    UpdateProject: lambda d, a: _replace(d, "projects", a.index, a.data),
}


def action_kind(action: object) -> str:
    """Best-effort name of an action's kind, for logging."""
    if isinstance(action, Mapping):
        return str(action.get("kind", "<no kind>"))
    return str(getattr(action, "kind", type(action).__name__))


def transition(document: CVDocument, action: object) -> CVDocument:
    """Apply ``action`` to ``document`` and return the resulting document."""
    handler = _HANDLERS.get(type(action))
    if handler is not None:
        return handler(document, action)
    if isinstance(action, UnrecognizedAction):
        logger.warning("Unknown action kind: %s", action.kind)
    else:
        # Raw mappings have to go through parse_action first
        logger.warning(
            "Unsupported action type %s (kind %s)",
            type(action).__name__,
            action_kind(action),
        )
    return document
