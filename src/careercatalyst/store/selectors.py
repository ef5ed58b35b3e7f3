"""Pure, UI-facing summaries computed from a CV document."""

from __future__ import annotations

from careercatalyst.models.document import CVDocument

SECTION_LABELS: dict[str, str] = {
    "personal_info": "Personal",
    "education": "Education",
    "experience": "Experience",
    "skills": "Skills",
    "projects": "Projects",
}


def section_status(document: CVDocument) -> dict[str, bool]:
    """Populated flag per section, in display order.

    Personal info counts as populated once a full name is present.
    """
    return {
        "personal_info": bool(document.personal_info.full_name),
        "education": bool(document.education),
        "experience": bool(document.experience),
        "skills": bool(document.skills),
        "projects": bool(document.projects),
    }


def completeness(document: CVDocument) -> int:
    """Percentage (0-100) of the five sections that are populated."""
    status = section_status(document)
    return round(sum(status.values()) / len(status) * 100)


def has_content(document: CVDocument) -> bool:
    return any(section_status(document).values())


def find_skill(document: CVDocument, skill: str) -> int | None:
    """Position of ``skill`` in the document, compared case-insensitively."""
    needle = skill.lower()
    for idx, existing in enumerate(document.skills):
        if existing.lower() == needle:
            return idx
    return None
