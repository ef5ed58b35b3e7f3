"""Render a CV document to section-ordered markdown for preview and export."""

from __future__ import annotations

import html

from careercatalyst.models.document import CVDocument
from careercatalyst.store.selectors import has_content

EMPTY_PLACEHOLDER = (
    "## Your CV is empty\n\n"
    "Fill out the form sections to see your CV preview here"
)


def _esc(text: str) -> str:
    return html.escape(text, quote=False)


def _year_range(start: int | None, end: int | None) -> str:
    if start is None:
        return "" if end is None else str(end)
    return f"{start} - {end if end is not None else 'Present'}"


def build_markdown(document: CVDocument) -> str:
    """Markdown for ``document``; an empty document yields a placeholder."""
    if not has_content(document):
        return EMPTY_PLACEHOLDER

    info = document.personal_info
    parts: list[str] = [f"# {_esc(info.full_name) or 'Your Name'}"]

    contact = [_esc(v) for v in (info.email, info.phone, info.address) if v]
    if contact:
        parts.append(" | ".join(contact))
    if info.summary:
        parts.append(f"*{_esc(info.summary)}*")

    if document.education:
        parts.append("## Education")
        for edu in document.education:
            parts.append(f"### {_esc(edu.school)}")
            parts.append(f"{_esc(edu.degree)} ({_year_range(edu.start_year, edu.end_year)})")

    if document.experience:
        parts.append("## Professional Experience")
        for exp in document.experience:
            years = _year_range(exp.start_year, exp.end_year)
            heading = f"### {_esc(exp.company)}"
            parts.append(f"{heading} ({years})" if years else heading)
            parts.append(f"**{_esc(exp.title)}**")
            if exp.description:
                parts.append(_esc(exp.description))

    if document.skills:
        parts.append("## Skills")
        parts.append("\n".join(f"- {_esc(skill)}" for skill in document.skills))

    if document.projects:
        parts.append("## Projects")
        for project in document.projects:
            parts.append(f"### {_esc(project.name)}")
            if project.description:
                parts.append(_esc(project.description))

    return "\n\n".join(parts) + "\n"
