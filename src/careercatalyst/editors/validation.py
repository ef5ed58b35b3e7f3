"""Field checks run by the section editors before they dispatch.

Each function returns ``{field_name: message}``; an empty dict means valid.
"""

from __future__ import annotations

import re
from datetime import date

from careercatalyst.models.document import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[\d\s\-()+]+$")

MIN_YEAR = 1950
MAX_SUMMARY_LENGTH = 500
MAX_PROJECT_NAME_LENGTH = 50
MAX_PROJECT_DESCRIPTION_LENGTH = 200


def validate_personal_info(info: PersonalInfo) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not info.full_name.strip():
        errors["full_name"] = "Name is required"
    if info.email and not EMAIL_RE.match(info.email):
        errors["email"] = "Please enter a valid email address"
    if info.phone and not PHONE_RE.match(info.phone):
        errors["phone"] = "Please enter a valid phone number"
    if len(info.summary) > MAX_SUMMARY_LENGTH:
        errors["summary"] = f"Summary should be less than {MAX_SUMMARY_LENGTH} characters"
    return errors


def validate_education(entry: EducationEntry) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not entry.school.strip():
        errors["school"] = "School is required"
    if not entry.degree.strip():
        errors["degree"] = "Degree is required"
    return errors


def validate_experience(
    entry: ExperienceEntry,
    current_year: int | None = None,
) -> dict[str, str]:
    """Company and title are required; years must be plausible and ordered."""
    if current_year is None:
        current_year = date.today().year

    errors: dict[str, str] = {}
    if not entry.company.strip():
        errors["company"] = "Company name is required"
    if not entry.title.strip():
        errors["title"] = "Job title is required"

    if entry.start_year is not None and not MIN_YEAR <= entry.start_year <= current_year:
        errors["start_year"] = f"Must be between {MIN_YEAR} and {current_year}"
    if entry.end_year is not None and not MIN_YEAR <= entry.end_year <= current_year + 10:
        errors["end_year"] = f"Must be between {MIN_YEAR} and {current_year + 10}"
    if (
        entry.start_year is not None
        and entry.end_year is not None
        and entry.start_year > entry.end_year
    ):
        errors["end_year"] = "End year must be after start year"
    return errors


def validate_project(entry: ProjectEntry) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not entry.name.strip():
        errors["name"] = "Project name is required"
    elif len(entry.name) > MAX_PROJECT_NAME_LENGTH:
        errors["name"] = f"Project name must be less than {MAX_PROJECT_NAME_LENGTH} characters"
    if len(entry.description) > MAX_PROJECT_DESCRIPTION_LENGTH:
        errors["description"] = (
            f"Description must be less than {MAX_PROJECT_DESCRIPTION_LENGTH} characters"
        )
    return errors
