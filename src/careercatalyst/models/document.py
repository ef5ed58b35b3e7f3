"""Pydantic models for the in-progress CV document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PersonalInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    summary: str = ""


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    school: str
    degree: str
    start_year: int
    end_year: int | None = None  # None means "Present"


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    title: str
    start_year: int | None = None
    end_year: int | None = None
    description: str | None = None


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class CVDocument(BaseModel):
    """The whole CV being edited.

    Collections are tuples and every record is frozen, so a document handed
    out by the store is a read-only snapshot. Entries are addressed by their
    current position in each collection.
    """

    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: tuple[EducationEntry, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    skills: tuple[str, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()

    @classmethod
    def empty(cls) -> CVDocument:
        return cls()
