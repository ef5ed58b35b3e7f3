"""Centralized CV document store."""

from careercatalyst.store.dispatcher import CVStore
from careercatalyst.store.selectors import (
    completeness,
    find_skill,
    has_content,
    section_status,
)
from careercatalyst.store.transition import transition

__all__ = [
    "CVStore",
    "completeness",
    "find_skill",
    "has_content",
    "section_status",
    "transition",
]
