"""Exceptions raised outside the document store core.

The transition function and the dispatcher never raise; these cover the
surfaces around them (action scripts and export).
"""

from __future__ import annotations


class CareerCatalystError(Exception):
    """Base class for all careercatalyst errors."""


class ActionParseError(CareerCatalystError, ValueError):
    """An action mapping or action script could not be turned into actions."""


class ExportError(CareerCatalystError):
    """Rendering or writing the exported PDF failed."""


class ExportInProgressError(ExportError):
    """An export was requested while another one is still running."""


class NothingToExportError(ExportError):
    """The document has no content to export."""
