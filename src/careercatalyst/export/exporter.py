"""Asynchronous PDF export of the store's current document."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from careercatalyst.exceptions import (
    ExportError,
    ExportInProgressError,
    NothingToExportError,
)
from careercatalyst.export.pdf_renderer import render_pdf
from careercatalyst.models.document import CVDocument
from careercatalyst.store.dispatcher import CVStore
from careercatalyst.store.selectors import has_content

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    path: Path
    size_bytes: int
    exported_at: datetime


def export_filename(document: CVDocument, today: date | None = None) -> str:
    """``CV_<full name or "Resume">_<YYYY-MM-DD>.pdf``, dated in UTC."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    name = document.personal_info.full_name.strip() or "Resume"
    name = name.replace("/", "_").replace("\\", "_")
    return f"CV_{name}_{today.isoformat()}.pdf"


class PDFExporter:
    """Exports the current CV snapshot, one export at a time.

    A request made while an export is running is rejected with
    :class:`ExportInProgressError`; nothing is queued.
    """

    def __init__(
        self,
        store: CVStore,
        output_dir: str | Path = "./output",
        theme: str = "professional",
        renderer: Callable[[CVDocument, str], bytes] = render_pdf,
    ):
        self.store = store
        self.output_dir = Path(output_dir)
        self.theme = theme
        self.renderer = renderer
        self.last_export_time: datetime | None = None
        self._in_flight = False

    @property
    def is_exporting(self) -> bool:
        return self._in_flight

    async def export(self) -> ExportResult:
        if self._in_flight:
            raise ExportInProgressError("An export is already in progress")

        self._in_flight = True
        try:
            document = self.store.document
            if not has_content(document):
                raise NothingToExportError("The CV is empty; add some content before exporting")

            path = self.output_dir / export_filename(document)
            logger.info("Exporting CV to %s", path)
            try:
                pdf_bytes = await asyncio.to_thread(self.renderer, document, self.theme)
                await asyncio.to_thread(_write_file, path, pdf_bytes)
            except Exception as e:
                logger.exception("PDF generation failed")
                raise ExportError(f"PDF generation failed: {e}") from e

            self.last_export_time = datetime.now()
            logger.info("Exported %d bytes to %s", len(pdf_bytes), path)
            return ExportResult(
                path=path,
                size_bytes=len(pdf_bytes),
                exported_at=self.last_export_time,
            )
        finally:
            self._in_flight = False


def _write_file(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
