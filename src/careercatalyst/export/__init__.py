"""Preview and PDF export for CV documents."""
from careercatalyst.export.exporter import ExportResult, PDFExporter, export_filename
from careercatalyst.export.markdown_builder import build_markdown
from careercatalyst.export.pdf_renderer import (
    AVAILABLE_THEMES,
    render_html_preview,
    render_pdf,
)

__all__ = [
    "AVAILABLE_THEMES",
    "ExportResult",
    "PDFExporter",
    "build_markdown",
    "export_filename",
    "render_html_preview",
    "render_pdf",
]
