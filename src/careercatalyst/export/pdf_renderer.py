from __future__ import annotations

import logging
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from careercatalyst.export.markdown_builder import build_markdown
from careercatalyst.export.settings import AVAILABLE_THEMES, PAGE
from careercatalyst.models.document import CVDocument

logger = logging.getLogger(__name__)

CSS_THEMES_DIR = Path(__file__).parent / "css_themes"
BASE_TEMPLATE_DIR = Path(__file__).parent


def render_pdf(document: CVDocument, theme: str = "professional") -> bytes:
    """Render the CV document to PDF bytes."""
    html = render_html_preview(document, theme)
    return _html_to_pdf(html)


def render_html_preview(document: CVDocument, theme: str = "professional") -> str:
    """Render the CV document to a themed, printable HTML page."""
    if theme not in AVAILABLE_THEMES:
        logger.debug("Unknown theme %r, using professional", theme)
        theme = "professional"
    title = f"CV - {document.personal_info.full_name or 'Resume'}"
    return _md_to_styled_html(build_markdown(document), theme, title)


def _md_to_styled_html(md_text: str, theme: str, title: str) -> str:
    """Convert markdown to themed HTML."""
    html_body = markdown.markdown(md_text, extensions=["nl2br"])
    css_path = CSS_THEMES_DIR / f"{theme}.css"
    css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
    env = Environment(
        loader=FileSystemLoader(str(BASE_TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template("base.html")
    return template.render(
        title=title,
        page_css=Markup(PAGE.page_css),
        css=Markup(css),
        body=Markup(html_body),
    )


def _html_to_pdf(html: str) -> bytes:
    """Convert HTML string to PDF bytes using WeasyPrint, with fpdf2 fallback."""
    try:
        from weasyprint import HTML
        return HTML(string=html).write_pdf(jpeg_quality=PAGE.jpeg_quality, dpi=PAGE.dpi)
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from careercatalyst.export.pdf_fallback import html_to_pdf_fpdf2
        return html_to_pdf_fpdf2(html)
