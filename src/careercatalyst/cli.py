"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from careercatalyst.config import AppConfig, load_config
from careercatalyst.exceptions import CareerCatalystError
from careercatalyst.export.exporter import PDFExporter
from careercatalyst.export.pdf_renderer import AVAILABLE_THEMES, render_html_preview
from careercatalyst.models.actions import ACTION_TYPES
from careercatalyst.parsers.action_script import load_action_script, replay
from careercatalyst.store.dispatcher import CVStore
from careercatalyst.store.selectors import SECTION_LABELS, section_status

app = typer.Typer(
    name="careercatalyst",
    help="Build a CV from editor actions, preview it and export it to PDF.",
    no_args_is_help=True,
)
console = Console()


def setup_logging(level: str) -> None:
    """Route all log records through a single rich handler on the root logger."""
    root = logging.getLogger()
    root.handlers = [RichHandler(console=Console(stderr=True), show_path=False)]
    root.setLevel(level.upper())


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    config: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    app_config = load_config(config)
    setup_logging("DEBUG" if verbose else app_config.logging.level)
    ctx.obj = app_config


def _load_store(script: Path) -> CVStore:
    if not script.exists():
        console.print(f"[red]Action script not found: {script}[/red]")
        raise typer.Exit(1)
    try:
        actions = load_action_script(script)
    except CareerCatalystError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    store = CVStore()
    replay(store, actions)
    return store


def _print_summary(store: CVStore) -> None:
    document = store.document
    counts = {
        "personal_info": 1 if document.personal_info.full_name else 0,
        "education": len(document.education),
        "experience": len(document.experience),
        "skills": len(document.skills),
        "projects": len(document.projects),
    }
    table = Table(title="Sections")
    table.add_column("Section")
    table.add_column("Entries", justify="right")
    table.add_column("Done", justify="center")
    for key, done in section_status(document).items():
        table.add_row(SECTION_LABELS[key], str(counts[key]), "[green]✓[/green]" if done else "-")
    console.print(table)

    percent = store.completeness
    color = "green" if percent >= 60 else "yellow"
    console.print(Panel(f"[bold {color}]{percent}% complete[/bold {color}]", title="Progress"))


@app.command()
def build(
    ctx: typer.Context,
    script: Path = typer.Argument(help="Action script (.yaml, .yml or .json)"),
    preview: Path = typer.Option(None, "--preview", help="Write the HTML preview to this path"),
    export: bool = typer.Option(False, "--export", help="Export the CV to PDF"),
    output_dir: Path = typer.Option(None, "--output-dir", "-o", help="PDF output directory"),
    theme: str = typer.Option(None, "--theme", "-t", help=f"One of: {', '.join(AVAILABLE_THEMES)}"),
) -> None:
    """Replay an action script and report, preview or export the result."""
    config: AppConfig = ctx.obj
    theme = theme or config.export.theme
    store = _load_store(script)
    _print_summary(store)

    if preview:
        preview.parent.mkdir(parents=True, exist_ok=True)
        preview.write_text(render_html_preview(store.document, theme), encoding="utf-8")
        console.print(f"[green]HTML preview saved: {preview}[/green]")

    if export:
        exporter = PDFExporter(
            store,
            output_dir=output_dir or config.export.resolved_output_dir,
            theme=theme,
        )
        try:
            with console.status("Generating PDF..."):
                result = asyncio.run(exporter.export())
        except CareerCatalystError as e:
            console.print(f"[red]Sorry, PDF generation failed: {escape(str(e))}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]PDF saved: {result.path} ({result.size_bytes} bytes)[/green]")


@app.command()
def completeness(
    script: Path = typer.Argument(help="Action script (.yaml, .yml or .json)"),
) -> None:
    """Print how complete the CV built by a script is, in percent."""
    store = _load_store(script)
    console.print(f"{store.completeness}%")


@app.command()
def preview(
    ctx: typer.Context,
    script: Path = typer.Argument(help="Action script (.yaml, .yml or .json)"),
    theme: str = typer.Option(None, "--theme", "-t", help=f"One of: {', '.join(AVAILABLE_THEMES)}"),
) -> None:
    """Render the CV to HTML next to the script and open it in a browser."""
    config: AppConfig = ctx.obj
    store = _load_store(script)
    html_path = script.with_suffix(".html")
    html_path.write_text(
        render_html_preview(store.document, theme or config.export.theme),
        encoding="utf-8",
    )
    console.print(f"[green]HTML saved: {html_path}[/green]")
    webbrowser.open(html_path.resolve().as_uri())


@app.command()
def actions() -> None:
    """List the action kinds a script may contain."""
    for kind, action_type in ACTION_TYPES.items():
        fields = [name for name in action_type.model_fields if name != "kind"]
        console.print(f"  [bold]{kind}[/bold]: {', '.join(fields)}")


if __name__ == "__main__":
    app()
