"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from resume_formatter.config import load_config
from resume_formatter.exceptions import ResumeFormatterError
from resume_formatter.export.exporter import ExportFormat, artifact_name, export
from resume_formatter.models.document import DocumentKind, TemplateId
from resume_formatter.parsers.resume_parser import parse_resume
from resume_formatter.pipeline.document_builder import build_document
from resume_formatter.templates.styles import list_templates

app = typer.Typer(
    name="resume-formatter",
    help="Turn plain-text resumes and cover letters into styled DOCX and PDF files",
    no_args_is_help=True,
)
console = Console()


class FormatChoice(str, Enum):
    DOCX = "docx"
    PDF = "pdf"
    ALL = "all"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_input(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Input file not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    try:
        return parse_resume(path)
    except ResumeFormatterError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)


@app.command("export")
def export_command(
    input_file: Path = typer.Argument(help="Resume or cover letter text (.txt, .md, .docx)"),
    kind: DocumentKind = typer.Option(DocumentKind.RESUME, "--kind", "-k", help="Document kind"),
    template: TemplateId = typer.Option(None, "--template", "-t", help="Visual template"),
    fmt: FormatChoice = typer.Option(None, "--format", "-f", help="Output format"),
    output_dir: Path = typer.Option(None, "--output-dir", "-o", help="Directory for output files"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Export a document as DOCX and/or PDF."""
    _setup_logging(verbose)
    try:
        config = load_config(config_path)
    except (TypeError, ValueError) as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    text = _read_input(input_file)
    template = template or TemplateId(config.export.default_template)
    if fmt is None:
        formats = [ExportFormat(f) for f in config.export.formats]
    elif fmt is FormatChoice.ALL:
        formats = list(ExportFormat)
    else:
        formats = [ExportFormat(fmt.value)]
    out_dir = output_dir or config.export.resolved_output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    failed = False
    for export_format in formats:
        target = out_dir / artifact_name(kind, template, export_format)
        try:
            data = export(text, kind, template, export_format, geometry=config.page)
        except ResumeFormatterError as exc:
            console.print(f"[red]{export_format.value.upper()} export failed: {escape(str(exc))}[/red]")
            failed = True
            continue
        target.write_bytes(data)
        console.print(f"[green]Saved {export_format.value.upper()}: {escape(str(target))}[/green]")

    if failed:
        raise typer.Exit(1)


@app.command()
def blocks(
    input_file: Path = typer.Argument(help="Resume or cover letter text (.txt, .md, .docx)"),
    kind: DocumentKind = typer.Option(DocumentKind.RESUME, "--kind", "-k", help="Document kind"),
    template: TemplateId = typer.Option(TemplateId.MODERN, "--template", "-t", help="Visual template"),
) -> None:
    """Show how a document is split into styled blocks."""
    text = _read_input(input_file)

    table = Table(title=f"{kind.value} / {template.value}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Block", no_wrap=True)
    table.add_column("Text")
    table.add_column("Size", justify="right")
    table.add_column("Color")
    for i, block in enumerate(build_document(text, kind, template), start=1):
        table.add_row(
            str(i),
            block.kind.value,
            escape(block.display_text),
            f"{block.font_size:g}",
            block.color or "",
        )
    console.print(table)


@app.command()
def templates() -> None:
    """List the available export templates."""
    for meta in list_templates():
        console.print(f"  [bold]{meta.id}[/bold]: {meta.name} ({meta.tag})")
        console.print(f"    [dim]{escape(meta.description)}[/dim]")


if __name__ == "__main__":
    app()
