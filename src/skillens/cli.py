"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from skillens.config import load_config
from skillens.parsers.resume_parser import ExtractionError, parse_resume
from skillens.pipeline.analysis import analyze_text
from skillens.scoring.engine import score_breakdown
from skillens.scoring.rules import RULES

app = typer.Typer(
    name="skillens",
    help="Rule-based ATS-friendliness checker for resumes",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

NO_SUGGESTIONS_MESSAGE = "Your resume looks great! No major suggestions at this time."


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _score_color(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


@app.command()
def analyze(
    file: Path = typer.Argument(None, help="Resume file (PDF/DOCX/TXT/MD)"),
    text: str = typer.Option(None, "--text", help="Resume text to analyze instead of a file"),
    json_output: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-rule breakdown"),
) -> None:
    """Score a resume and list improvement suggestions."""
    _setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if file is None and text is None:
        console.print("[red]Provide a resume file or --text.[/red]")
        raise typer.Exit(1)

    if file is not None:
        if not file.exists():
            console.print(f"[red]Resume file not found: {file}[/red]")
            raise typer.Exit(1)
        try:
            text = parse_resume(file)
        except ExtractionError as exc:
            console.print(f"[red]Could not read resume: {escape(str(exc))}[/red]")
            raise typer.Exit(1)

    result = analyze_text(text)

    if json_output:
        typer.echo(result.model_dump_json())
        return

    color = _score_color(result.score)
    body = f"[bold {color}]ATS score: {result.score}/100[/bold {color}]\n\n"
    if result.suggestions:
        body += "\n".join(f"- {s}" for s in result.suggestions)
    else:
        body += NO_SUGGESTIONS_MESSAGE
    console.print(Panel(body, title="Resume analysis"))

    if verbose:
        table = Table(title="Rule breakdown")
        table.add_column("Category")
        table.add_column("Keywords")
        table.add_column("Matched")
        table.add_column("Points", justify="right")
        for outcome in score_breakdown(text):
            table.add_row(
                outcome.rule.category.value,
                outcome.rule.label,
                "yes" if outcome.matched else "no",
                str(outcome.contribution),
            )
        console.print(table)


@app.command()
def rules() -> None:
    """Show the scoring rule table."""
    table = Table(title="Scoring rules")
    table.add_column("Category", no_wrap=True)
    table.add_column("Keywords", no_wrap=True)
    table.add_column("Weight", justify="right", no_wrap=True)
    table.add_column("Suggestion")
    for rule in RULES:
        table.add_row(rule.category.value, rule.label, f"{rule.weight:+d}", rule.suggestion)
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    config = load_config()
    host = host or config.server.host
    port = port or config.server.port
    _setup_logging(logging.INFO)
    logger.info("Serving skillens API on http://%s:%d", host, port)
    uvicorn.run("skillens.api:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
