"""
Prompt Marker CLI Application.

Provides a command-line interface for running the marking API and for
marking prompts locally without a session.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from prompt_marker.config import get_settings
from prompt_marker.content import build_task_config
from prompt_marker.marking import MarkingEngine
from prompt_marker.models import FullVerdict, Verdict
from prompt_marker.rubric import DEFAULT_RUBRIC, RubricValidator

# Create Typer app
app = typer.Typer(
    name="prompt-marker",
    help="Deterministic Role / Task / Context / Format prompt marker",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Run the marking API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "prompt_marker.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@app.command()
def mark(
    answer_file: Annotated[
        Optional[Path],
        typer.Argument(help="Path to a text file holding the prompt to mark"),
    ] = None,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="Prompt text to mark instead of a file"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the verdict as JSON"),
    ] = False,
) -> None:
    """
    Mark a prompt locally.

    Uses the same engine and word gate as the API.
    """
    if answer_file is None and text is None:
        console.print("[red]Error:[/red] Provide a file or --text")
        raise typer.Exit(1)

    if text is None:
        if not answer_file.exists():
            console.print(f"[red]Error:[/red] File not found: {answer_file}")
            raise typer.Exit(1)
        text = answer_file.read_text(encoding="utf-8")

    engine = MarkingEngine(get_settings())
    verdict = engine.mark(text)

    if as_json:
        console.print_json(json.dumps(verdict.to_wire(), ensure_ascii=False))
    else:
        _display_verdict(verdict)


@app.command()
def show_config() -> None:
    """Print the task metadata served at /api/config."""
    task = build_task_config(get_settings())

    console.print(Panel(task.question_text, title="Question"))
    console.print(Panel(task.template_text, title="Template"))
    console.print(f"[bold]Word gate:[/bold] {task.min_words_gate}")
    console.print(f"[bold]Target length:[/bold] {task.target_words} words")


@app.command()
def validate_rubric() -> None:
    """Validate the built-in pattern rubric and list its patterns."""
    is_valid, issues = RubricValidator().validate(DEFAULT_RUBRIC)

    table = Table(title=DEFAULT_RUBRIC.title)
    table.add_column("Dimension", style="cyan")
    table.add_column("Patterns")

    for spec in DEFAULT_RUBRIC.dimensions:
        table.add_row(spec.label, ", ".join(repr(p) for p in spec.patterns))

    console.print(table)

    if is_valid:
        console.print("\n[green]✓ Rubric is valid[/green]")
    else:
        console.print("\n[yellow]⚠ Validation issues found:[/yellow]")
        for issue in issues:
            console.print(f"  • {issue}")
        raise typer.Exit(1)


def _display_verdict(verdict: Verdict) -> None:
    """Display a verdict as panels and a table."""
    if not isinstance(verdict, FullVerdict):
        console.print(
            Panel(
                f"[yellow]{verdict.message}[/yellow]",
                title=f"Gated ({verdict.word_count} words)",
            )
        )
        return

    score_color = "green" if verdict.score >= 8 else "yellow" if verdict.score >= 6 else "red"
    console.print(
        Panel(
            f"[{score_color}][bold]{verdict.score} / 10[/bold][/{score_color}]\n{verdict.message}",
            title=f"Score ({verdict.word_count} words)",
        )
    )

    table = Table(title="Prompt Formula")
    table.add_column("Stage", style="cyan")
    table.add_column("Status")
    table.add_column("Detail")

    for row in verdict.grid:
        table.add_row(row.label, row.status, row.detail)

    console.print(table)
    console.print(Panel("\n".join(f"• {s}" for s in verdict.strengths), title="Strengths"))


if __name__ == "__main__":
    app()
