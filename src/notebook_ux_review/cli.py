"""CLI for notebook-ux-review using click."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from notebook_ux_review.guidelines import GUIDELINES
from notebook_ux_review.loader import NotebookLoader, NotebookLoadError
from notebook_ux_review.models import ReviewStatus
from notebook_ux_review.report import (
    build_table,
    render_json,
    render_markdown,
    summarize,
)
from notebook_ux_review.reviewer import review as review_notebook

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False)],
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(verbose: bool) -> None:
    """Notebook UX Review: check notebooks against UX guidelines."""
    _setup_logging(verbose)


@main.command()
@click.argument("notebook_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "markdown", "json"]),
    default="table",
    help="Report format.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the markdown or JSON report to this file.",
)
@click.option(
    "--strict", is_flag=True, help="Exit with status 1 if any guideline fails."
)
def review(notebook_path: str, fmt: str, output: str | None, strict: bool) -> None:
    """Review a notebook and print a report.

    NOTEBOOK_PATH is the .ipynb file to review.
    """
    if fmt == "table" and output is not None:
        msg = "--output requires --format markdown or json"
        raise click.UsageError(msg)

    nb_path = Path(notebook_path)
    try:
        notebook = NotebookLoader().load(nb_path)
    except NotebookLoadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    results = review_notebook(notebook)

    if fmt == "table":
        console.print(build_table(results, nb_path.name))
        counts = summarize(results)
        console.print(
            f"[green]Pass:[/green] {counts[ReviewStatus.PASS]}  "
            f"[yellow]Partial:[/yellow] {counts[ReviewStatus.PARTIALLY_MET]}  "
            f"[red]Fail:[/red] {counts[ReviewStatus.FAIL]}  "
            f"[dim]N/A:[/dim] {counts[ReviewStatus.NOT_APPLICABLE]}"
        )
    else:
        text = (
            render_markdown(results, nb_path.name)
            if fmt == "markdown"
            else render_json(results)
        )
        if output is not None:
            out_path = Path(output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text, encoding="utf-8")
            logger.info("Report written: %s", out_path)
            console.print(f"[green]Report:[/green] {out_path}")
        else:
            click.echo(text)

    if strict and any(r.status == ReviewStatus.FAIL for r in results):
        raise SystemExit(1)


@main.command()
def guidelines() -> None:
    """List the guidelines every notebook is reviewed against."""
    for i, guideline in enumerate(GUIDELINES, start=1):
        console.print(f"[bold]{i}. {guideline.name}[/bold] ({guideline.id})")
        console.print(f"   {guideline.description}")
