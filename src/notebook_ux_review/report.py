"""Render review results as markdown, JSON or a rich table."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from notebook_ux_review.models import ReviewResult, ReviewStatus

_STATUS_STYLES: dict[ReviewStatus, str] = {
    ReviewStatus.PASS: "green",
    ReviewStatus.PARTIALLY_MET: "yellow",
    ReviewStatus.FAIL: "red",
    ReviewStatus.NOT_APPLICABLE: "dim",
}


def summarize(results: Sequence[ReviewResult]) -> dict[ReviewStatus, int]:
    """Count results per status (every status is present, possibly 0)."""
    counts = dict.fromkeys(ReviewStatus, 0)
    for result in results:
        counts[result.status] += 1
    return counts


def format_cells(cells: frozenset[int]) -> str:
    """Format relevant cell indices as a sorted, comma-separated list."""
    return ", ".join(str(i) for i in sorted(cells))


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_markdown(results: Sequence[ReviewResult], title: str) -> str:
    """Render a markdown report suitable for a CI job summary.

    Args:
        results: Review results, in registry order.
        title: Name shown in the heading, usually the notebook file name.
    """
    lines = [
        f"# Notebook UX Review Results for `{title}`",
        "",
        "| Guideline | Status | Suggestion |",
        "|---|---|---|",
    ]
    for r in results:
        guideline = (
            f"**{_escape_cell(r.name)}**<br/>"
            '<span style="font-size:0.9em;color:gray">'
            f"{_escape_cell(r.description)}</span>"
        )
        lines.append(
            f"| {guideline} | {r.status.icon} | {_escape_cell(r.suggestion)} |"
        )
    return "\n".join(lines) + "\n"


def render_json(results: Sequence[ReviewResult]) -> str:
    """Render results as a JSON array with sorted ``relevant_cells``."""
    payload = []
    for r in results:
        data = r.model_dump(mode="json")
        data["relevant_cells"] = sorted(r.relevant_cells)
        payload.append(data)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_table(results: Sequence[ReviewResult], title: str) -> Table:
    """Build a rich table for terminal output."""
    table = Table(title=f"Notebook UX Review: {title}", show_lines=True)
    table.add_column("Guideline", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Suggestion")
    table.add_column("Cells", justify="right")
    for r in results:
        style = _STATUS_STYLES[r.status]
        table.add_row(
            escape(r.name),
            f"[{style}]{r.status.icon} {r.status.value}[/{style}]",
            escape(r.suggestion),
            format_cells(r.relevant_cells) or "-",
        )
    return table
