"""Guideline evaluators: one pure function per UX guideline.

Each evaluator takes the whole notebook and returns an :class:`Evaluation`
(status, suggestion and the set of cell indices behind the verdict).
Evaluators never mutate the notebook and never raise on a well-formed one,
including notebooks without any cells.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from notebook_ux_review.guidelines import (
    CLEAR_HEADER,
    CODE_COMMENTING,
    CONCISE_CELLS,
    END_WRAP_UP_HANDOFF,
    GOAL_OBJECTIVE_PRESENT,
    HANDLE_ERRORS_OUTPUTS,
    HARDCODING_AVOIDED,
    SECTION_HEADERS_MARKDOWN,
    SETUP_PREREQUISITES,
)
from notebook_ux_review.models import Evaluation, Notebook, ReviewStatus

Evaluator = Callable[[Notebook], Evaluation]

# ---------------------------------------------------------------------------
# Keyword tables and thresholds
# ---------------------------------------------------------------------------

MAX_HEADER_WORDS = 15

GOAL_KEYWORDS: tuple[str, ...] = (
    "goal",
    "objective",
    "purpose",
    "overview",
    "this notebook",
    "aims to",
    "demonstrates",
    "summary of",
)
GOAL_MARKDOWN_CELLS = 3

SETUP_KEYWORDS: tuple[str, ...] = (
    "install",
    "setup",
    "prerequisites",
    "requirements",
    "pip install",
    "conda install",
    "environment",
    "dependencies",
    "clone",
    "download",
    "configure",
)

MIN_SECTION_MARKDOWN_LENGTH = 15
SECTION_PASS_RATIO = 0.8
SECTION_PARTIAL_RATIO = 0.5

ERROR_OUTPUT_KEYWORDS: tuple[str, ...] = (
    "expected output",
    "common errors",
    "troubleshoot",
    "if you see",
    "output format",
    "note on errors",
    "potential issues",
)
ERROR_HANDLING_TOKENS: tuple[str, ...] = (
    "try:",
    "except ",
    "raise ",
    'if __name__ == "__main__":',
    "console.error",
    "throw new Error",
)

_PATH_LITERAL_RE = re.compile(
    r"""["']"""
    r"""(?:[a-zA-Z]:(?:\\/|/)"""
    r"""|(?:\./|\.\./|/)?[a-zA-Z0-9_\-./]+"""
    r"""\.(?:csv|txt|json|yml|yaml|png|jpg|jpeg|gif|md|ipynb|hdf5|pkl))"""
    r"""["']"""
)
# A literal directly on the right-hand side of ``name = `` is treated as
# configuration, not as a hardcoded path.
_ASSIGNMENT_TAIL_RE = re.compile(r"[a-zA-Z0-9_]\s*=\s*\Z")
HARDCODING_FAIL_COUNT = 3

MAX_CELL_LINES = 40
CONCISE_PARTIAL_RATIO = 0.2

MIN_COMMENT_RATIO = 0.15
COMMENTING_PARTIAL_RATIO = 0.3

CLOSING_KEYWORDS: tuple[str, ...] = (
    "summary",
    "conclusion",
    "next steps",
    "handoff",
    "to proceed",
    "in summary",
    "what next",
    "final thoughts",
)
CLOSING_CELLS = 4


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _is_comment(line: str, prefixes: tuple[str, ...] = ("#",)) -> bool:
    return line.strip().startswith(prefixes)


def contains_path_literal(code: str) -> bool:
    """Return True if *code* contains a quoted file path outside an assignment.

    A candidate literal is skipped when the text before its opening quote
    ends in ``identifier =``; the search then resumes one character later,
    so a later literal in the same cell can still match.
    """
    pos = 0
    while True:
        match = _PATH_LITERAL_RE.search(code, pos)
        if match is None:
            return False
        if not _ASSIGNMENT_TAIL_RE.search(code, 0, match.start()):
            return True
        pos = match.start() + 1


# ---------------------------------------------------------------------------
# Evaluators
# ---------------------------------------------------------------------------


def evaluate_clear_header(notebook: Notebook) -> Evaluation:
    """The first cell should be markdown with a short H1 heading."""
    if not notebook.cells:
        return Evaluation(
            status=ReviewStatus.FAIL,
            suggestion=(
                "First cell is not a markdown cell or is empty. "
                "Consider adding a clear header."
            ),
        )

    relevant = frozenset({0})
    first = notebook.cells[0]
    if not first.is_markdown:
        return Evaluation(
            status=ReviewStatus.FAIL,
            suggestion=(
                "First cell is not a markdown cell or is empty. "
                "Consider adding a clear header."
            ),
            relevant_cells=relevant,
        )

    lines = (line.strip() for line in first.text.split("\n"))
    heading = next((line for line in lines if line.startswith("# ")), None)
    if heading is None:
        return Evaluation(
            status=ReviewStatus.FAIL,
            suggestion="No clear H1 header found in the first markdown cell.",
            relevant_cells=relevant,
        )

    header_text = heading[1:].strip()
    word_count = len(header_text.split())
    if header_text and word_count < MAX_HEADER_WORDS:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Header is clear and concise.",
            relevant_cells=relevant,
        )
    return Evaluation(
        status=ReviewStatus.PARTIALLY_MET,
        suggestion=(
            "Header might be too long or not succinct enough. "
            f"Aim for <{MAX_HEADER_WORDS} words."
        ),
        relevant_cells=relevant,
    )


def evaluate_goal_objective(notebook: Notebook) -> Evaluation:
    """The first few markdown cells should say what the notebook is for."""
    intro = [
        (i, cell) for i, cell in enumerate(notebook.cells) if cell.is_markdown
    ][:GOAL_MARKDOWN_CELLS]
    relevant = frozenset(i for i, _ in intro)
    combined = " ".join(cell.text for _, cell in intro).lower()

    if _contains_any(combined, GOAL_KEYWORDS):
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Goal/objective appears to be present.",
            relevant_cells=relevant,
        )
    return Evaluation(
        status=ReviewStatus.FAIL,
        suggestion=(
            "Consider adding a clear summary of the notebook's goal "
            "and why it exists."
        ),
        relevant_cells=relevant,
    )


def evaluate_setup_prerequisites(notebook: Notebook) -> Evaluation:
    """Some cell should mention installation, setup or dependencies."""
    relevant = frozenset(
        i
        for i, cell in enumerate(notebook.cells)
        if _contains_any(cell.text.lower(), SETUP_KEYWORDS)
    )
    if relevant:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Setup and pre-requisites appear to be mentioned.",
            relevant_cells=relevant,
        )
    return Evaluation(
        status=ReviewStatus.FAIL,
        suggestion=(
            "Missing explicit setup steps, required files, "
            "or environment assumptions."
        ),
    )


def evaluate_section_headers(notebook: Notebook) -> Evaluation:
    """Code cells should be introduced by an explanatory markdown cell."""
    cells = notebook.cells
    relevant: set[int] = set()
    total = 0
    documented = 0
    for i, cell in enumerate(cells):
        if not cell.is_code:
            continue
        total += 1
        if i == 0 or not cells[i - 1].is_markdown:
            continue
        if len(cells[i - 1].text.strip()) > MIN_SECTION_MARKDOWN_LENGTH:
            documented += 1
            relevant.update((i - 1, i))

    if total == 0:
        return Evaluation(
            status=ReviewStatus.NOT_APPLICABLE,
            suggestion="No code cells found in the notebook.",
        )

    ratio = documented / total
    if ratio >= SECTION_PASS_RATIO:
        status = ReviewStatus.PASS
        suggestion = "Most code sections are well-preceded by explanatory markdown."
    elif ratio >= SECTION_PARTIAL_RATIO:
        status = ReviewStatus.PARTIALLY_MET
        suggestion = (
            "Some code cells are missing preceding markdown explanations "
            f"({total - documented} out of {total} code cells)."
        )
    else:
        status = ReviewStatus.FAIL
        suggestion = (
            "Many code cells lack clear preceding markdown blocks "
            "explaining their purpose."
        )
    return Evaluation(
        status=status, suggestion=suggestion, relevant_cells=frozenset(relevant)
    )


def evaluate_errors_outputs(notebook: Notebook) -> Evaluation:
    """Expected outputs, common errors or error handling should be visible."""
    relevant: set[int] = set()
    for i, cell in enumerate(notebook.cells):
        if cell.is_markdown:
            if _contains_any(cell.text.lower(), ERROR_OUTPUT_KEYWORDS):
                relevant.add(i)
        elif cell.is_code:
            comments = " ".join(
                line for line in cell.source if _is_comment(line, ("#", "//"))
            ).lower()
            if _contains_any(comments, ERROR_OUTPUT_KEYWORDS):
                relevant.add(i)
            if _contains_any(cell.text, ERROR_HANDLING_TOKENS):
                relevant.add(i)

    if relevant:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Mentions of expected outputs or common errors found.",
            relevant_cells=frozenset(relevant),
        )
    return Evaluation(
        status=ReviewStatus.FAIL,
        suggestion=(
            "Consider highlighting expected outputs or common errors "
            "to improve usability."
        ),
    )


def evaluate_hardcoding(notebook: Notebook) -> Evaluation:
    """Code cells should not embed literal file paths."""
    relevant = frozenset(
        i
        for i, cell in enumerate(notebook.cells)
        if cell.is_code and contains_path_literal(cell.text)
    )
    count = len(relevant)
    if count == 0:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="No obvious hardcoded file paths found.",
        )
    if count < HARDCODING_FAIL_COUNT:
        return Evaluation(
            status=ReviewStatus.PARTIALLY_MET,
            suggestion=(
                f"A few potential hardcoded file paths detected ({count}). "
                "Consider using variables or config files."
            ),
            relevant_cells=relevant,
        )
    return Evaluation(
        status=ReviewStatus.FAIL,
        suggestion=(
            f"Multiple potential hardcoded file paths detected ({count}). "
            "Prefer variables or config for paths."
        ),
        relevant_cells=relevant,
    )


def evaluate_concise_cells(notebook: Notebook) -> Evaluation:
    """Code cells should stay short."""
    code = [(i, cell) for i, cell in enumerate(notebook.cells) if cell.is_code]
    if not code:
        return Evaluation(
            status=ReviewStatus.NOT_APPLICABLE, suggestion="No code cells found."
        )

    relevant = frozenset(i for i, cell in code if len(cell.source) > MAX_CELL_LINES)
    total, flagged = len(code), len(relevant)
    if flagged == 0:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Code cells appear concise and manageable.",
        )
    if flagged / total <= CONCISE_PARTIAL_RATIO:
        status = ReviewStatus.PARTIALLY_MET
        suggestion = (
            f"{flagged} out of {total} code cells are quite long. "
            "Consider breaking them into smaller chunks."
        )
    else:
        status = ReviewStatus.FAIL
        suggestion = (
            f"Many code cells ({flagged} out of {total}) are long and dense. "
            "Break logic into smaller, manageable chunks."
        )
    return Evaluation(status=status, suggestion=suggestion, relevant_cells=relevant)


def evaluate_code_commenting(notebook: Notebook) -> Evaluation:
    """Code cells should carry a minimum share of comment lines.

    Cells made only of comments or blank lines are not counted.
    """
    relevant: set[int] = set()
    total = 0
    for i, cell in enumerate(notebook.cells):
        if not cell.is_code:
            continue
        code_lines = sum(
            1 for line in cell.source if line.strip() and not _is_comment(line)
        )
        if code_lines == 0:
            continue
        total += 1
        comment_lines = sum(1 for line in cell.source if _is_comment(line))
        if comment_lines / code_lines < MIN_COMMENT_RATIO:
            relevant.add(i)

    if total == 0:
        return Evaluation(
            status=ReviewStatus.NOT_APPLICABLE, suggestion="No code cells found."
        )

    flagged = len(relevant)
    if flagged == 0:
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Code cells generally have good inline commenting.",
        )
    if flagged / total <= COMMENTING_PARTIAL_RATIO:
        status = ReviewStatus.PARTIALLY_MET
        suggestion = (
            f"Some code cells ({flagged} out of {total}) could use more "
            "inline comments for clarity."
        )
    else:
        status = ReviewStatus.FAIL
        suggestion = (
            f"Many code cells ({flagged} out of {total}) lack sufficient "
            "inline comments. Clarify non-obvious logic."
        )
    return Evaluation(
        status=status, suggestion=suggestion, relevant_cells=frozenset(relevant)
    )


def evaluate_wrap_up(notebook: Notebook) -> Evaluation:
    """The notebook should close with a summary or next steps."""
    start = max(len(notebook.cells) - CLOSING_CELLS, 0)
    closing = [
        (i, cell)
        for i, cell in enumerate(notebook.cells[start:], start=start)
        if cell.is_markdown
    ]
    relevant = frozenset(i for i, _ in closing)
    combined = " ".join(cell.text for _, cell in closing).lower()

    if _contains_any(combined, CLOSING_KEYWORDS):
        return Evaluation(
            status=ReviewStatus.PASS,
            suggestion="Notebook appears to have a clear wrap-up or next steps.",
            relevant_cells=relevant,
        )
    return Evaluation(
        status=ReviewStatus.FAIL,
        suggestion=(
            "Notebook might end abruptly. Consider adding a summary, "
            "next steps, or handoff guidance."
        ),
        relevant_cells=relevant,
    )


EVALUATORS: dict[str, Evaluator] = {
    CLEAR_HEADER: evaluate_clear_header,
    GOAL_OBJECTIVE_PRESENT: evaluate_goal_objective,
    SETUP_PREREQUISITES: evaluate_setup_prerequisites,
    SECTION_HEADERS_MARKDOWN: evaluate_section_headers,
    HANDLE_ERRORS_OUTPUTS: evaluate_errors_outputs,
    HARDCODING_AVOIDED: evaluate_hardcoding,
    CONCISE_CELLS: evaluate_concise_cells,
    CODE_COMMENTING: evaluate_code_commenting,
    END_WRAP_UP_HANDOFF: evaluate_wrap_up,
}
