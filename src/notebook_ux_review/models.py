"""Pydantic models for notebook UX review."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Document models
# ---------------------------------------------------------------------------


class CellType(StrEnum):
    """Notebook cell types."""

    CODE = "code"
    MARKDOWN = "markdown"
    RAW = "raw"


def split_source(text: str) -> list[str]:
    """Split cell text into lines that keep their ``\\n`` terminators.

    ``"".join(split_source(text)) == text`` always holds.
    """
    if not text:
        return []
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


class CellOutput(BaseModel):
    """A single execution output; carried for display, never analyzed."""

    model_config = ConfigDict(extra="allow")

    output_type: str | None = None
    name: str | None = None
    text: list[str] | str | None = None
    data: dict[str, object] | None = None


class NotebookCell(BaseModel):
    """A single notebook cell.

    ``cell_type`` is kept as a plain string so unknown or missing types are
    tolerated; compare it against :class:`CellType` members.
    """

    cell_type: str = ""
    source: list[str] = []
    outputs: list[CellOutput] = []

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return split_source(value)
        return value

    @field_validator("outputs", mode="before")
    @classmethod
    def _coerce_outputs(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def text(self) -> str:
        """Full cell text (lines joined without a separator)."""
        return "".join(self.source)

    @property
    def is_code(self) -> bool:
        return self.cell_type == CellType.CODE

    @property
    def is_markdown(self) -> bool:
        return self.cell_type == CellType.MARKDOWN


class Notebook(BaseModel):
    """Ordered sequence of cells; cell positions are their indices."""

    model_config = ConfigDict(extra="ignore")

    cells: list[NotebookCell]
    metadata: dict[str, object] = {}


# ---------------------------------------------------------------------------
# Review models
# ---------------------------------------------------------------------------


class ReviewStatus(StrEnum):
    """Verdict of a single guideline."""

    PASS = "pass"
    PARTIALLY_MET = "partially_met"
    FAIL = "fail"
    NOT_APPLICABLE = "not_applicable"

    @property
    def icon(self) -> str:
        """Icon used in rendered reports."""
        return _STATUS_ICONS[self]


_STATUS_ICONS: dict[ReviewStatus, str] = {
    ReviewStatus.PASS: "✅",
    ReviewStatus.PARTIALLY_MET: "\U0001f539",
    ReviewStatus.FAIL: "❌",
    ReviewStatus.NOT_APPLICABLE: "➖",
}


class GuidelineDescriptor(BaseModel):
    """Identity of one fixed UX guideline."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


class Evaluation(BaseModel):
    """Outcome of one evaluator, before it is attached to its guideline."""

    model_config = ConfigDict(frozen=True)

    status: ReviewStatus
    suggestion: str
    relevant_cells: frozenset[int] = frozenset()


class ReviewResult(GuidelineDescriptor):
    """Verdict for one guideline, with the cells responsible for it."""

    status: ReviewStatus
    suggestion: str
    relevant_cells: frozenset[int] = Field(default_factory=frozenset)

    @classmethod
    def from_evaluation(
        cls, guideline: GuidelineDescriptor, evaluation: Evaluation
    ) -> ReviewResult:
        """Attach an evaluator outcome to its guideline descriptor."""
        return cls(
            id=guideline.id,
            name=guideline.name,
            description=guideline.description,
            status=evaluation.status,
            suggestion=evaluation.suggestion,
            relevant_cells=evaluation.relevant_cells,
        )
