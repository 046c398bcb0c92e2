"""Notebook UX Review: guideline checks for Jupyter notebooks."""

__version__ = "0.1.0"

from notebook_ux_review.guidelines import GUIDELINES
from notebook_ux_review.loader import NotebookLoader, NotebookLoadError
from notebook_ux_review.models import (
    CellType,
    GuidelineDescriptor,
    Notebook,
    NotebookCell,
    ReviewResult,
    ReviewStatus,
)
from notebook_ux_review.reviewer import NotebookReviewer, review

__all__ = [
    "GUIDELINES",
    "CellType",
    "GuidelineDescriptor",
    "Notebook",
    "NotebookCell",
    "NotebookLoadError",
    "NotebookLoader",
    "NotebookReviewer",
    "ReviewResult",
    "ReviewStatus",
    "review",
]
