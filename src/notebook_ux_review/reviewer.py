"""Run every guideline evaluator over a notebook."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from notebook_ux_review.evaluators import EVALUATORS, Evaluator
from notebook_ux_review.guidelines import GUIDELINES
from notebook_ux_review.models import (
    Evaluation,
    GuidelineDescriptor,
    Notebook,
    ReviewResult,
    ReviewStatus,
)

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED_SUGGESTION = "Review logic not implemented for this guideline."


class NotebookReviewer:
    """Evaluates a notebook against the guideline registry."""

    def __init__(
        self,
        guidelines: Sequence[GuidelineDescriptor] = GUIDELINES,
        evaluators: Mapping[str, Evaluator] = EVALUATORS,
    ) -> None:
        self._guidelines = tuple(guidelines)
        self._evaluators = dict(evaluators)

    @property
    def guidelines(self) -> tuple[GuidelineDescriptor, ...]:
        return self._guidelines

    def review(self, notebook: Notebook) -> list[ReviewResult]:
        """Review a notebook.

        Every guideline is evaluated, in registry order, regardless of
        earlier verdicts.

        Args:
            notebook: A well-formed notebook; it is not modified.

        Returns:
            One result per guideline, in registry order.
        """
        logger.debug("Reviewing notebook with %d cells", len(notebook.cells))
        return [self._evaluate(guideline, notebook) for guideline in self._guidelines]

    def _evaluate(
        self, guideline: GuidelineDescriptor, notebook: Notebook
    ) -> ReviewResult:
        evaluator = self._evaluators.get(guideline.id)
        if evaluator is None:
            evaluation = Evaluation(
                status=ReviewStatus.NOT_APPLICABLE,
                suggestion=NOT_IMPLEMENTED_SUGGESTION,
            )
        else:
            evaluation = evaluator(notebook)

        cell_count = len(notebook.cells)
        in_range = frozenset(
            i for i in evaluation.relevant_cells if 0 <= i < cell_count
        )
        if in_range != evaluation.relevant_cells:
            logger.warning(
                "Dropping out-of-range cell indices for %s: %s",
                guideline.id,
                sorted(evaluation.relevant_cells - in_range),
            )
            evaluation = evaluation.model_copy(update={"relevant_cells": in_range})

        logger.debug(
            "%s: %s (%d relevant cells)",
            guideline.id,
            evaluation.status,
            len(evaluation.relevant_cells),
        )
        return ReviewResult.from_evaluation(guideline, evaluation)


def review(notebook: Notebook) -> list[ReviewResult]:
    """Review *notebook* against the fixed guideline set."""
    return NotebookReviewer().review(notebook)
