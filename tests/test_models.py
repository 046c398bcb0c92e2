"""Tests for notebook_ux_review.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from notebook_ux_review.models import (
    CellType,
    Evaluation,
    GuidelineDescriptor,
    Notebook,
    NotebookCell,
    ReviewResult,
    ReviewStatus,
    split_source,
)


class TestSplitSource:
    def test_empty(self) -> None:
        assert split_source("") == []

    def test_single_line(self) -> None:
        assert split_source("x = 1") == ["x = 1"]

    def test_keeps_terminators(self) -> None:
        assert split_source("a\nb\nc") == ["a\n", "b\n", "c"]

    def test_trailing_newline(self) -> None:
        assert split_source("a\nb\n") == ["a\n", "b\n"]

    def test_blank_lines_preserved(self) -> None:
        assert split_source("a\n\nb") == ["a\n", "\n", "b"]

    @pytest.mark.parametrize("text", ["", "x", "x\n", "a\n\n\nb\n", "\n"])
    def test_join_restores_text(self, text: str) -> None:
        assert "".join(split_source(text)) == text


class TestNotebookCell:
    def test_source_from_string(self) -> None:
        cell = NotebookCell(cell_type="code", source="x = 1\ny = 2")
        assert cell.source == ["x = 1\n", "y = 2"]
        assert cell.text == "x = 1\ny = 2"

    def test_source_from_lines(self) -> None:
        cell = NotebookCell(cell_type="markdown", source=["# Title\n", "Body"])
        assert cell.text == "# Title\nBody"

    def test_missing_fields_are_empty(self) -> None:
        cell = NotebookCell.model_validate({"cell_type": "code", "source": None})
        assert cell.source == []
        assert cell.outputs == []
        assert cell.text == ""

    def test_unknown_cell_type_tolerated(self) -> None:
        cell = NotebookCell(cell_type="heading", source="Title")
        assert not cell.is_code
        assert not cell.is_markdown

    def test_type_flags(self) -> None:
        assert NotebookCell(cell_type=CellType.CODE).is_code
        assert NotebookCell(cell_type="markdown").is_markdown

    def test_missing_cell_type_is_empty(self) -> None:
        cell = NotebookCell.model_validate({"source": "# Title"})
        assert cell.cell_type == ""
        assert not cell.is_code
        assert not cell.is_markdown

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NotebookCell.model_validate("x = 1")

    def test_outputs_parsed(self) -> None:
        cell = NotebookCell.model_validate(
            {
                "cell_type": "code",
                "source": "print('hi')",
                "outputs": [
                    {"output_type": "stream", "name": "stdout", "text": ["hi\n"]},
                    {
                        "output_type": "display_data",
                        "data": {"image/png": "iVBORw0KGgo="},
                        "metadata": {},
                    },
                ],
            }
        )
        assert len(cell.outputs) == 2
        assert cell.outputs[0].text == ["hi\n"]
        assert cell.outputs[1].data == {"image/png": "iVBORw0KGgo="}


class TestNotebook:
    def test_empty(self) -> None:
        assert Notebook(cells=[]).cells == []

    def test_extra_keys_ignored(self) -> None:
        nb = Notebook.model_validate(
            {"cells": [], "nbformat": 4, "nbformat_minor": 5, "metadata": {}}
        )
        assert nb.cells == []

    def test_cells_required(self) -> None:
        with pytest.raises(ValidationError):
            Notebook.model_validate({"metadata": {}})


class TestReviewStatus:
    def test_values(self) -> None:
        assert ReviewStatus.PASS == "pass"
        assert ReviewStatus.PARTIALLY_MET == "partially_met"
        assert ReviewStatus.FAIL == "fail"
        assert ReviewStatus.NOT_APPLICABLE == "not_applicable"

    def test_icons(self) -> None:
        assert ReviewStatus.PASS.icon == "✅"
        assert ReviewStatus.PARTIALLY_MET.icon == "\U0001f539"
        assert ReviewStatus.FAIL.icon == "❌"
        assert ReviewStatus.NOT_APPLICABLE.icon == "➖"


class TestReviewResult:
    def test_descriptor_is_frozen(self) -> None:
        descriptor = GuidelineDescriptor(id="a", name="A", description="desc")
        with pytest.raises(ValidationError):
            descriptor.name = "B"  # type: ignore[misc]

    def test_from_evaluation(self) -> None:
        descriptor = GuidelineDescriptor(id="a", name="A", description="desc")
        evaluation = Evaluation(
            status=ReviewStatus.PASS,
            suggestion="fine",
            relevant_cells=frozenset({2, 0}),
        )
        result = ReviewResult.from_evaluation(descriptor, evaluation)
        assert result.id == "a"
        assert result.name == "A"
        assert result.status == ReviewStatus.PASS
        assert result.relevant_cells == {0, 2}

    def test_relevant_cells_deduplicated(self) -> None:
        result = ReviewResult(
            id="a",
            name="A",
            description="d",
            status=ReviewStatus.FAIL,
            suggestion="s",
            relevant_cells=[1, 1, 3],  # type: ignore[arg-type]
        )
        assert result.relevant_cells == frozenset({1, 3})

    def test_json_roundtrip(self) -> None:
        result = ReviewResult(
            id="a",
            name="A",
            description="d",
            status=ReviewStatus.PARTIALLY_MET,
            suggestion="s",
            relevant_cells=frozenset({4, 1}),
        )
        restored = ReviewResult.model_validate_json(result.model_dump_json())
        assert restored == result
