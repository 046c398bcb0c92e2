"""Shared test fixtures for notebook-ux-review tests."""

from __future__ import annotations

from pathlib import Path

import nbformat
import pytest
from notebooks import build_nb

from notebook_ux_review.models import Notebook


@pytest.fixture
def well_structured_nb() -> nbformat.NotebookNode:
    """A notebook that satisfies every guideline."""
    return build_nb(
        (
            "markdown",
            "# Sales Forecast Walkthrough\n\n"
            "This notebook demonstrates how to forecast monthly sales.",
        ),
        (
            "markdown",
            "## Setup\n\nInstall the dependencies with `pip install pandas`.",
        ),
        ("code", "# Import libraries\nimport pandas as pd"),
        ("markdown", "## Load the sales data from the configured path"),
        (
            "code",
            "# Read the configured input file\n"
            "df = pd.read_csv(DATA_PATH)\n"
            "# Show the first rows\n"
            "df.head()",
        ),
        (
            "markdown",
            "## Clean the data\n\nExpected output: a table without nulls.",
        ),
        (
            "code",
            "# Drop rows with missing values\n"
            "try:\n"
            "    df = df.dropna()\n"
            "except KeyError:\n"
            "    raise",
        ),
        ("markdown", "## Summary\n\nNext steps: tune the forecasting model."),
    )


@pytest.fixture
def well_structured(well_structured_nb: nbformat.NotebookNode) -> Notebook:
    return Notebook.model_validate(well_structured_nb)


@pytest.fixture
def notebook_file(tmp_path: Path, well_structured_nb: nbformat.NotebookNode) -> Path:
    """Write the well-structured notebook to disk and return its path."""
    path = tmp_path / "forecast.ipynb"
    nbformat.write(well_structured_nb, str(path))
    return path
