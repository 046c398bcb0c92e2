"""Load .ipynb documents into the review document model."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import nbformat
from nbformat.reader import NotJSONError, parse_json
from pydantic import ValidationError

from notebook_ux_review.models import Notebook

logger = logging.getLogger(__name__)


class NotebookLoadError(ValueError):
    """Raised when a document cannot be turned into a reviewable notebook."""


class NotebookLoader:
    """Reads notebook JSON and rejects documents the reviewer cannot handle."""

    def load(self, notebook_path: str | Path) -> Notebook:
        """Load a notebook file.

        Args:
            notebook_path: Path to the .ipynb file.

        Returns:
            The parsed notebook.

        Raises:
            FileNotFoundError: If the file does not exist.
            NotebookLoadError: If the file is not a valid notebook.
        """
        nb_path = Path(notebook_path)
        if not nb_path.is_file():
            msg = f"Notebook not found: {nb_path}"
            raise FileNotFoundError(msg)

        logger.debug("Loading notebook: %s", nb_path)
        try:
            text = nb_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Notebook is not valid UTF-8: {nb_path} ({exc.reason})"
            raise NotebookLoadError(msg) from exc
        return self.loads(text)

    def loads(self, text: str) -> Notebook:
        """Parse notebook JSON from a string.

        Notebooks older than nbformat v4 are upgraded by nbformat. A
        document without an ``nbformat`` key is read as a bare v4 cell list.

        Raises:
            NotebookLoadError: If the text is not JSON, has no ``cells``
                array, or its cells do not validate.
        """
        try:
            raw = parse_json(text)
        except NotJSONError as exc:
            msg = f"Invalid notebook JSON: {exc}"
            raise NotebookLoadError(msg) from exc
        if not isinstance(raw, dict):
            msg = "Invalid notebook: top-level JSON value must be an object"
            raise NotebookLoadError(msg)

        major = raw.get("nbformat")
        if isinstance(major, int) and major < nbformat.current_nbformat:
            raw = self._upgrade(text, major)

        cells = raw.get("cells")
        if not isinstance(cells, list):
            msg = "Invalid notebook: missing 'cells' array"
            raise NotebookLoadError(msg)

        try:
            notebook = Notebook.model_validate(raw)
        except ValidationError as exc:
            msg = f"Invalid notebook cells: {exc}"
            raise NotebookLoadError(msg) from exc

        logger.debug("Loaded %d cells", len(notebook.cells))
        return notebook

    @staticmethod
    def _upgrade(text: str, major: int) -> dict[str, Any]:
        """Read a pre-v4 notebook (cells inside worksheets) as nbformat v4."""
        logger.debug(
            "Upgrading nbformat v%d notebook to v%d", major, nbformat.current_nbformat
        )
        try:
            node = nbformat.reads(text, as_version=nbformat.current_nbformat)
        except (
            nbformat.ValidationError,
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
        ) as exc:
            msg = f"Cannot upgrade nbformat v{major} notebook: {exc}"
            raise NotebookLoadError(msg) from exc
        result: dict[str, Any] = dict(node)
        return result
