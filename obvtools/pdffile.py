"""The PDF document attached to a board file, and the viewer it is shown in."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from obvtools.confparse import Confparse

logger = logging.getLogger(__name__)

_CONFIG_KEY = "PDFFilePath"


@dataclass(frozen=True)
class SearchRequest:
    """A search asked of the viewer."""

    text: str
    whole_words_only: bool
    case_sensitive: bool


class PDFBridge:
    """Link to a PDF viewer.

    This base bridge has no external viewer. It keeps track of the open
    document and of the last search asked for, and never reports a selection.
    """

    def __init__(self) -> None:
        self.document: Path | None = None
        self.last_search: SearchRequest | None = None

    def open_document(self, pdf_file: PDFFile) -> None:
        """Show the document of ``pdf_file`` in the viewer."""
        self.document = None if pdf_file.path is None else Path(pdf_file.path)
        logger.debug("PDF document opened: %s", self.document)

    def close_document(self) -> None:
        """Stop showing the current document."""
        logger.debug("PDF document closed: %s", self.document)
        self.document = None
        self.last_search = None

    def document_search(self, text: str, whole_words_only: bool, case_sensitive: bool) -> None:
        """Search ``text`` in the open document."""
        self.last_search = SearchRequest(text, whole_words_only, case_sensitive)
        logger.debug("PDF search requested: %r", self.last_search)

    def has_new_selection(self) -> bool:
        """Tell whether the viewer's selection changed since last asked."""
        return False

    def selection(self) -> str:
        """The text currently selected in the viewer."""
        return ""


class PDFFile:
    """The PDF file configured for a board, stored relative to its config file."""

    def __init__(self, pdf_bridge: PDFBridge | None = None) -> None:
        self.pdf_bridge = pdf_bridge
        self.path: Path | None = None
        self.config_filepath: Path | None = None

    def _bridge(self) -> PDFBridge:
        if self.pdf_bridge is None:
            raise RuntimeError("no PDF bridge attached")
        return self.pdf_bridge

    def reload(self) -> None:
        """Close and reopen the document in the viewer."""
        bridge = self._bridge()
        bridge.close_document()
        bridge.open_document(self)

    def close(self) -> None:
        """Close the document in the viewer."""
        self._bridge().close_document()

    def load_from_config(self, filepath: str | os.PathLike) -> None:
        """Read the PDF path from the board's config file.

        Without an entry, the board file path with a ``.pdf`` extension is
        used. A missing config file is neither read nor written.
        """
        config_path = Path(filepath)
        self.config_filepath = config_path
        self.path = config_path.with_suffix(".pdf")

        if not config_path.exists():
            return

        config_dir = config_path.resolve().parent
        confparse = Confparse()
        confparse.load(config_path)
        stored = confparse.parse_str(_CONFIG_KEY, "")
        if stored:
            self.path = config_dir / stored

        self.write_to_config(config_path)

    def write_to_config(self, filepath: str | os.PathLike | None) -> None:
        """Store the PDF path, relative to the config file's directory."""
        if not filepath:
            return
        config_path = Path(filepath)
        confparse = Confparse()
        confparse.load(config_path)
        config_dir = config_path.resolve().parent

        if self.path is None:
            return
        try:
            relative = os.path.relpath(Path(self.path).resolve(), config_dir)
        except ValueError as exc:
            logger.error("Error writing PDF file path: %s", exc)
            return
        confparse.write_str(_CONFIG_KEY, relative)