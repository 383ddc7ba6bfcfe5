"""Abstract base configuration source."""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any

from batchload.models import DocumentFormat


class DocumentError(ValueError):
    """The configuration document is missing, unreadable or malformed."""


class BaseSource(abc.ABC):
    """Base class for format-specific document loaders."""

    format: DocumentFormat
    extensions: tuple[str, ...]

    @abc.abstractmethod
    def parse(self, text: str) -> Any:
        """Parse document text into plain Python data."""

    def load(self, path: Path) -> dict[str, Any]:
        """Read and parse a document whose top level must be a table."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentError(f"Cannot read {path}: {e}") from e

        try:
            data = self.parse(text)
        except Exception as e:
            raise DocumentError(f"Failed to parse {path} as {self.format.value}: {e}") from e

        if not isinstance(data, dict):
            raise DocumentError(
                f"{path}: top level must be a table, got {type(data).__name__}"
            )
        return data
