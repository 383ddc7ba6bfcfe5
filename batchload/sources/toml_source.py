"""TOML configuration documents."""

from __future__ import annotations

import tomllib
from typing import Any

from batchload.models import DocumentFormat
from batchload.sources.base import BaseSource


class TomlSource(BaseSource):
    format = DocumentFormat.TOML
    extensions = (".toml",)

    def parse(self, text: str) -> Any:
        return tomllib.loads(text)
