"""YAML configuration documents."""

from __future__ import annotations

from typing import Any

import yaml

from batchload.models import DocumentFormat
from batchload.sources.base import BaseSource


class YamlSource(BaseSource):
    format = DocumentFormat.YAML
    extensions = (".yaml", ".yml")

    def parse(self, text: str) -> Any:
        return yaml.safe_load(text)
