"""JSON configuration documents."""

from __future__ import annotations

import json
from typing import Any

from batchload.models import DocumentFormat
from batchload.sources.base import BaseSource


class JsonSource(BaseSource):
    format = DocumentFormat.JSON
    extensions = (".json",)

    def parse(self, text: str) -> Any:
        return json.loads(text)
