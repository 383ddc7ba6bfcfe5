"""Document source registry and dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from batchload.models import DocumentFormat
from batchload.sources.base import BaseSource, DocumentError
from batchload.sources.json_source import JsonSource
from batchload.sources.toml_source import TomlSource
from batchload.sources.yaml_source import YamlSource

# Lua scripts need the optional lupa runtime
try:
    from batchload.sources.lua_source import LuaSource
    _HAS_LUA = True
except ImportError:
    LuaSource = None  # type: ignore[misc,assignment]
    _HAS_LUA = False

_SOURCES: dict[DocumentFormat, BaseSource] = {
    DocumentFormat.JSON: JsonSource(),
    DocumentFormat.TOML: TomlSource(),
    DocumentFormat.YAML: YamlSource(),
}

if _HAS_LUA:
    _SOURCES[DocumentFormat.LUA] = LuaSource()

_LUA_HINT = "Lua documents need the lupa runtime. Install with: pip install 'batchload[lua]'"


def source_for(path: Path, fmt: DocumentFormat | None = None) -> BaseSource:
    """Pick a source by explicit format or by file extension."""
    if fmt is not None:
        if fmt not in _SOURCES:
            raise DocumentError(_LUA_HINT)
        return _SOURCES[fmt]
    suffix = path.suffix.lower()
    for source in _SOURCES.values():
        if suffix in source.extensions:
            return source
    if suffix == ".lua":
        raise DocumentError(_LUA_HINT)
    raise DocumentError(
        f"Cannot infer document format from {path.name!r}; "
        f"pass one of: {', '.join(f.value for f in DocumentFormat)}"
    )


def load_document(path: Path, fmt: DocumentFormat | None = None) -> dict[str, Any]:
    """Load a configuration document from disk."""
    if not path.is_file():
        raise DocumentError(f"Document not found: {path}")
    return source_for(path, fmt).load(path)


def get_table(document: dict[str, Any], table_name: str) -> dict[Any, Any]:
    """Return the named top-level table of a document."""
    if table_name not in document:
        raise DocumentError(f"Table {table_name!r} not found in document")
    table = document[table_name]
    if not isinstance(table, dict):
        raise DocumentError(
            f"Table {table_name!r} must be a table, got {type(table).__name__}"
        )
    return table


__all__ = [
    "BaseSource",
    "DocumentError",
    "JsonSource",
    "LuaSource",
    "TomlSource",
    "YamlSource",
    "get_table",
    "load_document",
    "source_for",
]
