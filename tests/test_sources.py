"""Tests for the document source layer."""

from pathlib import Path

import pytest

from batchload.models import DocumentFormat
from batchload.sources import (
    DocumentError,
    JsonSource,
    TomlSource,
    YamlSource,
    get_table,
    load_document,
    source_for,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_json_source():
    doc = JsonSource().load(FIXTURES / "objects.json")
    assert "objects" in doc
    assert doc["objects"]["sword"]["inherits"] == ["weapon", "item"]


def test_toml_source():
    doc = TomlSource().load(FIXTURES / "objects.toml")
    assert doc["objects"]["potion"]["inherits"] == ["item"]
    assert doc["objects"]["potion"]["description"]["short"] == "Potion"


def test_yaml_source():
    doc = YamlSource().load(FIXTURES / "objects.yaml")
    assert doc["objects"]["golem"]["inherits"] == ["creature", "construct"]


@pytest.mark.parametrize("name,fmt", [
    ("objects.json", DocumentFormat.JSON),
    ("objects.toml", DocumentFormat.TOML),
    ("objects.yaml", DocumentFormat.YAML),
    ("OBJECTS.YML", DocumentFormat.YAML),
])
def test_source_for_extension(name, fmt):
    assert source_for(Path(name)).format == fmt


def test_explicit_format_overrides_extension(tmp_path):
    path = tmp_path / "objects.cfg"
    path.write_text('{"objects": {"a": {}}}', encoding="utf-8")
    doc = load_document(path, DocumentFormat.JSON)
    assert doc == {"objects": {"a": {}}}


def test_unknown_extension(tmp_path):
    path = tmp_path / "objects.ini"
    path.write_text("[objects]", encoding="utf-8")
    with pytest.raises(DocumentError, match="Cannot infer"):
        load_document(path)


def test_missing_file(tmp_path):
    with pytest.raises(DocumentError, match="not found"):
        load_document(tmp_path / "nope.json")


def test_parse_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentError, match="Failed to parse"):
        load_document(path)


def test_top_level_must_be_table(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(DocumentError, match="top level"):
        load_document(path)


def test_get_table():
    assert get_table({"objects": {"a": {}}}, "objects") == {"a": {}}


def test_get_table_missing():
    with pytest.raises(DocumentError, match="not found"):
        get_table({"items": {}}, "objects")


def test_get_table_not_a_table():
    with pytest.raises(DocumentError, match="must be a table"):
        get_table({"objects": ["a", "b"]}, "objects")


def test_lua_without_runtime_hints_install(monkeypatch, tmp_path):
    import batchload.sources as sources

    monkeypatch.delitem(sources._SOURCES, DocumentFormat.LUA, raising=False)
    path = tmp_path / "items.lua"
    path.write_text("objects = {}", encoding="utf-8")
    with pytest.raises(DocumentError, match="lupa"):
        load_document(path)
    with pytest.raises(DocumentError, match="lupa"):
        source_for(Path("items.cfg"), DocumentFormat.LUA)
