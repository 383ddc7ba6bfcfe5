"""Tests for text and JSON rendering of results."""

import json

from batchload.models import DependencyError
from batchload.pipeline import resolve
from batchload.report import (
    format_batches,
    format_errors,
    format_graph,
    graph_to_dict,
    result_to_dict,
    write_report,
)


def test_format_batches():
    text = format_batches([["a"], ["b", "c"]])
    assert text.splitlines() == ["Batch 0", "    a", "Batch 1", "    b", "    c"]


def test_format_errors():
    errors = {
        "a": DependencyError("a", unresolved={"x"}, circular={"b"}),
        "b": DependencyError("b", circular={"a"}),
    }
    lines = format_errors(errors).splitlines()
    assert lines[0] == "Dependency error in a"
    assert "  Found upstream dependency error:" in lines
    assert "  Found unresolved dependencies:" in lines
    assert "   - x" in lines
    assert lines.count("  Found unresolved dependencies:") == 1


def test_format_graph_skips_leaves():
    text = format_graph({"a": {"b"}, "b": set()})
    assert text.splitlines() == ["a", "    b"]


def test_graph_to_dict_sorted():
    assert graph_to_dict({"b": set(), "a": {"z", "c"}}) == {"a": ["c", "z"], "b": []}


def test_result_to_dict_is_json_serializable():
    result = resolve({
        "objects": {
            "a": {"description": {"short": "A", "long": "Alpha"}},
            "b": {"inherits": ["a", "missing"]},
        }
    })
    data = result_to_dict(result)
    json.dumps(data)
    assert data["ok"] is False
    assert data["batches"] == [["a"]]
    assert data["errors"] == [{"name": "b", "unresolved": ["missing"], "circular": []}]
    assert data["descriptions"] == {"a": {"short": "A", "long": "Alpha"}}


def test_write_report(tmp_path):
    result = resolve({"objects": {"a": {}}})
    path = write_report(result, tmp_path / "out" / "report.json")
    report = json.loads(path.read_text())
    assert report["version"] == "1.0"
    assert report["order"] == ["a"]
    assert report["ok"] is True


def test_format_errors_lists_missing_only():
    errors = {
        "a": DependencyError("a", unresolved={"x"}),
        "b": DependencyError("b", circular={"b"}),
    }
    lines = format_errors(errors).splitlines()
    idx = lines.index("Blocked only by missing declarations:")
    assert lines[idx + 1:] == ["   - a"]


def test_format_errors_no_missing_only_summary_for_cycles():
    errors = {"a": DependencyError("a", circular={"a"})}
    assert "Blocked only by missing declarations:" not in format_errors(errors)


def test_result_to_dict_missing_only():
    result = resolve({
        "objects": {
            "a": {"inherits": ["missing"]},
            "b": {"inherits": ["b"]},
        }
    })
    assert result_to_dict(result)["missing_only"] == ["a"]
