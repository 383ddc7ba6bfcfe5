"""Render resolution results as text or JSON."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from batchload.graph.diagnostics import stuck_on_unresolved
from batchload.models import DependencyError, ResolveResult


def format_batches(batches: list[list[str]]) -> str:
    lines: list[str] = []
    for i, batch in enumerate(batches):
        lines.append(f"Batch {i}")
        lines.extend(f"    {name}" for name in batch)
    return "\n".join(lines)


def format_errors(errors: dict[str, DependencyError]) -> str:
    """Per-object breakdown of why the remainder is stuck."""
    lines: list[str] = []
    for name, error in errors.items():
        lines.append(f"Dependency error in {name}")
        if error.circular:
            lines.append("  Found upstream dependency error:")
            lines.extend(f"   - {dep}" for dep in sorted(error.circular))
        if error.unresolved:
            lines.append("  Found unresolved dependencies:")
            lines.extend(f"   - {dep}" for dep in sorted(error.unresolved))
    missing_only = stuck_on_unresolved(errors)
    if missing_only:
        lines.append("Blocked only by missing declarations:")
        lines.extend(f"   - {name}" for name in missing_only)
    return "\n".join(lines)


def format_graph(graph: dict[str, set[str]]) -> str:
    """List every node that has successors, with its successors indented."""
    lines: list[str] = []
    for node in sorted(graph):
        children = graph[node]
        if not children:
            continue
        lines.append(node)
        lines.extend(f"    {child}" for child in sorted(children))
    return "\n".join(lines)


def graph_to_dict(graph: dict[str, set[str]]) -> dict[str, list[str]]:
    return {node: sorted(children) for node, children in sorted(graph.items())}


def result_to_dict(result: ResolveResult) -> dict[str, Any]:
    """JSON-serializable view of a resolution result."""
    return {
        "table": result.table,
        "ok": result.ok,
        "batches": result.batches,
        "order": result.order,
        "errors": [
            {
                "name": error.name,
                "unresolved": sorted(error.unresolved),
                "circular": sorted(error.circular),
            }
            for error in result.errors.values()
        ],
        "missing_only": stuck_on_unresolved(result.errors),
        "reverse_graph": graph_to_dict(result.reverse_graph),
        "descriptions": {
            name: {"short": desc.short, "long": desc.long}
            for name, desc in result.descriptions.items()
        },
        "skipped": list(result.skipped),
    }


def write_report(result: ResolveResult, path: Path) -> Path:
    """Write a JSON report of ``result`` to ``path``."""
    report = {
        "version": "1.0",
        "generated": datetime.now().isoformat(),
        **result_to_dict(result),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")
    return path
