"""Dependency graph engine: builder, scheduler, diagnostics and reducer."""

from __future__ import annotations

from batchload.graph.builder import build_dependency_map, decode_declarations
from batchload.graph.diagnostics import classify_errors, stuck_on_unresolved
from batchload.graph.reducer import (
    build_reverse_graph,
    descendants,
    reduce_reverse_graph,
    transitive_reduce,
)
from batchload.graph.scheduler import build_batches

__all__ = [
    "build_batches",
    "build_dependency_map",
    "build_reverse_graph",
    "classify_errors",
    "decode_declarations",
    "descendants",
    "reduce_reverse_graph",
    "stuck_on_unresolved",
    "transitive_reduce",
]
