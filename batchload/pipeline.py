"""Resolution pipeline: decode -> build -> reduce -> schedule -> diagnose -> load."""

from __future__ import annotations

import logging
from typing import Any, Callable

from batchload.graph import (
    build_batches,
    build_dependency_map,
    classify_errors,
    decode_declarations,
    reduce_reverse_graph,
)
from batchload.loader import load_descriptions
from batchload.models import ResolveConfig, ResolveResult
from batchload.sources import get_table, load_document

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def resolve(
    document: dict[str, Any],
    table_name: str = "objects",
    *,
    reduce: bool = True,
    progress: ProgressCallback | None = None,
) -> ResolveResult:
    """Resolve the objects table of ``document`` into load batches.

    Dependency problems never raise; they end up in ``result.errors``.
    Raises DocumentError only when the table itself is missing or not a
    table.
    """
    table = get_table(document, table_name)
    result = ResolveResult(table=table_name)

    # Stage 1: Decode
    if progress:
        progress("Decoding", 0, 1)
    declarations, result.skipped = decode_declarations(table)
    dep_map = build_dependency_map(declarations)
    if progress:
        progress("Decoding", 1, 1)

    # Stage 2: Reverse graph, taken before scheduling consumes dep_map
    if reduce:
        if progress:
            progress("Reducing", 0, 1)
        result.reverse_graph = reduce_reverse_graph(dep_map)
        if progress:
            progress("Reducing", 1, 1)

    # Stage 3: Schedule
    if progress:
        progress("Scheduling", 0, len(dep_map))
    total = len(dep_map)
    result.batches, remainder = build_batches(dep_map)
    if progress:
        progress("Scheduling", total - len(remainder), total)

    # Stage 4: Diagnose
    if remainder:
        result.errors = classify_errors(remainder)
        logger.warning(
            "%d of %d object(s) in %r could not be scheduled",
            len(remainder), total, table_name,
        )

    # Stage 5: Load
    result.descriptions = load_descriptions(declarations, result.batches)
    if progress:
        progress("Loading", 1, 1)

    return result


def run_resolve(config: ResolveConfig, progress: ProgressCallback | None = None) -> ResolveResult:
    """Load the configured document from disk and resolve it."""
    logger.info("Loading file: %s", config.source)
    document = load_document(config.source, config.format)
    return resolve(
        document,
        config.table,
        reduce=config.reduce,
        progress=progress,
    )
