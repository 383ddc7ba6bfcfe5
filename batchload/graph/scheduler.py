"""Batch scheduler — destructively peels a dep map into load batches."""

from __future__ import annotations

import logging

from batchload.models import DepMap

logger = logging.getLogger(__name__)


def build_batches(dep_map: DepMap) -> tuple[list[list[str]], DepMap]:
    """Reduce ``dep_map`` to a sequence of mutually independent batches.

    Each round takes every entity whose dependency set is empty, removes
    it from the map as a key and from every remaining dependency set, and
    appends it as the next batch (sorted by name). Scheduling stops when
    the map is empty or a round finds nothing ready.

    The map is consumed: on return it holds the stalled remainder (empty
    on success) and the same object is returned as the second element.
    Callers that need the original must copy it first. Never raises, even
    for a completely invalid graph.
    """
    batches: list[list[str]] = []

    while dep_map:
        ready = sorted(name for name, deps in dep_map.items() if not deps)
        if not ready:
            logger.info(
                "Scheduling stalled after %d batch(es) with %d object(s) unresolved",
                len(batches), len(dep_map),
            )
            break

        for name in ready:
            del dep_map[name]
        done = set(ready)
        for deps in dep_map.values():
            deps -= done

        logger.debug("Batch %d: %s", len(batches), ", ".join(ready))
        batches.append(ready)

    return batches, dep_map
