"""Reverse graph construction and transitive reduction.

The reverse graph maps each node to the nodes that directly depend on it
(``d -> E`` when ``E`` inherits ``d``). Transitive reduction drops a direct
edge ``N0 -> N3`` whenever ``N3`` is also reachable through another direct
successor of ``N0``. The result is meant for inspection only; scheduling
never consumes it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from batchload.models import DepMap

logger = logging.getLogger(__name__)


def build_reverse_graph(dep_map: Mapping[str, set[str]]) -> dict[str, set[str]]:
    """Invert a dep map. Declared and merely referenced names all become nodes."""
    graph: dict[str, set[str]] = {}
    for name, deps in dep_map.items():
        graph.setdefault(name, set())
        for dep in deps:
            graph.setdefault(dep, set()).add(name)
    return graph


def descendants(
    graph: Mapping[str, set[str]],
    node: str,
    blocked: str | None = None,
) -> set[str]:
    """Every node reachable from ``node``, excluding ``node`` itself.

    Iterative DFS with a visited set, so cycles terminate. Paths through
    ``blocked`` are not followed and ``blocked`` is never reported.
    """
    seen: set[str] = {node}
    if blocked is not None:
        seen.add(blocked)
    found: set[str] = set()
    stack = list(graph.get(node, ()))
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        found.add(current)
        stack.extend(child for child in graph.get(current, ()) if child not in seen)
    return found


def transitive_reduce(graph: dict[str, set[str]]) -> dict[str, set[str]]:
    """Remove implied edges from ``graph`` in place and return it.

    Descendants of ``N1`` are searched without passing back through
    ``N0``, and a successor already removed from ``N0`` is not used to
    justify further removals, so on cyclic input every previously
    connected pair stays connected. Self edges are left alone.
    """
    removed = 0
    for n0 in sorted(graph):
        direct = graph[n0]
        for n1 in sorted(direct):
            if n1 not in direct or n1 == n0:
                continue
            implied = (descendants(graph, n1, blocked=n0) & direct) - {n1}
            if implied:
                direct -= implied
                removed += len(implied)
    logger.debug("Transitive reduction removed %d edge(s)", removed)
    return graph


def reduce_reverse_graph(dep_map: DepMap) -> dict[str, set[str]]:
    """Build the transitively reduced reverse graph. ``dep_map`` is not modified."""
    return transitive_reduce(build_reverse_graph(dep_map))
