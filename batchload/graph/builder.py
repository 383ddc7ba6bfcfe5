"""Dependency map builder — decodes raw table entries into declarations and a dep map."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from batchload.models import DepMap, Description, ObjectDeclaration

logger = logging.getLogger(__name__)

INHERITS_FIELD = "inherits"
DESCRIPTION_FIELD = "description"


def decode_declarations(
    table: Mapping[Any, Any],
) -> tuple[dict[str, ObjectDeclaration], list[str]]:
    """Decode a raw objects table into typed declarations.

    Malformed entries are skipped rather than rejected. Returns the
    declarations keyed by name and a list of warnings describing every
    skipped entry, in table order.
    """
    declarations: dict[str, ObjectDeclaration] = {}
    warnings: list[str] = []

    def skip(message: str) -> None:
        logger.warning("%s", message)
        warnings.append(message)

    for key, body in table.items():
        name = _as_name(key)
        if name is None:
            skip(f"Skipping object with non-string or blank name {key!r}")
            continue

        decl = ObjectDeclaration(name=name)
        declarations[name] = decl

        if not isinstance(body, Mapping):
            skip(f"Object {name!r} is not a table; treating it as having no dependencies")
            continue

        if INHERITS_FIELD in body:
            raw = body[INHERITS_FIELD]
            if isinstance(raw, (list, tuple)):
                for dep in raw:
                    dep_name = _as_name(dep)
                    if dep_name is None:
                        skip(f"Object {name!r}: skipping non-string or blank dependency {dep!r}")
                        continue
                    decl.inherits.add(dep_name)
            elif isinstance(raw, Mapping) and not raw:
                pass  # empty Lua table
            else:
                skip(
                    f"Object {name!r}: '{INHERITS_FIELD}' must be a list, "
                    f"got {type(raw).__name__}"
                )

        if DESCRIPTION_FIELD in body:
            desc = _decode_description(body[DESCRIPTION_FIELD])
            if desc is None:
                skip(f"Object {name!r}: ignoring malformed '{DESCRIPTION_FIELD}'")
            else:
                decl.description = desc

    logger.debug("Decoded %d declaration(s), skipped %d entry(ies)", len(declarations), len(warnings))
    return declarations, warnings


def build_dependency_map(declarations: Mapping[str, ObjectDeclaration]) -> DepMap:
    """Build a dependency map with one entry per declared object.

    Every value is a fresh set so the scheduler can consume the map
    without touching the declarations.
    """
    return {name: set(decl.inherits) for name, decl in declarations.items()}


def _as_name(value: Any) -> str | None:
    # names are kept verbatim; "a" and "a " are distinct objects
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _decode_description(raw: Any) -> Description | None:
    if not isinstance(raw, Mapping):
        return None
    short = raw.get("short", "")
    long = raw.get("long", "")
    if not isinstance(short, str) or not isinstance(long, str):
        return None
    return Description(short=short, long=long)
