"""Object loader — collects display descriptions in batch order."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from batchload.models import Description, ObjectDeclaration

logger = logging.getLogger(__name__)


def load_descriptions(
    declarations: Mapping[str, ObjectDeclaration],
    batches: list[list[str]],
) -> dict[str, Description]:
    """Build a name -> Description lookup for every scheduled object.

    Objects are visited in load order. Objects that declare no
    description are left out of the lookup.
    """
    descriptions: dict[str, Description] = {}
    for batch in batches:
        for name in batch:
            decl = declarations.get(name)
            if decl is None or decl.description is None:
                continue
            descriptions[name] = decl.description
    logger.debug("Loaded %d description(s)", len(descriptions))
    return descriptions
