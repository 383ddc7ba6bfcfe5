"""batchload: resolve object inheritance declarations into ordered load batches."""

from batchload.models import (
    DependencyError,
    Description,
    ObjectDeclaration,
    ResolveConfig,
    ResolveResult,
)
from batchload.pipeline import resolve, run_resolve

__version__ = "0.1.0"

__all__ = [
    "DependencyError",
    "Description",
    "ObjectDeclaration",
    "ResolveConfig",
    "ResolveResult",
    "resolve",
    "run_resolve",
]
