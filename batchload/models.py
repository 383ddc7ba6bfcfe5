"""Data models for the batchload resolver."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

# entity name -> names it directly depends on
DepMap = dict[str, set[str]]


class DocumentFormat(enum.Enum):
    JSON = "json"
    TOML = "toml"
    YAML = "yaml"
    LUA = "lua"


@dataclass
class Description:
    """Short and long display text for an object."""
    short: str = ""
    long: str = ""


@dataclass
class ObjectDeclaration:
    """Decoded declaration of one entry in the objects table."""
    name: str
    inherits: set[str] = field(default_factory=set)
    description: Description | None = None


@dataclass
class DependencyError:
    """Why an entity could not be scheduled."""
    name: str
    unresolved: set[str] = field(default_factory=set)  # never declared
    circular: set[str] = field(default_factory=set)  # declared but stuck too

    @property
    def is_self_dependent(self) -> bool:
        return self.name in self.circular


@dataclass
class ResolveResult:
    """Result of a single resolution run."""
    table: str
    batches: list[list[str]] = field(default_factory=list)
    errors: dict[str, DependencyError] = field(default_factory=dict)
    reverse_graph: dict[str, set[str]] = field(default_factory=dict)
    descriptions: dict[str, Description] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)  # malformed-entry warnings

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def order(self) -> list[str]:
        """All scheduled entities in load order."""
        return [name for batch in self.batches for name in batch]


@dataclass
class ResolveConfig:
    """Configuration for a file-based resolution run."""
    source: Path = field(default_factory=lambda: Path("objects.json"))
    table: str = "objects"
    format: DocumentFormat | None = None  # None: pick by file extension
    reduce: bool = True
