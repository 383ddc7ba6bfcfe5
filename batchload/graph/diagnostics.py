"""Classify the dependencies of a stalled dep map remainder."""

from __future__ import annotations

from batchload.models import DepMap, DependencyError


def classify_errors(remainder: DepMap) -> dict[str, DependencyError]:
    """Split each stuck entity's dependencies into unresolved and circular.

    A dependency that is not a key of the remainder was never declared
    (resolved names have already been stripped by the scheduler). One that
    is a key is stuck together with this entity: it sits on a cycle or
    downstream of one. This is a component-level approximation, not an
    exact cycle trace. The remainder is not modified.
    """
    errors: dict[str, DependencyError] = {}
    for name in sorted(remainder):
        error = DependencyError(name=name)
        for dep in remainder[name]:
            if dep in remainder:
                error.circular.add(dep)
            else:
                error.unresolved.add(dep)
        errors[name] = error
    return errors


def stuck_on_unresolved(errors: dict[str, DependencyError]) -> list[str]:
    """Names blocked only by missing declarations, with no circular part."""
    return [
        name for name, error in errors.items()
        if error.unresolved and not error.circular
    ]
