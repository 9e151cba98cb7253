"""Category registry: ordered sets of units, groups and job titles.

Order defines display priority. Removing an entry never touches staff
defaults or weekly overrides that still reference it.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Sequence, Tuple

from rosterview.domain.entities import Settings
from rosterview.errors import DuplicateError, NotFoundError, Result, ValidationError


def add_category(categories: Sequence[str], name: str) -> Result[Tuple[str, ...]]:
    """
    Append ``name`` (trimmed) as the lowest-priority entry.

    Args:
        categories: Current ordered category set
        name: Name to add

    Returns:
        Result with the new tuple, or ValidationError / DuplicateError
    """
    trimmed = (name or "").strip()
    if not trimmed:
        return Result.failure(ValidationError("Category name must not be empty"))
    lowered = trimmed.lower()
    if any(existing.lower() == lowered for existing in categories):
        return Result.failure(DuplicateError(f'"{trimmed}" already exists'))
    return Result.success(tuple(categories) + (trimmed,))


def remove_category(categories: Sequence[str], name: str) -> Result[Tuple[str, ...]]:
    """Remove an exact match, preserving the order of the rest."""
    if name not in categories:
        return Result.failure(NotFoundError(f'"{name}" not found'))
    return Result.success(tuple(c for c in categories if c != name))


def order_index_of(categories: Sequence[str], name: str) -> float:
    """Position of ``name`` for sorting; ``math.inf`` when not present."""
    try:
        return categories.index(name)
    except ValueError:
        return math.inf


def add_to_settings(settings: Settings, kind: str, name: str) -> Result[Settings]:
    """Add a category of ``kind`` (units / groups / job_titles) to settings."""
    result = add_category(settings.categories(kind), name)
    if not result.ok:
        return Result.failure(result.error)
    return Result.success(replace(settings, **{kind: result.value}))


def remove_from_settings(settings: Settings, kind: str, name: str) -> Result[Settings]:
    result = remove_category(settings.categories(kind), name)
    if not result.ok:
        return Result.failure(result.error)
    return Result.success(replace(settings, **{kind: result.value}))
