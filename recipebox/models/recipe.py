"""
Recipe record.

Recipes live in memory only (see recipebox.store), so this is a plain
dataclass rather than a Django model.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


@dataclass
class Recipe:
    """A named, ordered list of ingredients."""

    id: str
    name: str
    ingredients: list[str] = field(default_factory=list)

    def copy(self) -> Recipe:
        """Detached copy, safe to hand out of the store."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return self.name
