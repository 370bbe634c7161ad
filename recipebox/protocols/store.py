"""
Store Protocol — Interface for recipe storage.

Recipebox defines this protocol. RecipeStore implements it in memory;
other backends can be configured through RECIPEBOX["STORE_BACKEND"].
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from recipebox.models import Recipe


@runtime_checkable
class RecipeStoreBackend(Protocol):
    """
    Protocol for recipe storage.

    Implementations keep recipes in insertion order, assign ids on
    create, and treat delete of an unknown id as a no-op.
    """

    def list(self) -> list[Recipe]:
        """Return all recipes in insertion order."""
        ...

    def get(self, recipe_id: str) -> Recipe:
        """
        Return one recipe.

        Raises:
            NotFoundError: If no recipe has that id
        """
        ...

    def create(self, name, ingredients=None) -> Recipe:
        """
        Add a recipe with a freshly assigned id.

        Raises:
            ValidationError: If name is missing or blank
        """
        ...

    def update(self, recipe_id: str, name, ingredients=None) -> Recipe:
        """
        Replace name and ingredients, keeping the id.

        Raises:
            NotFoundError: If no recipe has that id
            ValidationError: If name is missing or blank
        """
        ...

    def delete(self, recipe_id: str) -> bool:
        """Remove a recipe; return whether anything was removed."""
        ...

    def seed(self, recipes: Iterable[Mapping]) -> list[Recipe]:
        """Bulk-create recipes from {name, ingredients} mappings."""
        ...
