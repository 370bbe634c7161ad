"""
Recipebox Store - in-memory recipe collection.

Usage:
    from recipebox.store import RecipeStore

    store = RecipeStore()
    rice = store.create("boiled white rice", ["1 cup white rice", "2 cups water"])
    store.update(rice.id, "boiled brown rice", ["1 cup brown rice", "2 cups water"])
    store.delete(rice.id)

Records are kept in insertion order. Callers always receive copies, so
mutating a returned Recipe never changes the store.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Iterable, Mapping, Sequence

from recipebox.exceptions import NotFoundError, ValidationError
from recipebox.models import Recipe
from recipebox.results import ValidationResult
from recipebox.signals import recipe_created, recipe_deleted, recipe_updated

logger = logging.getLogger(__name__)


class RecipeStore:
    """
    Ordered in-memory collection of recipes.

    Not persistent: contents live as long as the instance does.
    """

    def __init__(self, recipes: Iterable[Mapping] | None = None):
        self._lock = threading.Lock()
        self._recipes: list[Recipe] = []
        if recipes:
            self.seed(recipes)

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    def list(self) -> list[Recipe]:
        with self._lock:
            return [recipe.copy() for recipe in self._recipes]

    def get(self, recipe_id: str) -> Recipe:
        """
        Return the recipe with the given id.

        Raises:
            NotFoundError: If no recipe has that id
        """
        with self._lock:
            return self._find(recipe_id).copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def __contains__(self, recipe_id) -> bool:
        with self._lock:
            return any(recipe.id == recipe_id for recipe in self._recipes)

    # ══════════════════════════════════════════════════════════════
    # VALIDATION
    # ══════════════════════════════════════════════════════════════

    @staticmethod
    def validate(name, ingredients=None) -> ValidationResult:
        """
        Check recipe data without raising.

        name must be a non-blank string. ingredients may be omitted
        (empty list) but otherwise must be a list of strings.
        """
        errors: dict[str, list[str]] = {}

        if name is None:
            errors["name"] = ["This field is required."]
        elif not isinstance(name, str) or not name.strip():
            errors["name"] = ["This field may not be blank."]

        if ingredients is None:
            ingredients = []
        elif isinstance(ingredients, str) or not isinstance(ingredients, Sequence):
            errors["ingredients"] = ["Expected a list of items."]
        elif not all(isinstance(item, str) for item in ingredients):
            errors["ingredients"] = ["All items must be strings."]

        if errors:
            return ValidationResult(valid=False, errors=errors)

        return ValidationResult(valid=True, name=name, ingredients=list(ingredients))

    def _validated(self, name, ingredients) -> ValidationResult:
        result = self.validate(name, ingredients)
        if not result.valid:
            raise ValidationError(errors=result.errors)
        return result

    # ══════════════════════════════════════════════════════════════
    # MUTATIONS
    # ══════════════════════════════════════════════════════════════

    def create(self, name, ingredients=None) -> Recipe:
        """
        Add a recipe and return it.

        The id is always assigned here, never by the caller.

        Raises:
            ValidationError: If name is missing or blank
        """
        result = self._validated(name, ingredients)
        recipe = Recipe(
            id=str(uuid.uuid4()),
            name=result.name,
            ingredients=result.ingredients,
        )

        with self._lock:
            self._recipes.append(recipe)
            created = recipe.copy()

        recipe_created.send(sender=type(self), recipe=created)
        return created

    def update(self, recipe_id: str, name, ingredients=None) -> Recipe:
        """
        Replace name and ingredients of an existing recipe.

        The id never changes.

        Raises:
            NotFoundError: If no recipe has that id
            ValidationError: If name is missing or blank
        """
        with self._lock:
            self._find(recipe_id)

        result = self._validated(name, ingredients)

        with self._lock:
            recipe = self._find(recipe_id)
            recipe.name = result.name
            recipe.ingredients = result.ingredients
            updated = recipe.copy()

        recipe_updated.send(sender=type(self), recipe=updated)
        return updated

    def delete(self, recipe_id: str) -> bool:
        """
        Remove a recipe.

        Deleting an unknown id is not an error.

        Returns:
            True if a recipe was removed, False otherwise
        """
        with self._lock:
            before = len(self._recipes)
            self._recipes = [r for r in self._recipes if r.id != recipe_id]
            removed = len(self._recipes) < before

        if removed:
            recipe_deleted.send(sender=type(self), recipe_id=recipe_id)
        else:
            logger.debug("Delete of unknown recipe %s ignored", recipe_id)
        return removed

    def seed(self, recipes: Iterable[Mapping]) -> list[Recipe]:
        """Create each {name, ingredients} mapping in order."""
        return [
            self.create(data.get("name"), data.get("ingredients"))
            for data in recipes
        ]

    def clear(self) -> None:
        with self._lock:
            self._recipes = []

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _find(self, recipe_id: str) -> Recipe:
        # Caller holds the lock.
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        raise NotFoundError(recipe_id=recipe_id)
