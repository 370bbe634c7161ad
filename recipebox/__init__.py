"""
Django Recipebox - in-memory recipes REST API.

Usage:
    from recipebox import RecipeStore, ValidationError

    store = RecipeStore()
    recipe = store.create("milkshake", ["2 tbsp cocoa", "1 cup milk"])
    store.update(recipe.id, "chocolate milkshake", recipe.ingredients)
    store.delete(recipe.id)

    # HTTP (urls.py)
    path("", include("recipebox.api.urls"))
"""

from recipebox.exceptions import NotFoundError, RecipeError, ValidationError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "RecipeStore":
        from recipebox.store import RecipeStore

        return RecipeStore
    if name == "Recipe":
        from recipebox.models import Recipe

        return Recipe
    if name == "ValidationResult":
        from recipebox.results import ValidationResult

        return ValidationResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RecipeStore",
    "Recipe",
    "ValidationResult",
    "RecipeError",
    "ValidationError",
    "NotFoundError",
]
__version__ = "0.1.0"
