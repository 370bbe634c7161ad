"""
Recipebox Signals.

Sent by the store after each successful mutation, so other apps can react
to recipe changes without touching the store.

Signals:
    recipe_created: A recipe was added
    recipe_updated: A recipe was replaced
    recipe_deleted: A recipe was removed
"""

from django.dispatch import Signal

# Sent by RecipeStore.create()
# Args: recipe
recipe_created = Signal()

# Sent by RecipeStore.update()
# Args: recipe
recipe_updated = Signal()

# Sent by RecipeStore.delete() when a record was actually removed
# Args: recipe_id
recipe_deleted = Signal()

__all__ = ["recipe_created", "recipe_updated", "recipe_deleted"]
