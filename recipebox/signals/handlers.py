"""
Recipebox Signal Handlers.

Logs every recipe mutation.

This module is imported in apps.py to register handlers.
"""

import logging

from django.dispatch import receiver

from recipebox.signals import recipe_created, recipe_deleted, recipe_updated

logger = logging.getLogger(__name__)


@receiver(recipe_created)
def log_recipe_created(sender, recipe, **kwargs):
    logger.info(
        f"Recipe {recipe.id} created: {recipe.name}",
        extra={
            "recipe_id": recipe.id,
            "ingredients": len(recipe.ingredients),
        },
    )


@receiver(recipe_updated)
def log_recipe_updated(sender, recipe, **kwargs):
    logger.info(
        f"Recipe {recipe.id} updated: {recipe.name}",
        extra={
            "recipe_id": recipe.id,
            "ingredients": len(recipe.ingredients),
        },
    )


@receiver(recipe_deleted)
def log_recipe_deleted(sender, recipe_id, **kwargs):
    logger.info(f"Recipe {recipe_id} deleted", extra={"recipe_id": recipe_id})
