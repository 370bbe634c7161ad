"""
Recipebox Models.

- Recipe: a named list of ingredient strings with a unique id
"""

from recipebox.models.recipe import Recipe

__all__ = ["Recipe"]
