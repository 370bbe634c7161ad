"""
Recipebox Protocols.

Defines interfaces for pluggable storage.
"""

from recipebox.protocols.store import RecipeStoreBackend

__all__ = [
    "RecipeStoreBackend",
]
