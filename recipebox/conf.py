"""
Recipebox Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    RECIPEBOX = {
        "STORE_BACKEND": "recipebox.store.RecipeStore",
        "SEED_RECIPES": [{"name": "toast", "ingredients": ["bread"]}],
    }

    # Option 2: Flat
    RECIPEBOX_STORE_BACKEND = "recipebox.store.RecipeStore"
    RECIPEBOX_SEED_RECIPES = []

All settings have sensible defaults — zero configuration required.
"""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


# ── Defaults ──

DEFAULTS = {
    "STORE_BACKEND": "recipebox.store.RecipeStore",
    "SEED_RECIPES": [
        {
            "name": "boiled white rice",
            "ingredients": ["1 cup white rice", "2 cups water", "pinch of salt"],
        },
        {
            "name": "milkshake",
            "ingredients": ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"],
        },
    ],
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a recipebox setting.

    Looks up in order:
    1. RECIPEBOX dict (e.g. RECIPEBOX = {"STORE_BACKEND": "..."})
    2. Flat setting (e.g. RECIPEBOX_STORE_BACKEND = "...")
    3. DEFAULTS
    """
    recipebox_dict = getattr(settings, "RECIPEBOX", {})
    if name in recipebox_dict:
        return recipebox_dict[name]

    flat_value = getattr(settings, f"RECIPEBOX_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


_store_lock = threading.Lock()
_store_instance = None


def get_store():
    """
    Return the process-wide recipe store, building and seeding it once.

    Raises:
        ImproperlyConfigured: If STORE_BACKEND cannot be imported or does
            not implement RecipeStoreBackend
    """
    global _store_instance

    if _store_instance is None:
        with _store_lock:
            if _store_instance is None:  # double-checked
                _store_instance = _build_store()

    return _store_instance


def _build_store():
    from recipebox.protocols import RecipeStoreBackend

    path = get_setting("STORE_BACKEND")
    try:
        backend_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import recipe store backend '{path}': {e}"
        ) from e

    store = backend_class()
    if not isinstance(store, RecipeStoreBackend):
        raise ImproperlyConfigured(
            f"'{path}' does not implement RecipeStoreBackend"
        )

    seeded = store.seed(get_setting("SEED_RECIPES") or [])
    logger.debug("Loaded recipe store %s with %d recipes", path, len(seeded))
    return store


def reset_store() -> None:
    """Reset singleton (for tests)."""
    global _store_instance
    _store_instance = None
