"""
Django Recipebox app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RecipeboxConfig(AppConfig):
    """Recipebox application configuration."""

    name = "recipebox"
    verbose_name = _("Recipes")

    def ready(self):
        """Import signal handlers when app is ready."""
        # Import handlers to register them
        from recipebox.signals import handlers  # noqa: F401
