"""
Recipebox API Serializers.
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers


class StrictCharField(serializers.CharField):
    """CharField that accepts only JSON strings and keeps them verbatim."""

    default_error_messages = {
        "not_a_string": _("Not a valid string."),
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("trim_whitespace", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("not_a_string")
        return super().to_internal_value(data)


class RecipeSerializer(serializers.Serializer):
    """Serializer for Recipe records (input and output)."""

    id = serializers.CharField(read_only=True)
    name = StrictCharField(help_text="Recipe name (e.g., 'milkshake')")
    ingredients = serializers.ListField(
        child=StrictCharField(allow_blank=True),
        default=list,
        help_text="Ingredient lines, in order",
    )


class RecipeUpdateSerializer(RecipeSerializer):
    """Serializer for PUT bodies, which may echo the recipe id."""

    id = serializers.CharField(
        required=False,
        help_text="Optional; must match the id in the URL",
    )
