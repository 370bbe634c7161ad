"""
Recipebox Result Types.

Structured results for recipe validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """
    Result of checking recipe data before a Recipe is built.

    If valid=True: name and ingredients hold the cleaned values
    If valid=False: errors maps field name to messages
    """

    valid: bool
    name: str | None = None
    ingredients: list[str] = field(default_factory=list)
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0
