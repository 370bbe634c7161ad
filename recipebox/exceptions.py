"""
Recipebox Exceptions.

All recipebox errors are wrapped in RecipeError for consistent handling.
"""

from typing import Any


class RecipeError(Exception):
    """
    Base exception for all Recipebox errors.

    Usage:
        raise RecipeError('RECIPE_NOT_FOUND', recipe_id='...')

    Attributes:
        code: Error code (INVALID_RECIPE, RECIPE_NOT_FOUND, etc.)
        details: Additional context as keyword arguments
    """

    code = "RECIPE_ERROR"

    def __init__(self, code: str | None = None, **details: Any):
        if code is not None:
            self.code = code
        self.details = details
        message = f"{self.code}: {details}" if details else self.code
        super().__init__(message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        name = type(self).__name__
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{name}({self.code}: {details_str})"
        return f"{name}({self.code})"


class ValidationError(RecipeError):
    """Recipe data rejected (missing or blank name, bad ingredients)."""

    code = "INVALID_RECIPE"


class NotFoundError(RecipeError):
    """No recipe with the given id."""

    code = "RECIPE_NOT_FOUND"


# Common error codes
# INVALID_RECIPE: Mandatory field missing or malformed
# RECIPE_NOT_FOUND: Recipe does not exist
# ID_MISMATCH: Body id differs from the id in the URL
