"""Shopping list utilities."""

from .recipe_loader import RecipeLoader

__all__ = ['RecipeLoader']
