"""Shopping list services."""

from .catalog_service import RecipeCatalog
from .shopping_list_service import ShoppingList

__all__ = ['RecipeCatalog', 'ShoppingList']
