"""Shopping list data models."""

from .shopping import Recipe, ShoppingListEntry, CommandUsage, CommandResult, MANUAL_CONTRIBUTOR

__all__ = ['Recipe', 'ShoppingListEntry', 'CommandUsage', 'CommandResult', 'MANUAL_CONTRIBUTOR']
