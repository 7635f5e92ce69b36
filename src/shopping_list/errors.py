"""Errors raised by the shopping list core.

Every error here is non-fatal for an interactive session: the dispatcher
turns it into a failed command result and the shell keeps reading input.
"""

from typing import Optional


class ShoppingListError(Exception):
    """Base class for command-level errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class UnknownCommand(ShoppingListError):
    """Input's first token is not a registered command."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("No such command.")


class ArityMismatch(ShoppingListError):
    """Wrong number of arguments for a known command."""

    def __init__(self, name: str, expected: int, received: int):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__("Wrong args.")


class RecipeNotFound(ShoppingListError):
    """A dish is not in the recipe catalog."""

    def __init__(self, dish_name: str, message: Optional[str] = None):
        self.dish_name = dish_name
        super().__init__(message or f"Cannot find dish {dish_name}.")


class PersistenceFailure(ShoppingListError):
    """The shopping list could not be written to its output file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save shopping list to {path}: {reason}")
