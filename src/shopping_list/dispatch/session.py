"""Session context threaded through the dispatcher and command handlers."""

from dataclasses import dataclass, field
from typing import Optional

from ..services.catalog_service import RecipeCatalog
from ..services.shopping_list_service import ShoppingList
from .handlers import build_default_registry
from .registry import CommandRegistry


@dataclass
class Session:
    """Mutable state of one interactive session.

    Owns the shopping list; the catalog and registry are shared read-only.
    """
    catalog: RecipeCatalog
    registry: CommandRegistry
    output_path: str = 'list.txt'
    shopping_list: ShoppingList = field(default_factory=ShoppingList)

    @classmethod
    def create(
        cls,
        catalog: RecipeCatalog,
        output_path: str = 'list.txt',
        registry: Optional[CommandRegistry] = None
    ) -> 'Session':
        """Start a session with an empty list and the default commands."""
        if registry is None:
            registry = build_default_registry()
        return cls(catalog=catalog, registry=registry, output_path=output_path)
