"""Shopping list aggregation: ingredients and the dishes that need them."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, TextIO

from ..models.shopping import MANUAL_CONTRIBUTOR, ShoppingListEntry

logger = logging.getLogger(__name__)


class ShoppingList:
    """Mutable mapping from ingredient to the set of contributor tags.

    Invariant: every ingredient maps to a non-empty contributor set. Any
    mutation that would leave an empty set deletes the ingredient instead.
    """

    def __init__(self):
        self._items: Dict[str, Set[str]] = {}

    def __contains__(self, ingredient: object) -> bool:
        return ingredient in self._items

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def contributors(self, ingredient: str) -> FrozenSet[str]:
        """Contributor tags for an ingredient, empty if it is not listed."""
        return frozenset(self._items.get(ingredient, ()))

    def snapshot(self) -> Dict[str, FrozenSet[str]]:
        """Copy of the current state, safe to compare against later."""
        return {ingredient: frozenset(tags) for ingredient, tags in self._items.items()}

    def add(self, ingredient: str, contributor: str) -> None:
        """Get or create the entry for an ingredient and union in a contributor."""
        if not contributor:
            raise ValueError("contributor tag must be a non-empty string")
        self._items.setdefault(ingredient, set()).add(contributor)

    def add_dish(self, dish_name: str, ingredients: Iterable[str]) -> None:
        """Tag every ingredient of a dish with the dish name."""
        for ingredient in ingredients:
            self.add(ingredient, dish_name)
        logger.debug("Added dish %s, list now has %d ingredients", dish_name, len(self))

    def add_ingredient(self, ingredient: str) -> None:
        """Add an ingredient by hand, tagged as manual."""
        self.add(ingredient, MANUAL_CONTRIBUTOR)
        logger.debug("Added ingredient %s manually", ingredient)

    def remove_dish(self, dish_name: str) -> List[str]:
        """Drop a dish tag from every entry in the list.

        The sweep covers the whole list, not just the dish's own recipe, so
        stale tags are cleaned up too. Entries left without contributors are
        deleted. Returns the deleted ingredients, sorted.
        """
        for tags in self._items.values():
            tags.discard(dish_name)
        emptied = sorted(ingredient for ingredient, tags in self._items.items() if not tags)
        for ingredient in emptied:
            del self._items[ingredient]
        logger.debug("Removed dish %s, dropped %d ingredients", dish_name, len(emptied))
        return emptied

    def remove_ingredient(self, ingredient: str) -> bool:
        """Delete an ingredient regardless of contributors. False if absent."""
        removed = self._items.pop(ingredient, None) is not None
        if removed:
            logger.debug("Removed ingredient %s", ingredient)
        return removed

    def entries(self) -> List[ShoppingListEntry]:
        """Entries sorted by ingredient name."""
        return [
            ShoppingListEntry(ingredient=ingredient, contributors=list(tags))
            for ingredient, tags in sorted(self._items.items())
        ]

    def render(self) -> Optional[List[ShoppingListEntry]]:
        """Sorted entries, or None when the list is empty."""
        if self.is_empty:
            return None
        return self.entries()

    def persist(self, sink: TextIO) -> int:
        """Write one line per entry to sink. I/O errors propagate.

        Returns:
            Number of lines written
        """
        entries = self.entries()
        for entry in entries:
            sink.write(entry.to_line() + "\n")
        return len(entries)

    def save(self, path: str) -> int:
        """Overwrite the file at path with the current list."""
        with open(path, 'w', encoding='utf-8') as file:
            count = self.persist(file)
        logger.info("Saved %d ingredients to %s", count, path)
        return count
