"""Recipe catalog: read-only lookups over the loaded dishes."""

from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Sequence, Tuple

from ..errors import RecipeNotFound
from ..models.shopping import Recipe


class RecipeCatalog:
    """Immutable mapping from dish name to its ingredient lines."""

    def __init__(self, recipes: Mapping[str, Sequence[str]]):
        self._recipes = MappingProxyType(
            {name: tuple(ingredients) for name, ingredients in recipes.items()}
        )

    @classmethod
    def from_recipes(cls, recipes: Iterable[Recipe]) -> 'RecipeCatalog':
        """Build a catalog from loaded Recipe models. Later duplicates win."""
        return cls({recipe.name: recipe.ingredients for recipe in recipes})

    def __contains__(self, dish_name: object) -> bool:
        return dish_name in self._recipes

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._recipes)

    @property
    def recipes(self) -> Mapping[str, Tuple[str, ...]]:
        return self._recipes

    def get_ingredients(self, dish_name: str) -> Tuple[str, ...]:
        """Ingredient lines for a dish, in file order.

        Raises:
            RecipeNotFound: if the dish is not in the catalog
        """
        try:
            return self._recipes[dish_name]
        except KeyError:
            raise RecipeNotFound(dish_name) from None

    def list_dishes(self) -> List[str]:
        """Dish names sorted lexicographically."""
        return sorted(self._recipes)

    def show_recipe(self, dish_name: str) -> List[str]:
        """Ingredient lines of a dish sorted lexicographically."""
        return sorted(self.get_ingredients(dish_name))
