"""Recipe file loading utilities."""

import logging
import os
from pathlib import Path
from typing import List

from ..models.shopping import Recipe
from ..services.catalog_service import RecipeCatalog

logger = logging.getLogger(__name__)


class RecipeLoader:
    """Loads dish files from a directory.

    Each file named ``<dish><extension>`` is one recipe; every non-blank line
    is an ingredient, kept in file order.
    """

    def __init__(self, extension: str = '.dish'):
        self.extension = extension

    def get_all_recipe_files(self, directory: str) -> List[str]:
        """Get all recipe files in a directory."""
        if not os.path.isdir(directory):
            raise FileNotFoundError(f"Recipe directory not found: {directory}")

        recipe_files = []
        for filename in os.listdir(directory):
            if filename.endswith(self.extension):
                recipe_files.append(os.path.join(directory, filename))

        return sorted(recipe_files)

    def load_recipe(self, file_path: str) -> Recipe:
        """Load one recipe file."""
        path = Path(file_path)
        name = path.name[:-len(self.extension)] if self.extension else path.name
        with open(path, 'r', encoding='utf-8') as file:
            ingredients = tuple(line.rstrip('\r\n') for line in file if line.strip())
        return Recipe(name=name, ingredients=ingredients, source_path=str(path))

    def load_directory(self, directory: str) -> List[Recipe]:
        """Load every recipe file in a directory."""
        recipes = [self.load_recipe(path) for path in self.get_all_recipe_files(directory)]
        logger.info("Loaded %d recipes from %s", len(recipes), directory)
        return recipes

    def load_catalog(self, directory: str) -> RecipeCatalog:
        """Load a directory straight into a read-only catalog."""
        return RecipeCatalog.from_recipes(self.load_directory(directory))
