"""Configuration management for the shopping list application."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class RecipeConfig:
    """Recipe source configuration."""
    
    def __init__(self):
        self.recipes_dir = os.getenv('RECIPES_DIR', 'recipes')
        self.extension = os.getenv('RECIPE_EXTENSION', '.dish')


class AppConfig:
    """Application configuration."""
    
    def __init__(self):
        self.shopping_list_path = os.getenv('SHOPPING_LIST_PATH', 'list.txt')
        self.log_level = os.getenv('LOG_LEVEL', 'WARNING')
        self.debug = os.getenv('DEBUG', 'false').lower() == 'true'

    @property
    def effective_log_level(self) -> str:
        """Log level name, forced to DEBUG when debug mode is on."""
        return 'DEBUG' if self.debug else self.log_level.upper()


# Global configuration instances
recipe_config = RecipeConfig()
app_config = AppConfig()
