"""Tests for recipe file loading."""

import sys
from pathlib import Path
import pytest

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from shopping_list.utils.recipe_loader import RecipeLoader


@pytest.fixture
def recipes_dir(tmp_path):
    """Directory with two dish files and one unrelated file."""
    (tmp_path / "pasta.dish").write_text("tomato\npasta\nbasil\n")
    (tmp_path / "salad.dish").write_text("lettuce\n\ncucumber")
    (tmp_path / "notes.txt").write_text("not a recipe\n")
    return tmp_path


def test_get_all_recipe_files(recipes_dir):
    """Test only files with the recipe extension are picked up."""
    loader = RecipeLoader()
    
    recipe_files = loader.get_all_recipe_files(str(recipes_dir))
    
    assert len(recipe_files) == 2
    assert any("pasta.dish" in f for f in recipe_files)
    assert any("salad.dish" in f for f in recipe_files)


def test_load_recipe_keeps_line_order(recipes_dir):
    """Test dish name comes from the file name and lines keep their order."""
    loader = RecipeLoader()
    
    recipe = loader.load_recipe(str(recipes_dir / "pasta.dish"))
    
    assert recipe.name == "pasta"
    assert recipe.ingredients == ("tomato", "pasta", "basil")


def test_load_recipe_skips_blank_lines(recipes_dir):
    """Test blank lines and a missing final newline."""
    loader = RecipeLoader()
    
    recipe = loader.load_recipe(str(recipes_dir / "salad.dish"))
    
    assert recipe.ingredients == ("lettuce", "cucumber")


def test_load_catalog(recipes_dir):
    """Test loading a directory into a catalog."""
    catalog = RecipeLoader().load_catalog(str(recipes_dir))
    
    assert catalog.list_dishes() == ["pasta", "salad"]
    assert catalog.show_recipe("pasta") == ["basil", "pasta", "tomato"]


def test_custom_extension(tmp_path):
    """Test a loader configured for another extension."""
    (tmp_path / "soup.recipe").write_text("onion\n")
    (tmp_path / "pasta.dish").write_text("tomato\n")
    
    catalog = RecipeLoader(extension=".recipe").load_catalog(str(tmp_path))
    
    assert catalog.list_dishes() == ["soup"]


def test_missing_directory(tmp_path):
    """Test a missing recipe directory is reported."""
    with pytest.raises(FileNotFoundError):
        RecipeLoader().load_catalog(str(tmp_path / "nope"))
