"""Command-line interface commands."""

import logging
import sys
from typing import Optional

import click

from ..config import app_config, recipe_config
from ..dispatch import Dispatcher, Session
from ..utils.recipe_loader import RecipeLoader
from .shell import make_prompt_reader, run_shell


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, app_config.effective_log_level, logging.WARNING),
        format="%(levelname)s: %(message)s",
    )


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context):
    """Shopping list builder - assemble a shopping list from recipes."""
    configure_logging()
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.option('--recipes-dir', type=str, default=None, help='Directory of recipe files')
@click.option('--output', type=str, default=None, help='Where save writes the shopping list')
def shell(recipes_dir: Optional[str], output: Optional[str]):
    """Start the interactive shopping list shell."""
    recipes_dir = recipes_dir or recipe_config.recipes_dir
    output = output or app_config.shopping_list_path

    try:
        catalog = RecipeLoader(recipe_config.extension).load_catalog(recipes_dir)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error loading recipes: {str(e)}")
        sys.exit(1)

    dispatcher = Dispatcher(Session.create(catalog, output_path=output))
    run_shell(dispatcher, make_prompt_reader(dispatcher))


@main.command('dishes')
@click.option('--recipes-dir', type=str, default=None, help='Directory of recipe files')
def dishes(recipes_dir: Optional[str]):
    """List the dishes available in the recipe directory."""
    recipes_dir = recipes_dir or recipe_config.recipes_dir

    try:
        catalog = RecipeLoader(recipe_config.extension).load_catalog(recipes_dir)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error loading recipes: {str(e)}")
        sys.exit(1)

    if not len(catalog):
        click.echo(f"📭 No recipes found in {recipes_dir}")
        return

    for dish_name in catalog.list_dishes():
        click.echo(dish_name)
