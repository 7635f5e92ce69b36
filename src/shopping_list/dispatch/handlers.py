"""Command handlers.

Every handler takes the session first, then its positional string arguments,
and returns a CommandResult. Errors are raised as ShoppingListError
subclasses before any mutation happens.
"""

import logging

from ..errors import PersistenceFailure, RecipeNotFound
from ..models.shopping import CommandResult
from .registry import CommandDefinition, CommandRegistry

logger = logging.getLogger(__name__)


def help_command(session) -> CommandResult:
    return CommandResult(
        command='help',
        message="List of available commands:",
        usages=session.registry.usages(),
    )


def list_dishes(session) -> CommandResult:
    return CommandResult(command='list_dishes', items=session.catalog.list_dishes())


def show_recipe(session, dish_name: str) -> CommandResult:
    return CommandResult(command='show_recipe', items=session.catalog.show_recipe(dish_name))


def add_dish(session, dish_name: str) -> CommandResult:
    if dish_name not in session.catalog:
        raise RecipeNotFound(dish_name, f"Could not find recipe for {dish_name}.")

    message = f"Adding {dish_name} to shopping list."
    logger.info(message)
    session.shopping_list.add_dish(dish_name, session.catalog.get_ingredients(dish_name))
    return CommandResult(command='add_dish', message=message)


def add_ingredient(session, ingredient: str) -> CommandResult:
    session.shopping_list.add_ingredient(ingredient)
    return CommandResult(command='add_ingredient')


def remove_dish(session, dish_name: str) -> CommandResult:
    session.shopping_list.remove_dish(dish_name)
    return CommandResult(command='remove_dish')


def remove_ingredient(session, ingredient: str) -> CommandResult:
    session.shopping_list.remove_ingredient(ingredient)
    return CommandResult(command='remove_ingredient')


def show_shopping_list(session) -> CommandResult:
    entries = session.shopping_list.render()
    if entries is None:
        return CommandResult(command='show_shopping_list', message="Empty", empty=True)
    return CommandResult(command='show_shopping_list', entries=entries)


def save(session) -> CommandResult:
    path = session.output_path
    try:
        session.shopping_list.save(path)
    except OSError as e:
        raise PersistenceFailure(path, e.strerror or str(e)) from e
    return CommandResult(command='save', message="Success!")


def build_default_registry() -> CommandRegistry:
    """Registry with every shopping list command, in help order."""
    registry = CommandRegistry()
    for definition in (
        CommandDefinition('help', help_command, (), "List available commands"),
        CommandDefinition('list_dishes', list_dishes, (), "List known dishes"),
        CommandDefinition('show_recipe', show_recipe, ('dish_name',), "Show a dish's ingredients"),
        CommandDefinition('add_dish', add_dish, ('dish_name',), "Add a dish's ingredients to the list"),
        CommandDefinition('add_ingredient', add_ingredient, ('ingredient',), "Add a single ingredient"),
        CommandDefinition('remove_dish', remove_dish, ('dish_name',), "Remove a dish from the list"),
        CommandDefinition('remove_ingredient', remove_ingredient, ('ingredient',), "Remove an ingredient"),
        CommandDefinition('show_shopping_list', show_shopping_list, (), "Show the shopping list"),
        CommandDefinition('save', save, (), "Save the shopping list to a file"),
    ):
        registry.register(definition)
    return registry
