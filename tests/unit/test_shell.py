"""Tests for the interactive shell and CLI."""

import sys
from pathlib import Path
import click
import pytest
from click.testing import CliRunner
from prompt_toolkit.document import Document

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from shopping_list.cli.commands import main
from shopping_list.cli.shell import BANNER, make_completer, render_result, run_shell
from shopping_list.dispatch import Dispatcher, Session
from shopping_list.services.catalog_service import RecipeCatalog


def make_dispatcher(tmp_path):
    catalog = RecipeCatalog({"pasta": ["tomato", "pasta"]})
    return Dispatcher(Session.create(catalog, output_path=str(tmp_path / "list.txt")))


def feed(lines):
    """Line reader returning lines in turn, then end of input."""
    iterator = iter(lines)
    
    def read_line():
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return read_line


def collect():
    output = []
    
    def echo(message=""):
        output.append(click.unstyle(message))
    return output, echo


def test_run_shell_until_quit(tmp_path):
    """Test the loop dispatches lines and stops at quit."""
    dispatcher = make_dispatcher(tmp_path)
    output, echo = collect()
    
    count = run_shell(
        dispatcher,
        feed(["add_dish pasta", "show_shopping_list", "quit", "add_ingredient milk"]),
        echo
    )
    
    assert count == 2
    assert output[0] == BANNER
    assert "Adding pasta to shopping list." in output
    assert "pasta -- pasta" in output
    assert "tomato -- pasta" in output
    assert output[-1] == "K, bye!"
    assert "milk" not in dispatcher.session.shopping_list


def test_run_shell_survives_errors(tmp_path):
    """Test command errors do not end the session."""
    dispatcher = make_dispatcher(tmp_path)
    output, echo = collect()
    
    count = run_shell(
        dispatcher,
        feed(["frobnicate", "remove_dish", "add_dish lasagna", "add_ingredient milk"]),
        echo
    )
    
    assert count == 4
    assert "No such command." in output
    assert "Wrong args." in output
    assert "Could not find recipe for lasagna." in output
    assert dispatcher.session.shopping_list.snapshot() == {"milk": frozenset({"manual"})}


def test_run_shell_end_of_input(tmp_path):
    """Test end of input ends the loop without a command."""
    output, echo = collect()
    
    assert run_shell(make_dispatcher(tmp_path), feed([]), echo) == 0


def test_render_help(tmp_path):
    """Test help output lists commands with parameters."""
    dispatcher = make_dispatcher(tmp_path)
    
    lines = [click.unstyle(line) for line in render_result(dispatcher.dispatch("help"))]
    
    assert lines[0] == ""
    assert lines[1] == "List of available commands:"
    assert "help" in lines
    assert "add_dish -- dish_name" in lines


def test_render_empty_list(tmp_path):
    """Test the empty list renders its indicator."""
    dispatcher = make_dispatcher(tmp_path)
    
    lines = render_result(dispatcher.dispatch("show_shopping_list"))
    
    assert [click.unstyle(line) for line in lines] == ["Empty"]


def test_dishes_command(tmp_path):
    """Test listing dishes from the command line."""
    (tmp_path / "salad.dish").write_text("lettuce\n")
    (tmp_path / "pasta.dish").write_text("tomato\npasta\n")
    runner = CliRunner()
    
    result = runner.invoke(main, ['dishes', '--recipes-dir', str(tmp_path)])
    
    assert result.exit_code == 0
    assert result.output.splitlines() == ["pasta", "salad"]


def test_dishes_missing_directory(tmp_path):
    """Test a missing recipe directory exits with an error."""
    runner = CliRunner()
    
    result = runner.invoke(main, ['dishes', '--recipes-dir', str(tmp_path / "nope")])
    
    assert result.exit_code == 1
    assert "Error loading recipes" in result.output


def test_completer_completes_dish_after_command(tmp_path):
    """Test tab completion offers dish names for the word under the cursor."""
    completer = make_completer(make_dispatcher(tmp_path))
    
    words = [c.text for c in completer.get_completions(Document("add_dish pa"), None)]
    
    assert "pasta" in words
    assert "add_dish" not in words


def test_completer_completes_command_name(tmp_path):
    """Test tab completion of a command name at the start of the line."""
    completer = make_completer(make_dispatcher(tmp_path))
    
    words = [c.text for c in completer.get_completions(Document("add_"), None)]
    
    assert words == ["add_dish", "add_ingredient"]


def test_dishes_undecodable_recipe(tmp_path):
    """Test a recipe file that is not UTF-8 exits with an error."""
    (tmp_path / "bad.dish").write_bytes(b"caf\xe9\n")
    runner = CliRunner()
    
    result = runner.invoke(main, ['dishes', '--recipes-dir', str(tmp_path)])
    
    assert result.exit_code == 1
    assert "Error loading recipes" in result.output
