"""Interactive shell: read a line, dispatch it, render the result."""

import logging
from typing import Callable, List

import click
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

from ..dispatch.dispatcher import Dispatcher
from ..models.shopping import CommandResult

logger = logging.getLogger(__name__)

QUIT_TOKEN = 'quit'
BANNER = "Enter a command. Type help for list of commands. Type quit to leave."
PROMPT = '> '


def render_result(result: CommandResult) -> List[str]:
    """Styled output lines for a command result."""
    lines = []

    if result.usages:
        lines.append("")
        lines.append(click.style(result.message, bold=True))
        for usage in result.usages:
            args = ""
            if usage.params:
                args = " -- " + click.style(", ".join(usage.params), fg='yellow')
            lines.append(click.style(usage.name, fg='green') + args)
        return lines

    if result.empty:
        lines.append(click.style(result.message, fg='yellow'))
        return lines

    if result.message:
        lines.append(result.message)

    for item in result.items:
        lines.append(click.style(item, fg='yellow'))

    for entry in result.entries:
        lines.append(
            click.style(entry.ingredient, fg='green')
            + " -- "
            + click.style(entry.contributor_text, fg='yellow')
        )

    return lines


def make_completer(dispatcher: Dispatcher) -> WordCompleter:
    """Completes the word before the cursor with a command or dish name."""
    return WordCompleter(dispatcher.completions())


def make_prompt_reader(dispatcher: Dispatcher) -> Callable[[], str]:
    """Line reader with history and completion of commands and dish names."""
    prompt_session = PromptSession(completer=make_completer(dispatcher))
    return lambda: prompt_session.prompt(PROMPT)


def run_shell(
    dispatcher: Dispatcher,
    read_line: Callable[[], str],
    echo: Callable[..., None] = click.echo
) -> int:
    """Run the read-dispatch-render loop until quit or end of input.

    Args:
        dispatcher: Dispatcher bound to the session
        read_line: Returns the next input line; EOFError or
            KeyboardInterrupt end the session
        echo: Output function

    Returns:
        Number of lines dispatched
    """
    dispatched = 0

    while True:
        echo(click.style(BANNER, bold=True))
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            echo()
            break

        if line.strip() == QUIT_TOKEN:
            echo("K, bye!")
            break

        result = dispatcher.dispatch(line)
        dispatched += 1
        for output_line in render_result(result):
            echo(output_line)
        echo()
        echo()

    logger.debug("Shell finished after %d commands", dispatched)
    return dispatched
