"""Dispatcher: parse an input line and route it to a registered command."""

import logging
from typing import List, Tuple

from ..errors import ArityMismatch, ShoppingListError, UnknownCommand
from ..models.shopping import CommandResult
from .registry import CommandDefinition, CommandRegistry
from .session import Session

logger = logging.getLogger(__name__)


def tokenize(line: str) -> List[str]:
    """Split an input line on whitespace. No quoting or escaping."""
    return line.split()


class Dispatcher:
    """Validates raw input lines and invokes command handlers on a session."""

    def __init__(self, session: Session):
        self.session = session

    @property
    def registry(self) -> CommandRegistry:
        return self.session.registry

    def resolve(self, line: str) -> Tuple[CommandDefinition, List[str]]:
        """Find the command for a line and check its argument count.

        Raises:
            UnknownCommand: empty input or an unregistered command name
            ArityMismatch: wrong number of arguments for the command
        """
        tokens = tokenize(line)
        if not tokens:
            raise UnknownCommand('')

        name, args = tokens[0], tokens[1:]
        definition = self.registry.get(name)
        if definition is None:
            raise UnknownCommand(name)
        if len(args) != definition.arity:
            raise ArityMismatch(name, definition.arity, len(args))
        return definition, args

    def execute(self, line: str) -> CommandResult:
        """Run a line, letting command errors propagate."""
        definition, args = self.resolve(line)
        logger.debug("Dispatching %s %s", definition.name, args)
        return definition.handler(self.session, *args)

    def dispatch(self, line: str) -> CommandResult:
        """Run a line, turning command errors into a failed result."""
        try:
            return self.execute(line)
        except ShoppingListError as e:
            logger.info("Command %r failed: %s: %s", line.strip(), e.kind, e)
            tokens = tokenize(line)
            return CommandResult(
                command=tokens[0] if tokens else None,
                success=False,
                error=e.kind,
                message=str(e),
            )

    def completions(self) -> List[str]:
        """Words offered for tab completion: command names, then dish names."""
        return self.registry.names() + list(self.session.catalog)
