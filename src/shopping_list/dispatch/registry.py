"""Command registry.

Static table of command definitions (name, parameter names, handler). The
dispatcher checks arity against it, ``help`` lists it and the shell uses it
for completion, so none of them needs to inspect handler signatures.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..models.shopping import CommandResult, CommandUsage


@dataclass(frozen=True)
class CommandDefinition:
    """Describe a single command entry."""
    name: str
    handler: Callable[..., CommandResult]
    params: Tuple[str, ...] = ()
    description: str = ''

    @property
    def arity(self) -> int:
        return len(self.params)

    def usage(self) -> CommandUsage:
        return CommandUsage(name=self.name, params=list(self.params))


class CommandRegistry:
    """Registry of command definitions, kept in registration order."""

    def __init__(self):
        self._definitions: Dict[str, CommandDefinition] = {}

    def register(self, definition: CommandDefinition) -> None:
        """Register a command definition. Names must be unique."""
        if definition.name in self._definitions:
            raise ValueError(f"Command already registered: {definition.name}")
        self._definitions[definition.name] = definition

    def get(self, command_name: str) -> Optional[CommandDefinition]:
        """Lookup a command definition by name."""
        if not command_name:
            return None
        return self._definitions.get(command_name)

    def __contains__(self, command_name: object) -> bool:
        return command_name in self._definitions

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def names(self) -> List[str]:
        return list(self._definitions)

    def usages(self) -> List[CommandUsage]:
        """Usage hints for every command, in registration order."""
        return [definition.usage() for definition in self]
