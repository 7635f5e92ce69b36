"""Shopping list data models."""

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


# Contributor tag for ingredients added directly rather than through a dish
MANUAL_CONTRIBUTOR = 'manual'


class Recipe(BaseModel):
    """Recipe model: a dish and its ingredient lines, in file order."""

    model_config = ConfigDict(frozen=True)

    name: str
    ingredients: Tuple[str, ...] = ()
    source_path: Optional[str] = None


class ShoppingListEntry(BaseModel):
    """One rendered shopping list line."""

    ingredient: str
    contributors: List[str] = Field(min_length=1)

    @property
    def contributor_text(self) -> str:
        return ", ".join(self.contributors)

    def to_line(self) -> str:
        """Format the entry the way it is written to the saved list."""
        return f"{self.ingredient} -- {self.contributor_text}"


class CommandUsage(BaseModel):
    """Usage hint for a registered command."""

    name: str
    params: List[str] = Field(default_factory=list)


class CommandResult(BaseModel):
    """Outcome of a dispatched command, ready for the shell to render."""

    command: Optional[str] = None
    success: bool = True
    error: Optional[str] = None  # error kind, e.g. 'UnknownCommand'
    message: Optional[str] = None

    # Populated depending on the command
    items: List[str] = Field(default_factory=list)
    entries: List[ShoppingListEntry] = Field(default_factory=list)
    usages: List[CommandUsage] = Field(default_factory=list)
    empty: bool = False
