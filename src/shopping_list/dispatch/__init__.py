"""Command registry, handlers and dispatcher."""

from .registry import CommandDefinition, CommandRegistry
from .handlers import build_default_registry
from .session import Session
from .dispatcher import Dispatcher, tokenize

__all__ = [
    'CommandDefinition',
    'CommandRegistry',
    'build_default_registry',
    'Session',
    'Dispatcher',
    'tokenize',
]
