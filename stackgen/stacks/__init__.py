"""Registry of the stacks stack-generator can create.

The registry is built once at import time from a fixed list and exposed as a
read-only mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping

from ..prompts import Prompter
from ..runner import CommandRunner
from .mern import create_mern_app

StackHandler = Callable[[Path, Prompter, CommandRunner], Awaitable[None]]


class StackNotImplementedError(Exception):
    """Raised when a stack key has no registered handler."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Stack {key} is not implemented yet.")


@dataclass(frozen=True)
class StackDefinition:
    key: str
    name: str
    description: str
    handler: StackHandler


AVAILABLE_STACKS: Mapping[str, StackDefinition] = MappingProxyType({
    definition.key: definition
    for definition in (
        StackDefinition(
            key="MERN",
            name="MERN Stack",
            description="MongoDB, Express.js, React.js, Node.js",
            handler=create_mern_app,
        ),
    )
})


def get_stack(key: str) -> StackDefinition:
    """Look up a stack by key.

    Raises:
        StackNotImplementedError: If *key* is not registered.
    """
    try:
        return AVAILABLE_STACKS[key]
    except KeyError:
        raise StackNotImplementedError(key) from None


__all__ = [
    "AVAILABLE_STACKS",
    "StackDefinition",
    "StackHandler",
    "StackNotImplementedError",
    "get_stack",
]
