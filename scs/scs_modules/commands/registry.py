"""Command registry and scanner-based lookup.

The registry keeps descriptors in registration order (the
dispatch tie-break) and the distinct prefixes in first-seen
order. Dispatch reads through a RegistrySnapshot so a single
dispatch never sees a half-applied registration.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scs.scs_modules.commands.types import (
    CommandDeclaration,
    CommandDescriptor,
    FindCondition,
)
from scs.scs_modules.types import RegistrySettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scs.scs_modules.commands.scanners import CommandScanner

logger = logging.getLogger(__name__)


def find_commands(
    commands: Iterable[CommandDescriptor],
    scanners: tuple[CommandScanner, ...],
    condition: FindCondition = FindCondition.AND,
) -> list[CommandDescriptor]:
    """Filter commands by scanners, preserving order.

    AND keeps a command when every scanner accepts it and stops
    at the first rejection. OR keeps it when any scanner does;
    each command appears at most once.
    """
    if condition is FindCondition.AND:
        return [
            cmd for cmd in commands
            if all(s.scan(cmd) for s in scanners)
        ]
    return [
        cmd for cmd in commands
        if any(s.scan(cmd) for s in scanners)
    ]


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable view of the registry at one point in time."""

    commands: tuple[CommandDescriptor, ...]
    prefixes: tuple[str, ...]

    def find(
        self,
        *scanners: CommandScanner,
        condition: FindCondition = FindCondition.AND,
    ) -> list[CommandDescriptor]:
        """Return snapshot commands matching scanners."""
        return find_commands(self.commands, scanners, condition)


class CommandRegistry:
    """Ordered set of registered commands and their prefixes."""

    def __init__(
        self,
        settings: RegistrySettings | None = None,
    ) -> None:
        self.settings = settings or RegistrySettings()
        self._commands: list[CommandDescriptor] = []
        self._prefixes: dict[str, None] = {}
        self._lock = threading.RLock()

    @property
    def commands(self) -> tuple[CommandDescriptor, ...]:
        """All registered commands in registration order."""
        with self._lock:
            return tuple(self._commands)

    @property
    def prefixes(self) -> tuple[str, ...]:
        """Distinct prefixes in first-seen order."""
        with self._lock:
            return tuple(self._prefixes)

    def snapshot(self) -> RegistrySnapshot:
        """Return a consistent view of commands and prefixes."""
        with self._lock:
            return RegistrySnapshot(
                commands=tuple(self._commands),
                prefixes=tuple(self._prefixes),
            )

    def register(self, command: CommandDescriptor) -> None:
        """Append a command and record its prefix.

        Duplicates (same prefix and name) are allowed and
        coexist; dispatch ordering decides between them.
        """
        with self._lock:
            self._commands.append(command)
            self._prefixes.setdefault(command.prefix, None)
        logger.debug(
            "Registered command %s%s (%d parameters)",
            command.prefix, command.name, len(command.parameters),
        )

    def register_declaration(
        self,
        declaration: CommandDeclaration,
    ) -> CommandDescriptor:
        """Build a descriptor from a declaration and register it.

        A None prefix or description takes the standard value
        from settings. All whitespace is removed from the name.
        """
        prefix = declaration.prefix
        if prefix is None:
            prefix = self.settings.standard_prefix
        description = declaration.description
        if description is None:
            description = self.settings.standard_description
        command = CommandDescriptor(
            prefix=prefix,
            name="".join(declaration.name.split()),
            description=description,
            function=declaration.function,
            tags=tuple(declaration.tags),
            parameters=tuple(declaration.parameters),
        )
        self.register(command)
        return command

    def register_declarations(
        self,
        declarations: Iterable[CommandDeclaration],
    ) -> list[CommandDescriptor]:
        """Register declarations in order. Returns the descriptors."""
        return [self.register_declaration(d) for d in declarations]

    def find(
        self,
        *scanners: CommandScanner,
        condition: FindCondition = FindCondition.AND,
    ) -> list[CommandDescriptor]:
        """Return registered commands matching scanners.

        With no scanners AND matches everything and OR nothing.
        """
        return self.snapshot().find(*scanners, condition=condition)
