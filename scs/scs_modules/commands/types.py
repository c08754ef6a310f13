"""Command type definitions for the SCS registry and dispatcher."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class SemanticType(Enum):
    """Closed set of parameter types the dispatcher can coerce to."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ENUM = "enum"
    STRING = "string"
    UNSUPPORTED = "unsupported"


class FindCondition(Enum):
    """How Registry.find combines its scanners."""

    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class ParameterSpec:
    """One positional parameter of a command signature."""

    name: str
    semantic_type: SemanticType
    has_default: bool = False
    default: object = None
    enum_type: type[Enum] | None = None


@dataclass(frozen=True)
class CommandDeclaration:
    """Registration input produced by command discovery.

    prefix and description may be None; the registry replaces
    them with its standard values.
    """

    function: Callable[..., object]
    name: str
    prefix: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()
    parameters: tuple[ParameterSpec, ...] = ()


@dataclass(frozen=True, eq=False)
class CommandDescriptor:
    """Metadata and callable of one registered command.

    Only prefix, name and parameters take part in dispatch;
    description and tags are informational. Descriptors compare
    by identity: duplicate registrations are distinct commands.
    """

    prefix: str
    name: str
    description: str
    function: Callable[..., object]
    tags: tuple[str, ...] = ()
    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def has_parameters(self) -> bool:
        """True if the command declares any positional parameter."""
        return len(self.parameters) > 0

    @property
    def usage(self) -> str:
        """Invocation text, e.g. '/greet <name> [times]'."""
        parts = [f"{self.prefix}{self.name}"]
        for parameter in self.parameters:
            if parameter.has_default:
                parts.append(f"[{parameter.name}]")
            else:
                parts.append(f"<{parameter.name}>")
        return " ".join(parts)


@dataclass(frozen=True)
class DispatchSuccess:
    """Result of a dispatch that invoked a command."""

    command: CommandDescriptor
    arguments: tuple[object, ...]
    value: object = None
