"""Command scanners -- predicates over one descriptor attribute.

A scanner pairs a target attribute with a comparison mode and
an operand. Registry.find combines scanners with AND/OR. All
variants are frozen dataclasses and never touch the registry.

Available scanners:
    SimpleScanner   EQUALS / NOT_EQUALS on prefix, name,
                    description or has_parameters
    StringScanner   CONTAINS / NOT_CONTAINS on prefix, name
                    or description
    ListScanner     CONTAINS / NOT_CONTAINS on tags
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from scs.scs_modules.commands.types import CommandDescriptor


class ScanTarget(Enum):
    """Descriptor attribute a scanner inspects."""

    PREFIX = "prefix"
    NAME = "name"
    DESCRIPTION = "description"
    HAS_PARAMETERS = "has_parameters"
    TAGS = "tags"


class ScanMode(Enum):
    """Comparison a scanner applies."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"


class CommandScanner(Protocol):
    """Anything Registry.find can evaluate."""

    def scan(self, command: CommandDescriptor) -> bool: ...


_SCALAR_TARGETS = frozenset({
    ScanTarget.PREFIX,
    ScanTarget.NAME,
    ScanTarget.DESCRIPTION,
    ScanTarget.HAS_PARAMETERS,
})
_STRING_TARGETS = frozenset({
    ScanTarget.PREFIX,
    ScanTarget.NAME,
    ScanTarget.DESCRIPTION,
})


def _check(
    scanner: str,
    target: ScanTarget,
    mode: ScanMode,
    targets: frozenset[ScanTarget],
    modes: frozenset[ScanMode],
) -> None:
    if target not in targets:
        msg = f"{scanner} cannot scan target {target.value!r}"
        raise ValueError(msg)
    if mode not in modes:
        msg = f"{scanner} does not support mode {mode.value!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class SimpleScanner:
    """Equality test between value and a scalar attribute."""

    value: object
    target: ScanTarget
    mode: ScanMode = ScanMode.EQUALS

    def __post_init__(self) -> None:
        """Reject targets and modes this scanner cannot apply."""
        _check(
            "SimpleScanner",
            self.target,
            self.mode,
            _SCALAR_TARGETS,
            frozenset({ScanMode.EQUALS, ScanMode.NOT_EQUALS}),
        )

    def scan(self, command: CommandDescriptor) -> bool:
        """Return the (possibly negated) equality result."""
        equal = getattr(command, self.target.value) == self.value
        if self.mode is ScanMode.EQUALS:
            return equal
        return not equal


@dataclass(frozen=True)
class StringScanner:
    """Substring test of value within a string attribute."""

    value: str
    target: ScanTarget
    mode: ScanMode = ScanMode.CONTAINS

    def __post_init__(self) -> None:
        """Reject targets and modes this scanner cannot apply."""
        _check(
            "StringScanner",
            self.target,
            self.mode,
            _STRING_TARGETS,
            frozenset({ScanMode.CONTAINS, ScanMode.NOT_CONTAINS}),
        )

    def scan(self, command: CommandDescriptor) -> bool:
        """Return the (possibly negated) substring result."""
        field_value: str = getattr(command, self.target.value)
        contains = self.value in field_value
        if self.mode is ScanMode.CONTAINS:
            return contains
        return not contains


@dataclass(frozen=True)
class ListScanner:
    """Membership test of value within the tags sequence."""

    value: str
    mode: ScanMode = ScanMode.CONTAINS

    @property
    def target(self) -> ScanTarget:
        return ScanTarget.TAGS

    def __post_init__(self) -> None:
        """Reject modes this scanner cannot apply."""
        _check(
            "ListScanner",
            ScanTarget.TAGS,
            self.mode,
            frozenset({ScanTarget.TAGS}),
            frozenset({ScanMode.CONTAINS, ScanMode.NOT_CONTAINS}),
        )

    def scan(self, command: CommandDescriptor) -> bool:
        """Return the (possibly negated) membership result."""
        contains = self.value in command.tags
        if self.mode is ScanMode.CONTAINS:
            return contains
        return not contains


def prefix_equals(prefix: str) -> SimpleScanner:
    """Scanner matching commands registered under prefix."""
    return SimpleScanner(prefix, ScanTarget.PREFIX)


def name_equals(name: str) -> SimpleScanner:
    """Scanner matching commands named exactly name."""
    return SimpleScanner(name, ScanTarget.NAME)


def has_parameters(*, expected: bool = True) -> SimpleScanner:
    """Scanner matching commands by parameter presence."""
    return SimpleScanner(expected, ScanTarget.HAS_PARAMETERS)
