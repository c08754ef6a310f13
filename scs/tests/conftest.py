"""Shared test fixtures for SCS test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from scs.scs_modules import io_ops
from scs.scs_modules.commands.dispatch import Dispatcher
from scs.scs_modules.commands.registry import CommandRegistry
from scs.scs_modules.commands.types import (
    CommandDescriptor,
    ParameterSpec,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _reset_foreground() -> Iterator[None]:
    """Keep the console color from leaking between tests."""
    io_ops.set_foreground(None)
    yield
    io_ops.set_foreground(None)


@pytest.fixture
def registry() -> CommandRegistry:
    """Return an empty registry with default settings."""
    return CommandRegistry()


@pytest.fixture
def dispatcher(registry: CommandRegistry) -> Dispatcher:
    """Return a dispatcher over the registry fixture."""
    return Dispatcher(registry)


@pytest.fixture
def calls() -> list[tuple[str, tuple[object, ...]]]:
    """Return a list that recording commands append to."""
    return []


@pytest.fixture
def make_command(
    calls: list[tuple[str, tuple[object, ...]]],
) -> Callable[..., CommandDescriptor]:
    """Return a factory for recording command descriptors.

    Each parameter is a (name, SemanticType) pair or a
    (name, SemanticType, default) triple. Invoking the command
    appends (label, args) to the calls fixture.
    """

    def _make(
        name: str,
        *params: tuple[object, ...],
        prefix: str = "/",
        label: str | None = None,
        description: str = "No description.",
        tags: tuple[str, ...] = (),
    ) -> CommandDescriptor:
        specs = []
        for param in params:
            if len(param) == 3:  # noqa: PLR2004
                specs.append(
                    ParameterSpec(
                        name=str(param[0]),
                        semantic_type=param[1],  # type: ignore[arg-type]
                        has_default=True,
                        default=param[2],
                    ),
                )
            else:
                specs.append(
                    ParameterSpec(
                        name=str(param[0]),
                        semantic_type=param[1],  # type: ignore[arg-type]
                    ),
                )
        tag = label or name

        def _record(*args: object) -> str:
            calls.append((tag, args))
            return tag

        return CommandDescriptor(
            prefix=prefix,
            name=name,
            description=description,
            function=_record,
            tags=tags,
            parameters=tuple(specs),
        )

    return _make

