"""Command dispatch -- central entry point for text commands.

Turns one input line into a command invocation:

    "c!beep 3"
        -> prefix "c!" (longest registered prefix the line starts with)
        -> name "beep", raw arguments ["3"]
        -> candidates: prefix == "c!", name == "beep", has parameters
           (most recently registered first, since arguments were given)
        -> first candidate whose parameters coerce is invoked

No failure escapes execute(). Unrecognized input and argument
problems come back as IOFailure(DispatchError) and are passed
to the optional warning handler.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

from scs.scs_modules.commands.coercion import bind_arguments
from scs.scs_modules.commands.parsing import resolve_prefix, split_command
from scs.scs_modules.commands.scanners import (
    has_parameters,
    name_equals,
    prefix_equals,
)
from scs.scs_modules.commands.types import DispatchSuccess
from scs.scs_modules.errors import DispatchError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from scs.scs_modules.commands.registry import (
        CommandRegistry,
        RegistrySnapshot,
    )
    from scs.scs_modules.commands.types import CommandDescriptor

    WarningHandler = Callable[[DispatchError], None]

logger = logging.getLogger(__name__)


def execute_command(
    command: CommandDescriptor,
    arguments: Sequence[object] = (),
) -> IOResult[object, DispatchError]:
    """Invoke a command's callable with positional arguments.

    Any exception raised by the callable is returned as
    IOFailure(InvocationFailure). Never raises.
    """
    try:
        value = command.function(*arguments)
    except Exception as exc:  # noqa: BLE001
        return IOFailure(
            DispatchError(
                step_name="dispatch.execute_command",
                error_type="InvocationFailure",
                message=(
                    f"{command.prefix}{command.name}"
                    f" failed: {exc}"
                ),
                context={
                    "command": f"{command.prefix}{command.name}",
                    "arguments": list(arguments),
                    "exception": type(exc).__name__,
                },
            ),
        )
    return IOSuccess(value)


def select_candidates(
    snapshot: RegistrySnapshot,
    prefix: str,
    name: str,
    *,
    with_arguments: bool,
) -> Result[list[CommandDescriptor], DispatchError]:
    """Find the commands a parsed line may refer to.

    Without arguments, candidates keep registration order.
    With arguments, only commands that take parameters qualify
    and the most recently registered is tried first.
    """
    if with_arguments:
        candidates = snapshot.find(
            prefix_equals(prefix),
            name_equals(name),
            has_parameters(expected=True),
        )
        candidates.reverse()
    else:
        candidates = snapshot.find(
            prefix_equals(prefix),
            name_equals(name),
        )

    if not candidates:
        return Failure(
            DispatchError(
                step_name="dispatch.select_candidates",
                error_type="NoCandidate",
                message=f"Unknown command '{prefix}{name}'",
                context={
                    "prefix": prefix,
                    "name": name,
                    "with_arguments": with_arguments,
                },
            ),
        )
    return Success(candidates)


class Dispatcher:
    """Parses input lines and invokes matching registry commands."""

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        on_warning: WarningHandler | None = None,
    ) -> None:
        self._registry = registry
        self._on_warning = on_warning

    def execute(
        self,
        message: str,
    ) -> IOResult[DispatchSuccess, DispatchError]:
        """Parse a message into a command and execute it.

        Returns IOSuccess(DispatchSuccess) when a command ran, or
        IOFailure(DispatchError) whose warning tells WrongCommand
        from WrongArguments. The warning handler, when set, is
        called with every failure.
        """
        result = self._dispatch(message)
        if isinstance(result, IOFailure):
            error = unsafe_perform_io(result.failure())
            logger.info("%s: %s", error.warning.value, error.message)
            if self._on_warning is not None:
                self._on_warning(error)
        return result

    def _dispatch(
        self,
        message: str,
    ) -> IOResult[DispatchSuccess, DispatchError]:
        snapshot = self._registry.snapshot()
        prefix = resolve_prefix(message, snapshot.prefixes)
        logger.debug("Resolved prefix %r for %r", prefix, message)

        split_result = split_command(message[len(prefix):])
        if isinstance(split_result, Failure):
            return IOFailure(split_result.failure())
        name, raw_arguments = split_result.unwrap()

        candidates_result = select_candidates(
            snapshot,
            prefix,
            name,
            with_arguments=bool(raw_arguments),
        )
        if isinstance(candidates_result, Failure):
            return IOFailure(candidates_result.failure())
        candidates = candidates_result.unwrap()
        logger.debug(
            "%d candidate(s) for %s%s with %d argument(s)",
            len(candidates), prefix, name, len(raw_arguments),
        )

        last_error: DispatchError | None = None
        for command in candidates:
            if not command.has_parameters:
                return _invoke(command, ())
            bound = bind_arguments(command, raw_arguments)
            if isinstance(bound, Failure):
                last_error = bound.failure()
                logger.debug("Skipping candidate: %s", last_error)
                continue
            return _invoke(command, bound.unwrap())

        return IOFailure(
            DispatchError(
                step_name="dispatch.execute",
                error_type="CoercionFailure",
                message=(
                    f"No overload of '{prefix}{name}'"
                    f" accepts arguments {raw_arguments}"
                ),
                context={
                    "command": f"{prefix}{name}",
                    "arguments": raw_arguments,
                    "candidates": len(candidates),
                    "last_error": str(last_error),
                },
            ),
        )


def _invoke(
    command: CommandDescriptor,
    arguments: tuple[object, ...],
) -> IOResult[DispatchSuccess, DispatchError]:
    logger.debug(
        "Invoking %s%s with %r", command.prefix, command.name, arguments,
    )

    def _wrap(value: object) -> DispatchSuccess:
        return DispatchSuccess(
            command=command,
            arguments=arguments,
            value=value,
        )

    return execute_command(command, arguments).map(_wrap)
