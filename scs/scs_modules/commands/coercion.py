"""Argument coercion -- raw text to declared parameter types.

A closed rule set keyed by SemanticType. Unsupported types
fail closed; nothing falls back to a generic conversion.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.result import Failure, Result, Success

from scs.scs_modules.commands.types import SemanticType
from scs.scs_modules.errors import DispatchError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from enum import Enum

    from scs.scs_modules.commands.types import (
        CommandDescriptor,
        ParameterSpec,
    )

_BOOLEANS = {"true": True, "false": False}


def _parse_bool(raw: str) -> bool:
    try:
        return _BOOLEANS[raw.strip().lower()]
    except KeyError:
        msg = f"not a boolean: {raw!r}"
        raise ValueError(msg) from None


def _parse_enum(raw: str, enum_type: type[Enum] | None) -> Enum:
    if enum_type is None:
        msg = "enum parameter has no enum type"
        raise ValueError(msg)
    name = raw.strip()
    if name in enum_type.__members__:
        return enum_type[name]
    folded = name.casefold()
    for member_name, member in enum_type.__members__.items():
        if member_name.casefold() == folded:
            return member
    msg = f"{raw!r} is not a member of {enum_type.__name__}"
    raise ValueError(msg)


_PARSERS: dict[SemanticType, Callable[[str], object]] = {
    SemanticType.INTEGER: int,
    SemanticType.FLOAT: float,
    SemanticType.BOOLEAN: _parse_bool,
    SemanticType.STRING: str,
}


def coerce_argument(
    raw: str,
    parameter: ParameterSpec,
) -> Result[object, DispatchError]:
    """Convert one raw argument to the parameter's type.

    Returns Success(value) or Failure(CoercionFailure).
    """
    try:
        if parameter.semantic_type is SemanticType.ENUM:
            value: object = _parse_enum(raw, parameter.enum_type)
        elif parameter.semantic_type in _PARSERS:
            value = _PARSERS[parameter.semantic_type](raw)
        else:
            msg = f"unsupported parameter type for {parameter.name!r}"
            raise ValueError(msg)  # noqa: TRY301
    except ValueError as exc:
        return Failure(
            DispatchError(
                step_name="coercion.coerce_argument",
                error_type="CoercionFailure",
                message=(
                    f"Cannot convert {raw!r} to"
                    f" {parameter.semantic_type.value}: {exc}"
                ),
                context={
                    "parameter": parameter.name,
                    "raw": raw,
                },
            ),
        )
    return Success(value)


def bind_arguments(
    command: CommandDescriptor,
    raw_arguments: Sequence[str],
) -> Result[tuple[object, ...], DispatchError]:
    """Assemble the positional argument list for a command.

    Each parameter takes the coerced raw argument at its
    position, or its default when the argument is absent.
    Fails on the first parameter that can do neither, and when
    more raw arguments are given than parameters exist.
    """
    if len(raw_arguments) > len(command.parameters):
        return Failure(
            DispatchError(
                step_name="coercion.bind_arguments",
                error_type="TooManyArguments",
                message=(
                    f"{command.name} takes at most"
                    f" {len(command.parameters)} arguments,"
                    f" got {len(raw_arguments)}"
                ),
                context={
                    "command": command.name,
                    "arguments": list(raw_arguments),
                },
            ),
        )

    bound: list[object] = []
    for index, parameter in enumerate(command.parameters):
        if index < len(raw_arguments):
            result = coerce_argument(raw_arguments[index], parameter)
            if isinstance(result, Failure):
                return Failure(result.failure())
            bound.append(result.unwrap())
        elif parameter.has_default:
            bound.append(parameter.default)
        else:
            return Failure(
                DispatchError(
                    step_name="coercion.bind_arguments",
                    error_type="MissingArgument",
                    message=(
                        f"{command.name} requires argument"
                        f" {parameter.name!r}"
                    ),
                    context={
                        "command": command.name,
                        "parameter": parameter.name,
                    },
                ),
            )
    return Success(tuple(bound))
