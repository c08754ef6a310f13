"""Command discovery -- @command markers to registration records.

Functions are marked with @command and later collected from the
classes, instances or modules that define them. Collection turns
each marker into a CommandDeclaration; the registry never looks
at Python signatures itself.

    class MathCommands:
        @staticmethod
        @command("sum", description="Adds two numbers")
        def add(a: float, b: float) -> None: ...

    register_commands(registry, MathCommands)
"""
from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from scs.scs_modules.commands.types import (
    CommandDeclaration,
    ParameterSpec,
    SemanticType,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from scs.scs_modules.commands.registry import CommandRegistry
    from scs.scs_modules.commands.types import CommandDescriptor

_MARKER_ATTR = "__scs_commands__"

_SEMANTIC_TYPES: dict[object, SemanticType] = {
    int: SemanticType.INTEGER,
    float: SemanticType.FLOAT,
    bool: SemanticType.BOOLEAN,
    str: SemanticType.STRING,
}


@dataclass(frozen=True)
class CommandMarker:
    """Metadata attached to a function by @command."""

    name: str
    prefix: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()


def command(
    name: str,
    prefix: str | None = None,
    description: str | None = None,
    tags: tuple[str, ...] | list[str] = (),
) -> Callable[[Any], Any]:
    """Mark a function as a command.

    Markers stack: a function decorated twice is registered
    twice, in top-to-bottom decorator order.
    """
    marker = CommandMarker(
        name=name,
        prefix=prefix,
        description=description,
        tags=tuple(tags),
    )

    def decorator(func: Any) -> Any:
        target = func
        if isinstance(func, (staticmethod, classmethod)):
            target = func.__func__
        existing = getattr(target, _MARKER_ATTR, ())
        setattr(target, _MARKER_ATTR, (marker, *existing))
        return func

    return decorator


def semantic_type_for(
    annotation: object,
) -> tuple[SemanticType, type[Enum] | None]:
    """Map a parameter annotation to its semantic type.

    Unannotated parameters are strings. Enum subclasses map to
    ENUM. Anything else is UNSUPPORTED and never coerces.
    """
    if annotation is inspect.Parameter.empty:
        return SemanticType.STRING, None
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return SemanticType.ENUM, annotation
    return _SEMANTIC_TYPES.get(annotation, SemanticType.UNSUPPORTED), None


def describe_parameters(
    function: Callable[..., object],
) -> tuple[ParameterSpec, ...]:
    """Build the positional parameter signature of a callable.

    Raises:
        ValueError: If the callable takes *args, **kwargs or a
            keyword-only parameter without a default.
    """
    signature = inspect.signature(function)
    hints = typing.get_type_hints(
        inspect.unwrap(getattr(function, "__func__", function)),
    )
    specs: list[ParameterSpec] = []
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            msg = (
                f"{function.__qualname__}: variadic parameter"
                f" {parameter.name!r} cannot be dispatched"
            )
            raise ValueError(msg)
        has_default = parameter.default is not inspect.Parameter.empty
        if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            if not has_default:
                msg = (
                    f"{function.__qualname__}: keyword-only parameter"
                    f" {parameter.name!r} needs a default"
                )
                raise ValueError(msg)
            continue
        semantic_type, enum_type = semantic_type_for(
            hints.get(parameter.name, inspect.Parameter.empty),
        )
        specs.append(
            ParameterSpec(
                name=parameter.name,
                semantic_type=semantic_type,
                has_default=has_default,
                default=parameter.default if has_default else None,
                enum_type=enum_type,
            ),
        )
    return tuple(specs)


def _iter_marked(source: object) -> Iterator[Callable[..., object]]:
    """Yield marked callables of a source in definition order."""
    is_module = inspect.ismodule(source)
    is_class = inspect.isclass(source)
    namespace = vars(source) if is_module or is_class else vars(type(source))
    for attr_name, raw in list(namespace.items()):
        func = raw
        if isinstance(raw, (staticmethod, classmethod)):
            func = raw.__func__
        if not callable(func) or not hasattr(func, _MARKER_ATTR):
            continue
        if is_module and getattr(func, "__module__", None) != source.__name__:  # type: ignore[attr-defined]
            continue
        if is_class and inspect.isfunction(raw):
            msg = (
                f"{source.__name__}.{attr_name} is an instance method;"  # type: ignore[attr-defined]
                f" register an instance instead of the class"
            )
            raise ValueError(msg)
        yield getattr(source, attr_name)


def collect_declarations(*sources: object) -> list[CommandDeclaration]:
    """Collect command declarations from classes, instances or modules."""
    declarations: list[CommandDeclaration] = []
    for source in sources:
        for function in _iter_marked(source):
            parameters = describe_parameters(function)
            markers: tuple[CommandMarker, ...] = getattr(
                function, _MARKER_ATTR,
            )
            declarations.extend(
                CommandDeclaration(
                    function=function,
                    name=marker.name,
                    prefix=marker.prefix,
                    description=marker.description,
                    tags=marker.tags,
                    parameters=parameters,
                )
                for marker in markers
            )
    return declarations


def register_commands(
    registry: CommandRegistry,
    *sources: object,
) -> list[CommandDescriptor]:
    """Collect declarations from sources and register them."""
    return registry.register_declarations(collect_declarations(*sources))
