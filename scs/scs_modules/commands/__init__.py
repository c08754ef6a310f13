"""Commands package -- registry, scanners and text dispatch.

Public API for the command engine: descriptor types, scanners,
the registry, line parsing, argument coercion, discovery and
the dispatcher.
"""
from __future__ import annotations

from scs.scs_modules.commands.coercion import (
    bind_arguments,
    coerce_argument,
)
from scs.scs_modules.commands.discovery import (
    collect_declarations,
    command,
    register_commands,
)
from scs.scs_modules.commands.dispatch import (
    Dispatcher,
    execute_command,
)
from scs.scs_modules.commands.parsing import (
    join_tokens,
    resolve_prefix,
    tokenize,
)
from scs.scs_modules.commands.registry import (
    CommandRegistry,
    RegistrySnapshot,
)
from scs.scs_modules.commands.scanners import (
    CommandScanner,
    ListScanner,
    ScanMode,
    ScanTarget,
    SimpleScanner,
    StringScanner,
)
from scs.scs_modules.commands.types import (
    CommandDeclaration,
    CommandDescriptor,
    DispatchSuccess,
    FindCondition,
    ParameterSpec,
    SemanticType,
)

__all__ = [
    "CommandDeclaration",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandScanner",
    "DispatchSuccess",
    "Dispatcher",
    "FindCondition",
    "ListScanner",
    "ParameterSpec",
    "RegistrySnapshot",
    "ScanMode",
    "ScanTarget",
    "SemanticType",
    "SimpleScanner",
    "StringScanner",
    "bind_arguments",
    "coerce_argument",
    "collect_declarations",
    "command",
    "execute_command",
    "join_tokens",
    "register_commands",
    "resolve_prefix",
    "tokenize",
]
