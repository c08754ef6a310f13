"""Dispatch error types for the SCS command engine."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


class WarningType(Enum):
    """Warning outcomes surfaced to the console collaborator."""

    WRONG_COMMAND = "WrongCommand"
    WRONG_ARGUMENTS = "WrongArguments"


WRONG_COMMAND_ERRORS = frozenset({"NoTokens", "NoCandidate"})


@dataclass(frozen=True)
class DispatchError:
    """Structured error for a dispatch step that did not succeed."""

    step_name: str
    error_type: str
    message: str
    context: dict[str, object] = field(default_factory=dict)

    @property
    def warning(self) -> WarningType:
        """Warning reported for this error.

        Unrecognized input maps to WrongCommand; everything that
        matched a command but could not run it is WrongArguments.
        """
        if self.error_type in WRONG_COMMAND_ERRORS:
            return WarningType.WRONG_COMMAND
        return WarningType.WRONG_ARGUMENTS

    def to_dict(self) -> dict[str, object]:
        """Return plain dict suitable for JSON serialization.

        Non-serializable context values are converted to string representations.
        """
        data = asdict(self)

        def make_safe(obj: object) -> object:
            if isinstance(obj, (str, int, float, bool, type(None))):
                return obj
            if isinstance(obj, (list, tuple)):
                return [make_safe(x) for x in obj]
            if isinstance(obj, dict):
                return {str(k): make_safe(v) for k, v in obj.items()}
            return str(obj)

        data["context"] = make_safe(self.context)
        return data

    def __str__(self) -> str:
        """Human-readable error representation for logging."""
        max_len = 500
        base = f"DispatchError[{self.step_name}] {self.error_type}: {self.message}"
        if self.context:
            ctx_str = str(self.context)
            if len(ctx_str) > max_len:
                ctx_str = ctx_str[: max_len - 3] + "..."
            base += f" | context={ctx_str}"
        return base
