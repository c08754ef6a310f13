"""Input line parsing -- prefix resolution and tokenization.

Pure functions. The dispatcher strips the resolved prefix from
the line, then splits the remainder into a command name and
raw string arguments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.result import Failure, Result, Success

from scs.scs_modules.errors import DispatchError

if TYPE_CHECKING:
    from collections.abc import Iterable

_QUOTE = '"'


def resolve_prefix(message: str, prefixes: Iterable[str]) -> str:
    """Return the longest known prefix the message starts with.

    Returns "" when no prefix matches, so commands registered
    with an empty prefix are reachable by bare name. Among
    equal-length matches the first in prefixes wins.
    """
    best = ""
    matched = False
    for prefix in prefixes:
        if not message.startswith(prefix):
            continue
        if not matched or len(prefix) > len(best):
            best = prefix
            matched = True
    return best


def tokenize(text: str) -> list[str]:
    """Split text on whitespace, keeping quoted segments whole.

    Whitespace between a balanced pair of double quotes stays
    in the token and the enclosing quotes are dropped. A quote
    with no closing partner later in the text is kept as a
    literal character. Empty tokens are discarded.
    """
    last_quote = text.rfind(_QUOTE)
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    for index, char in enumerate(text):
        if char == _QUOTE:
            if in_quotes:
                in_quotes = False
            elif index < last_quote:
                in_quotes = True
            else:
                current.append(char)
            continue
        if char.isspace() and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def join_tokens(tokens: Iterable[str]) -> str:
    """Join tokens into a line that tokenizes back to them."""
    parts = []
    for token in tokens:
        if any(char.isspace() for char in token):
            parts.append(f"{_QUOTE}{token}{_QUOTE}")
        else:
            parts.append(token)
    return " ".join(parts)


def split_command(
    text: str,
) -> Result[tuple[str, list[str]], DispatchError]:
    """Split prefix-stripped text into (name, raw arguments).

    Returns Failure(NoTokens) when nothing but whitespace or
    empty quotes remains.
    """
    tokens = tokenize(text)
    if not tokens:
        return Failure(
            DispatchError(
                step_name="parsing.split_command",
                error_type="NoTokens",
                message="No command recognized in input",
                context={"text": text},
            ),
        )
    return Success((tokens[0], tokens[1:]))
