"""Delimiter tokens used to join multi-valued fields."""

from __future__ import annotations

from typing import Sequence


DEFAULT_DELIMITER = "\n"

DELIMITER_ALIASES: dict[str, str] = {
    "Tab": "\t",
    "CR": "\r",
    "LF": "\n",
    "CRLF": "\r\n",
}


def resolve_delimiter(token: str | None) -> str:
    """Map a symbolic name (case-sensitive) to its separator; other tokens are literal."""
    if token is None:
        return DEFAULT_DELIMITER
    return DELIMITER_ALIASES.get(token, token)


def join_values(values: Sequence[str], delimiter: str) -> str:
    return delimiter.join(values)
