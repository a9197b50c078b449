"""Validation and derivation of tool identifiers."""

from __future__ import annotations

import re
from typing import Literal

IDENTIFIER_PREFIX = "pptb"
FALLBACK_IDENTIFIER = "pptb-tool"

EMPTY_IDENTIFIER_MESSAGE = "The tool identifier cannot be empty"
INVALID_CHARACTERS_MESSAGE = (
    "The tool identifier can only contain lowercase letters, numbers and hyphens"
)

_INVALID_CHARACTER = re.compile(r"[^a-z0-9-]")
_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


class InvalidIdentifierError(ValueError):
    """Raised when a tool identifier fails validation."""

    def __init__(self, value: str | None, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.message = message


class EmptyIdentifierError(InvalidIdentifierError):
    """Raised when the identifier is empty or missing."""

    def __init__(self, value: str | None = None) -> None:
        super().__init__(value, EMPTY_IDENTIFIER_MESSAGE)


class InvalidCharactersError(InvalidIdentifierError):
    """Raised when the identifier contains characters outside [a-z0-9-]."""

    def __init__(self, value: str) -> None:
        super().__init__(value, INVALID_CHARACTERS_MESSAGE)


def validate_identifier(value: str | None) -> Literal[True] | str:
    """Validate a tool identifier.

    Returns True when valid, otherwise the error message to show the user.
    """
    if not value:
        return EMPTY_IDENTIFIER_MESSAGE
    if _INVALID_CHARACTER.search(value):
        return INVALID_CHARACTERS_MESSAGE
    return True


def check_identifier(value: str | None) -> str:
    """Return the identifier unchanged, raising if it is invalid."""
    if not value:
        raise EmptyIdentifierError(value)
    if _INVALID_CHARACTER.search(value):
        raise InvalidCharactersError(value)
    return value


def derive_identifier(display_name: str) -> str:
    """Derive a default identifier from a display name.

    Lower-cases the name and collapses every run of characters outside
    [a-z0-9] into a single hyphen, e.g. "My Cool Tool" -> "pptb-my-cool-tool".
    """
    if not display_name:
        return FALLBACK_IDENTIFIER
    slug = _NON_ALPHANUMERIC_RUN.sub("-", display_name.lower())
    return f"{IDENTIFIER_PREFIX}-{slug}"
