"""Exception hierarchy for strval.

Recoverable coercion failures never surface as exceptions: they resolve to
the kind's zero value and a diagnostic record. The classes below cover the
failures that do propagate, plus the parse errors the coercion routine
catches internally.
"""

from __future__ import annotations


class StrvalError(Exception):
    """Base class for all strval errors."""


class ParseError(StrvalError, ValueError):
    """Text could not be read as the requested kind.

    Attributes:
        text: The rejected text, after any normalization the parser applied.
        kind: Short name of the target kind (``"bool"``, ``"int"``, ...).
    """

    def __init__(self, message: str, *, text: str, kind: str) -> None:
        super().__init__(message)
        self.text = text
        self.kind = kind


class UnsupportedTokenError(StrvalError, ValueError):
    """A token of a kind that has no textual rendering (null, mapping, ...)."""


class SerializationError(StrvalError, ValueError):
    """The destination format cannot represent a wrapped value."""
