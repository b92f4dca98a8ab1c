"""Generic coercion routine shared by the Bool, Int and Float wrappers.

A :class:`Coercion` describes one kind through injected strategies (native
predicate, native conversion, text parser, zero value, database cross-kind
converters). The control flow is written once:

    null            -> zero value
    native kind     -> convert
    text            -> parse
    anything else   -> zero value + diagnostic

Any failure inside ``convert``/``parse`` also resolves to the zero value
plus a diagnostic. Nothing here raises to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

from strval.domain.diagnostics import (
    INVALID_VALUE_EVENT,
    UNSUPPORTED_TYPE_EVENT,
    DiagnosticSink,
)
from strval.domain.parsing import (
    check_int64,
    float_from_decimal,
    parse_bool,
    parse_float,
    parse_int,
)

Source = Literal["token", "database"]

# Raised by int()/float() on NaN, infinities, or oversized values.
_CONVERSION_ERRORS = (ValueError, OverflowError)

_BYTES_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class Coercion[T]:
    """Coercion rules for one scalar kind.

    Attributes:
        kind: Display name used in diagnostics (``"Bool"``).
        label: Phrase naming the native kind (``"a bool"``).
        zero: The zero value substituted on failure.
        is_native: Predicate selecting native tokens/raw values.
        convert: Adopts a native value; may raise ``ParseError``.
        parse: Parses text; raises ``ParseError`` on malformed input.
        raw_converters: ``(types, fn)`` pairs tried for database values
            that are neither native nor text.
    """

    kind: str
    label: str
    zero: T
    is_native: Callable[[object], bool]
    convert: Callable[[Any], T]
    parse: Callable[[str], T]
    raw_converters: tuple[tuple[type | tuple[type, ...], Callable[[Any], T]], ...] = field(
        default=()
    )

    def from_token(self, token: object, sink: DiagnosticSink) -> T:
        """Coerce a document token."""
        if token is None:
            return self.zero
        if self.is_native(token):
            return self._attempt(self.convert, token, sink, "token")
        if isinstance(token, str):
            return self._attempt(self.parse, token, sink, "token")
        return self._reject(token, sink, "token")

    def from_raw(self, raw: object, sink: DiagnosticSink) -> T:
        """Coerce a value read from a database column."""
        if raw is None:
            return self.zero
        if self.is_native(raw):
            return self._attempt(self.convert, raw, sink, "database")
        if isinstance(raw, _BYTES_TYPES):
            return self._attempt(self._parse_bytes, raw, sink, "database")
        if isinstance(raw, str):
            return self._attempt(self.parse, raw, sink, "database")
        for types, converter in self.raw_converters:
            if isinstance(raw, types) and not isinstance(raw, bool):
                return self._attempt(converter, raw, sink, "database")
        return self._reject(raw, sink, "database")

    def _parse_bytes(self, raw: bytes | bytearray | memoryview) -> T:
        return self.parse(bytes(raw).decode("utf-8"))

    def _attempt(
        self,
        func: Callable[[Any], T],
        value: Any,
        sink: DiagnosticSink,
        source: Source,
    ) -> T:
        try:
            return func(value)
        except _CONVERSION_ERRORS as exc:
            sink.error(
                INVALID_VALUE_EVENT,
                kind=self.kind,
                source=source,
                value=value if isinstance(value, str) else repr(value),
                error=str(exc),
            )
            return self.zero

    def _reject(self, value: object, sink: DiagnosticSink, source: Source) -> T:
        type_name = type(value).__name__
        sink.error(
            UNSUPPORTED_TYPE_EVENT,
            kind=self.kind,
            source=source,
            type=type_name,
            error=f"expected {self.label} or string, got {type_name}",
        )
        return self.zero


# ---------------------------------------------------------------------------
# Per-kind instantiations
# ---------------------------------------------------------------------------


def _is_bool(value: object) -> bool:
    return isinstance(value, bool)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int_from_number(value: float | Decimal) -> int:
    """Truncate toward zero, then range-check."""
    return check_int64(int(value))


BOOL_COERCION: Coercion[bool] = Coercion(
    kind="Bool",
    label="a bool",
    zero=False,
    is_native=_is_bool,
    convert=bool,
    parse=parse_bool,
    raw_converters=((int, lambda raw: raw != 0),),
)

INT_COERCION: Coercion[int] = Coercion(
    kind="Int",
    label="an int",
    zero=0,
    is_native=_is_int,
    convert=check_int64,
    parse=parse_int,
    raw_converters=(((float, Decimal), _int_from_number),),
)

FLOAT_COERCION: Coercion[float] = Coercion(
    kind="Float",
    label="a float",
    zero=0.0,
    is_native=_is_number,
    convert=float,
    parse=parse_float,
    raw_converters=((Decimal, float_from_decimal),),
)
