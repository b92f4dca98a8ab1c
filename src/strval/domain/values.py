"""Lenient scalar value types.

``Bool``, ``Int`` and ``Float`` accept their native kind or a string
carrying it, and never fail outward: malformed input becomes the zero value
plus a diagnostic. ``String`` stringifies any scalar and is the one type
that rejects input (non-scalar tokens raise).

All four serialize to their native kind whatever they were read from, and
plug into pydantic models directly::

    class Config(BaseModel):
        enabled: Bool
        count: Int

    Config.model_validate_json('{"enabled": "yes", "count": "3"}')
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Self, runtime_checkable

from pydantic_core import core_schema

from strval.domain.coercion import BOOL_COERCION, FLOAT_COERCION, INT_COERCION, Coercion
from strval.domain.diagnostics import resolve_sink
from strval.domain.parsing import format_number
from strval.errors import SerializationError, UnsupportedTokenError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

    from strval.domain.diagnostics import DiagnosticSink


@runtime_checkable
class StringValuer[T](Protocol):
    """Read access to the wrapped primitive, generic over the four kinds."""

    def get_value(self) -> T: ...


class StrValue[T](ABC):
    """Base class: an immutable single-field wrapper over one primitive."""

    __slots__ = ("_value",)

    _value: T

    _native_types: ClassVar[tuple[type, ...]]
    _zero: ClassVar[Any]
    _serialized_schema: ClassVar[core_schema.CoreSchema]
    _input_json_schema: ClassVar[dict[str, Any]]

    def __init__(self, value: T | None = None) -> None:
        if value is None:
            self._value = self._zero
            return
        if isinstance(value, bool) and bool not in self._native_types:
            self._reject_init(value)
        if not isinstance(value, self._native_types):
            self._reject_init(value)
        self._value = self._adopt(value)

    @classmethod
    def _reject_init(cls, value: object) -> None:
        msg = (
            f"{cls.__name__}() takes a {cls._native_types[0].__name__}, "
            f"got {type(value).__name__}; use {cls.__name__}.from_token() to coerce"
        )
        raise TypeError(msg)

    @classmethod
    def _adopt(cls, value: Any) -> T:
        return value

    @classmethod
    @abstractmethod
    def from_token(cls, token: object, *, sink: DiagnosticSink | None = None) -> Self:
        """Build a value from one decoded document token."""

    # -- accessors --------------------------------------------------------

    def get_value(self) -> T:
        """Return the wrapped primitive."""
        return self._value

    @property
    def value(self) -> T:
        return self._value

    def to_token(self) -> T:
        """Serialize to the native token (always the wrapper's own kind)."""
        return self._value

    def to_json_token(self) -> T:
        """Like :meth:`to_token`, for output formats that follow JSON.

        Raises:
            SerializationError: If JSON has no form for the value.
        """
        return self._value

    # -- value semantics --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self._value == other._value
        if isinstance(other, StrValue):
            return NotImplemented
        if isinstance(other, bool) and bool not in self._native_types:
            return NotImplemented
        if isinstance(other, self._native_types):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)

    # -- pydantic integration --------------------------------------------

    @classmethod
    def _validate(cls, value: Any, info: core_schema.ValidationInfo) -> Self:
        if isinstance(value, cls):
            return value
        return cls.from_token(value, sink=resolve_sink(context=info.context))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_token,
                info_arg=True,
                return_schema=cls._serialized_schema,
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return dict(cls._input_json_schema)


def _serialize_token(value: StrValue[Any], info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return value.to_json_token()
    return value.to_token()


class CoercibleValue[T](StrValue[T]):
    """A wrapper whose decoding never fails outward.

    Subclasses only pick a :class:`Coercion`; the decode and database
    paths are shared.
    """

    __slots__ = ()

    _coercion: ClassVar[Coercion[Any]]

    @classmethod
    def _adopt(cls, value: Any) -> T:
        # Raises ParseError for out-of-range natives at construction time.
        return cls._coercion.convert(value)

    @classmethod
    def from_token(cls, token: object, *, sink: DiagnosticSink | None = None) -> Self:
        """Deserialize a document token.

        Accepts the native kind or a string carrying it. Null gives the
        zero value. Anything else also gives the zero value, with a
        diagnostic sent to *sink*.
        """
        return cls._wrap(cls._coercion.from_token(token, resolve_sink(sink)))

    @classmethod
    def from_db(cls, raw: object, *, sink: DiagnosticSink | None = None) -> Self:
        """Database value-in: accept a raw column value.

        Besides the native kind and text, common cross-kind driver
        representations are accepted (see the kind's coercion rules).
        """
        return cls._wrap(cls._coercion.from_raw(raw, resolve_sink(sink)))

    def to_db(self) -> T:
        """Database value-out: the primitive, ready for a driver."""
        return self._value

    @classmethod
    def _wrap(cls, value: T) -> Self:
        instance = cls.__new__(cls)
        instance._value = value
        return instance


class Bool(CoercibleValue[bool]):
    """Boolean read from ``true``/``yes``/``y``/``1`` style words or a bool."""

    __slots__ = ()

    _native_types = (bool,)
    _zero = False
    _coercion = BOOL_COERCION
    _serialized_schema = core_schema.bool_schema()
    _input_json_schema = {"anyOf": [{"type": "boolean"}, {"type": "string"}]}

    def __bool__(self) -> bool:
        return self._value


class Int(CoercibleValue[int]):
    """Signed 64-bit integer read from an integer or base-10 text."""

    __slots__ = ()

    _native_types = (int,)
    _zero = 0
    _coercion = INT_COERCION
    _serialized_schema = core_schema.int_schema()
    _input_json_schema = {"anyOf": [{"type": "integer"}, {"type": "string"}]}

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value


class Float(CoercibleValue[float]):
    """Double read from any number or decimal/exponential text."""

    __slots__ = ()

    _native_types = (float, int)
    _zero = 0.0
    _coercion = FLOAT_COERCION
    _serialized_schema = core_schema.float_schema()
    _input_json_schema = {"anyOf": [{"type": "number"}, {"type": "string"}]}

    def __float__(self) -> float:
        return self._value

    def to_json_token(self) -> float:
        if not math.isfinite(self._value):
            msg = f"cannot encode {self._value!r} as a JSON number"
            raise SerializationError(msg)
        return self._value


class String(StrValue[str]):
    """Text read from any scalar token; numbers and bools are stringified."""

    __slots__ = ()

    _native_types = (str,)
    _zero = ""
    _serialized_schema = core_schema.str_schema()
    _input_json_schema = {
        "anyOf": [
            {"type": "string"},
            {"type": "number"},
            {"type": "boolean"},
        ]
    }

    @classmethod
    def from_token(cls, token: object, *, sink: DiagnosticSink | None = None) -> Self:
        """Deserialize any scalar token into text.

        Raises:
            UnsupportedTokenError: For null and any non-scalar token.
        """
        if isinstance(token, str):
            return cls(token)
        if isinstance(token, bool):
            return cls("true" if token else "false")
        if isinstance(token, (int, float)):
            return cls(format_number(token))
        msg = f"cannot convert {type(token).__name__} to String"
        raise UnsupportedTokenError(msg)
