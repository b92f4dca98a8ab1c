"""SQLAlchemy ``TypeDecorator``s for the Bool, Int and Float wrappers.

Bind side (value-out): wrappers are written as their primitive. Plain
Python values are coerced first, so binding ``"yes"`` to a ``BoolType``
column stores ``True``.

Result side (value-in): whatever the driver hands back goes through
``from_db``. NULL reads as the zero value, and cross-kind values (a REAL
read through an ``IntType``, text read through a ``FloatType``, ...) are
coerced with a diagnostic on failure, never an exception.
"""

from __future__ import annotations

from typing import Any, ClassVar

from sqlalchemy import BigInteger, Boolean, Float
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from strval.domain.diagnostics import DiagnosticSink
from strval.domain.values import Bool, CoercibleValue
from strval.domain.values import Float as FloatValue
from strval.domain.values import Int as IntValue


class StrValueType(TypeDecorator[Any]):
    """Base column type mapping one wrapper class onto an SQL type.

    Args:
        sink: Diagnostic sink for values that fail to coerce. Defaults to
            the ambient ``strval.coerce`` logger.
    """

    value_class: ClassVar[type[CoercibleValue[Any]]]
    cache_ok = True

    def __init__(self, *args: Any, sink: DiagnosticSink | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.sink = sink

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, self.value_class):
            value = self.value_class.from_db(value, sink=self.sink)
        return value.to_db()

    def process_result_value(self, value: Any, dialect: Dialect) -> CoercibleValue[Any]:
        return self.value_class.from_db(value, sink=self.sink)

    @property
    def python_type(self) -> type[Any]:
        return self.value_class


class BoolType(StrValueType):
    """``Boolean`` column holding :class:`~strval.domain.values.Bool`."""

    impl = Boolean
    value_class = Bool


class IntType(StrValueType):
    """``BIGINT`` column holding :class:`~strval.domain.values.Int`."""

    impl = BigInteger
    value_class = IntValue


class FloatType(StrValueType):
    """``FLOAT`` column holding :class:`~strval.domain.values.Float`."""

    impl = Float
    value_class = FloatValue
