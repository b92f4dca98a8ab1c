"""SQLAlchemy column types that store and read the lenient wrappers."""

from strval.infrastructure.database.types import BoolType, FloatType, IntType, StrValueType

__all__ = [
    "BoolType",
    "FloatType",
    "IntType",
    "StrValueType",
]
