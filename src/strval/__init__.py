"""strval: lenient scalar value types for documents and database rows."""

from strval.domain.values import Bool, Float, Int, String, StringValuer, StrValue
from strval.errors import ParseError, SerializationError, StrvalError, UnsupportedTokenError

__version__ = "1.0.0"

__all__ = [
    "Bool",
    "Float",
    "Int",
    "ParseError",
    "SerializationError",
    "StrValue",
    "String",
    "StringValuer",
    "StrvalError",
    "UnsupportedTokenError",
    "__version__",
]
