"""JSON codec built on the stdlib :mod:`json` module.

Wrappers are written as native tokens (``true``, ``42``, ``3.5``,
``"text"``). Output is compact (``{"a":1}``) and strict: a non-finite
float has no JSON form and raises :class:`~strval.errors.SerializationError`.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from strval.domain.diagnostics import SINK_CONTEXT_KEY, DiagnosticSink
from strval.domain.values import StrValue
from strval.errors import SerializationError

_SEPARATORS = (",", ":")


class StrValueEncoder(json.JSONEncoder):
    """JSONEncoder that writes wrappers and pydantic models natively."""

    def default(self, o: Any) -> Any:
        if isinstance(o, StrValue):
            return o.to_json_token()
        if isinstance(o, BaseModel):
            return o.model_dump(mode="python")
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize *obj* (model, wrapper, or container of them) to JSON text.

    Raises:
        SerializationError: If a value cannot be represented in JSON.
    """
    kwargs.setdefault("separators", _SEPARATORS)
    kwargs.setdefault("ensure_ascii", False)
    try:
        return json.dumps(obj, cls=StrValueEncoder, allow_nan=False, **kwargs)
    except SerializationError:
        raise
    except (TypeError, ValueError) as exc:
        msg = f"cannot encode as JSON: {exc}"
        raise SerializationError(msg) from exc


def loads[M: BaseModel](
    data: str | bytes,
    model: type[M] | None = None,
    *,
    sink: DiagnosticSink | None = None,
) -> M | Any:
    """Decode JSON text, optionally validating it into *model*.

    Coercion diagnostics raised while validating go to *sink* when given.
    """
    if model is None:
        return json.loads(data)
    context = {SINK_CONTEXT_KEY: sink} if sink is not None else None
    return model.model_validate_json(data, context=context)


def encode_value(value: StrValue[Any]) -> str:
    """Serialize one wrapper to a single JSON token."""
    return dumps(value)


def decode_value[V: StrValue[Any]](
    cls: type[V],
    data: str | bytes,
    *,
    sink: DiagnosticSink | None = None,
) -> V:
    """Deserialize one JSON token into wrapper type *cls*.

    Malformed JSON text is a host-level failure and raises
    :class:`json.JSONDecodeError`; a well-formed token of the wrong kind
    follows the wrapper's own coercion rules.
    """
    return cls.from_token(json.loads(data), sink=sink)
