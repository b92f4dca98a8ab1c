"""YAML codec built on ruamel.yaml.

Wrappers are represented as native YAML scalars, so a ``String`` holding
``"123"`` is emitted quoted while an ``Int`` holding ``123`` is emitted bare.
"""

from __future__ import annotations

from io import StringIO
from typing import Any

from pydantic import BaseModel
from ruamel.yaml import YAML
from ruamel.yaml.nodes import Node, ScalarNode

from strval.domain.diagnostics import SINK_CONTEXT_KEY, DiagnosticSink
from strval.domain.values import Bool, Float, Int, String, StrValue


def _represent_bool(representer: Any, data: Bool) -> Any:
    return representer.represent_bool(data.get_value())


def _represent_int(representer: Any, data: Int) -> Any:
    return representer.represent_int(data.get_value())


def _represent_float(representer: Any, data: Float) -> Any:
    return representer.represent_float(data.get_value())


def _represent_str(representer: Any, data: String) -> Any:
    return representer.represent_str(data.get_value())


def new_yaml() -> YAML:
    """Create a fresh safe YAML instance that knows the wrapper types.

    A new instance per call avoids leaking emitter state between
    operations (ruamel.yaml's YAML object is stateful).
    """
    y = YAML(typ="safe", pure=True)
    y.default_flow_style = False
    y.representer.add_representer(Bool, _represent_bool)
    y.representer.add_representer(Int, _represent_int)
    y.representer.add_representer(Float, _represent_float)
    y.representer.add_representer(String, _represent_str)
    return y


def dump(data: Any) -> str:
    """Serialize a model, wrapper, or container of wrappers to YAML text."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="python")
    buf = StringIO()
    new_yaml().dump(data, buf)
    return buf.getvalue()


def load[M: BaseModel](
    text: str,
    model: type[M] | None = None,
    *,
    sink: DiagnosticSink | None = None,
) -> M | Any:
    """Parse YAML text, optionally validating the document into *model*."""
    data = new_yaml().load(text)
    if model is None:
        return data
    context = {SINK_CONTEXT_KEY: sink} if sink is not None else None
    return model.model_validate(data, context=context)


def decode_node[V: StrValue[Any]](
    cls: type[V],
    node: Node,
    *,
    sink: DiagnosticSink | None = None,
) -> V:
    """Deserialize a composed YAML node into wrapper type *cls*.

    Scalar nodes are constructed with the safe constructor (so ``'42'``
    stays a string and ``42`` becomes an int) before coercion. Mapping and
    sequence nodes are handed to the wrapper as-is and take its
    unsupported-kind path.
    """
    if not isinstance(node, ScalarNode):
        return cls.from_token(node, sink=sink)
    token = new_yaml().constructor.construct_object(node, deep=True)
    return cls.from_token(token, sink=sink)
