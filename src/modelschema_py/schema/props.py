"""Property definition helpers for declaring schema props.

Each helper returns a :class:`PropSchema` whose serializer has the signature
``(value, key, parent) -> json | SKIP``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from modelschema_py.schema.common import invariant
from modelschema_py.schema.model import (
    DEFAULT_PRIMITIVE_PROP,
    ModelSchema,
    PropDef,
    PropSchema,
    Serializer,
)


def _as_prop_schema(prop_def: PropDef) -> PropSchema:
    if prop_def is True:
        return DEFAULT_PRIMITIVE_PROP
    invariant(isinstance(prop_def, PropSchema), f"expected a prop schema, got {prop_def!r}")
    return prop_def


def primitive() -> PropSchema:
    """Copy the value through unchanged."""
    return PropSchema(serializer=DEFAULT_PRIMITIVE_PROP.serializer)


def alias(name: str, prop_def: PropDef = True) -> PropSchema:
    """Emit the property under ``name`` instead of its attribute name."""
    invariant(isinstance(name, str) and name, "expected alias name to be a non-empty string")
    base = _as_prop_schema(prop_def)
    return PropSchema(serializer=base.serializer, jsonname=name)


def custom(serializer: Serializer) -> PropSchema:
    invariant(callable(serializer), "first argument should be a function")
    return PropSchema(serializer=serializer)


def object_(schema: ModelSchema) -> PropSchema:
    """Serialize a nested object with ``schema``. ``None`` passes through."""

    def serializer(value, key=None, parent=None):
        if value is None:
            return None
        from modelschema_py.serializer.walker import serialize_with_schema
        return serialize_with_schema(schema, value)

    return PropSchema(serializer=serializer)


def list_(prop_def: PropDef = True) -> PropSchema:
    """Serialize every item of a list or tuple with ``prop_def``."""
    item = _as_prop_schema(prop_def)

    def serializer(value, key=None, parent=None):
        if value is None:
            return None
        invariant(isinstance(value, (list, tuple)), f"expected list for {key!r}")
        return [item.serializer(v, i, value) for i, v in enumerate(value)]

    return PropSchema(serializer=serializer)


def map_(prop_def: PropDef = True) -> PropSchema:
    """Serialize every value of a mapping with ``prop_def``, keeping its keys."""
    item = _as_prop_schema(prop_def)

    def serializer(value, key=None, parent=None):
        if value is None:
            return None
        invariant(isinstance(value, Mapping), f"expected mapping for {key!r}")
        return {k: item.serializer(v, k, value) for k, v in value.items()}

    return PropSchema(serializer=serializer)


def pattern_props(
    pattern,
    props: dict[str, PropDef],
    extends: Optional[ModelSchema] = None,
) -> PropSchema:
    """Build a ``"*"`` entry: keys matching ``pattern`` are serialized with ``props``."""
    return PropSchema(pattern=pattern, props=props, extends=extends)
