"""Top-level ``serialize`` entry point: schema resolution and list fan-out."""
from __future__ import annotations

from typing import Any, Optional

from modelschema_py.registry.default_registry import SchemaRegistry, get_default_model_schema
from modelschema_py.schema.common import invariant
from modelschema_py.schema.model import ModelSchema, PropSchema
from modelschema_py.serializer.walker import serialize_with_schema


def _is_schema_shaped(arg: Any) -> bool:
    return isinstance(arg, (ModelSchema, PropSchema))


def serialize(*args, registry: Optional[SchemaRegistry] = None):
    """Serialize an object, or a list of uniformly typed objects, to JSON values.

    Called as ``serialize(thing)`` or ``serialize(schema_or_class, thing)``.
    Without an explicit schema the registry is consulted for the type of
    ``thing`` (or of its first item).

    Returns:
        A dict for a single object, a list of dicts for a list or tuple.
    """
    invariant(len(args) in (1, 2), "serialize expects one or 2 arguments")
    thing = args[0] if len(args) == 1 else args[1]
    schema = None if len(args) == 1 else args[0]
    is_sequence = isinstance(thing, (list, tuple))

    if is_sequence and len(thing) == 0:
        return []

    if schema is None:
        schema = get_default_model_schema(thing[0] if is_sequence else thing, registry)
    elif not _is_schema_shaped(schema):
        schema = get_default_model_schema(schema, registry)
    invariant(schema is not None, f"Failed to find default schema for {args[0]!r}")

    if is_sequence:
        return [serialize_with_schema(schema, item) for item in thing]
    return serialize_with_schema(schema, thing)
