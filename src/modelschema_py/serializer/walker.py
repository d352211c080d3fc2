"""Walk a model schema over an object and build its JSON representation.

Order of the result:
- properties of the ``extends`` chain first, root-most schema first
- the schema's own named properties, in declaration order
- keys captured by the ``"*"`` wildcard entry, in the object's own order
"""
from __future__ import annotations

import logging
from typing import Any, Union

from modelschema_py.schema.common import (
    SKIP,
    STAR,
    invariant,
    is_composite,
    is_primitive,
    own_props,
    read_prop,
)
from modelschema_py.schema.model import DEFAULT_PRIMITIVE_PROP, ModelSchema, PropDef, PropSchema

logger = logging.getLogger(__name__)

SchemaLike = Union[ModelSchema, PropSchema]


def _is_schema(schema: Any) -> bool:
    return isinstance(schema, (ModelSchema, PropSchema)) and schema.props is not None


def check_star_schema_invariant(prop_def: PropDef) -> None:
    invariant(
        prop_def is True or (isinstance(prop_def, PropSchema) and prop_def.pattern is not None),
        "prop schema '*' can only be used with 'true'",
    )


def serialize_with_schema(schema: SchemaLike, obj: Any) -> dict[str, Any]:
    """Serialize ``obj`` with ``schema`` and its ``extends`` chain.

    Args:
        schema: A ModelSchema, or a pattern PropSchema carrying ``props``.
        obj: A mapping or an attribute object.

    Returns:
        A new dict; neither ``schema`` nor ``obj`` is modified.
    """
    invariant(_is_schema(schema), "Expected schema")
    invariant(is_composite(obj), "Expected object")

    if schema.extends is not None:
        res = serialize_with_schema(schema.extends, obj)
    else:
        res = {}

    for key, prop_def in schema.props.items():
        if key == STAR or prop_def is False:
            continue
        if prop_def is True:
            prop_def = DEFAULT_PRIMITIVE_PROP
        json_value = prop_def.serializer(read_prop(obj, key), key, obj)
        if json_value is SKIP:
            continue
        res[prop_def.jsonname or key] = json_value

    if STAR in schema.props:
        serialize_star_props(schema, schema.props[STAR], obj, res)
    return res


def _declared_keys(schema: SchemaLike) -> set:
    """Keys named by ``schema`` or any schema it extends."""
    keys = set()
    while schema is not None:
        keys.update(schema.props)
        schema = schema.extends
    return keys


def serialize_star_props(schema: SchemaLike, prop_def: PropDef, obj: Any, target: dict) -> None:
    """Add undeclared own properties of ``obj`` to ``target``.

    A key counts as declared when any schema of the ``extends`` chain names
    it. With ``True`` only primitive values are copied; other values are taken
    to be local state. With a pattern entry every matching key is serialized
    using the entry itself as schema when it carries ``props``, or with its
    ``serializer`` otherwise.
    """
    check_star_schema_invariant(prop_def)
    only_primitives = prop_def is True
    declared = _declared_keys(schema)

    for key in own_props(obj):
        if key in declared:
            continue
        value = read_prop(obj, key)
        if only_primitives:
            if is_primitive(value):
                target[key] = value
            continue
        if not prop_def.pattern.search(str(key)):
            continue
        if prop_def.props is None:
            json_value = prop_def.serializer(value, key, obj)
        else:
            json_value = serialize_with_schema(prop_def, value)
        if json_value is SKIP:
            # Stops the whole collection, not just this key.
            logger.debug("Wildcard key %r skipped, dropping remaining keys", key)
            return
        target[key] = json_value
