"""Serializers: schema walker, top-level dispatch and JSON text output."""
from modelschema_py.serializer.walker import (
    check_star_schema_invariant,
    serialize_star_props,
    serialize_with_schema,
)
from modelschema_py.serializer.dispatch import serialize
from modelschema_py.serializer.json_serializer import serialize_json
