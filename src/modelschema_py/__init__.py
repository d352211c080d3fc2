"""modelschema-py: serialize Python object graphs to JSON values with model schemas.

A model schema lists which properties of a type to emit, how to transform or
rename them, and which parent schema it extends. Types need no serialization
code of their own.
"""
__version__ = "0.1.0"

from modelschema_py.schema.common import SKIP, STAR, SchemaContractError
from modelschema_py.schema.model import ModelSchema, PropSchema
from modelschema_py.schema.props import alias, custom, list_, map_, object_, pattern_props, primitive

from modelschema_py.registry.default_registry import (
    DEFAULT_REGISTRY,
    SchemaRegistry,
    create_model_schema,
    create_simple_schema,
    get_default_model_schema,
    serialize_all,
    set_default_model_schema,
)

from modelschema_py.serializer.walker import serialize_with_schema
from modelschema_py.serializer.dispatch import serialize
from modelschema_py.serializer.json_serializer import serialize_json

__all__ = [
    # Schema
    "SKIP", "STAR", "SchemaContractError",
    "ModelSchema", "PropSchema",
    "alias", "custom", "list_", "map_", "object_", "pattern_props", "primitive",
    # Registry
    "DEFAULT_REGISTRY", "SchemaRegistry",
    "create_model_schema", "create_simple_schema",
    "get_default_model_schema", "set_default_model_schema",
    "serialize_all",
    # Serializers
    "serialize", "serialize_with_schema", "serialize_json",
]
