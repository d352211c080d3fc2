"""Registry associating model schemas with classes."""
from modelschema_py.registry.default_registry import (
    DEFAULT_REGISTRY,
    SchemaRegistry,
    create_model_schema,
    create_simple_schema,
    get_default_model_schema,
    serialize_all,
    set_default_model_schema,
)
