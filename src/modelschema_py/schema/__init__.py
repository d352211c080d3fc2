"""Schema models: ModelSchema, PropSchema, SKIP and property helpers."""
from modelschema_py.schema.common import SKIP, STAR, SchemaContractError, invariant, is_primitive
from modelschema_py.schema.model import DEFAULT_PRIMITIVE_PROP, ModelSchema, PropSchema
from modelschema_py.schema.props import alias, custom, list_, map_, object_, pattern_props, primitive
