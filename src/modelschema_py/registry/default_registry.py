"""Associate model schemas with Python types.

A :class:`SchemaRegistry` maps a class to its default :class:`ModelSchema`.
Lookups go through the MRO, so a subclass without its own schema is
serialized with its nearest registered base's schema. A process-wide
registry backs the module-level helpers; pass ``registry=`` to use another.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from modelschema_py.schema.common import STAR, invariant
from modelschema_py.schema.model import ModelSchema, PropDef

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Type -> ModelSchema mapping."""

    def __init__(self):
        self._schemas: dict[type, ModelSchema] = {}

    def get(self, type_or_instance: Any) -> Optional[ModelSchema]:
        if type_or_instance is None:
            return None
        cls = type_or_instance if isinstance(type_or_instance, type) else type(type_or_instance)
        for klass in cls.__mro__:
            schema = self._schemas.get(klass)
            if schema is not None:
                return schema
        return None

    def has_own(self, cls: type) -> bool:
        return cls in self._schemas

    def set(self, cls: type, schema: ModelSchema) -> None:
        invariant(isinstance(cls, type), f"expected a class, got {cls!r}")
        logger.debug("Registering model schema for %s", cls.__qualname__)
        self._schemas[cls] = schema

    def clear(self) -> None:
        self._schemas.clear()

    def snapshot(self) -> dict[type, ModelSchema]:
        """Copy of the current registrations, for use with :meth:`restore`."""
        return dict(self._schemas)

    def restore(self, snapshot: dict[type, ModelSchema]) -> None:
        self._schemas = dict(snapshot)

    def __contains__(self, cls: type) -> bool:
        return self.get(cls) is not None

    def __len__(self) -> int:
        return len(self._schemas)


DEFAULT_REGISTRY = SchemaRegistry()


def _resolve(registry: Optional[SchemaRegistry]) -> SchemaRegistry:
    return DEFAULT_REGISTRY if registry is None else registry


def get_default_model_schema(
    type_or_instance: Any, registry: Optional[SchemaRegistry] = None
) -> Optional[ModelSchema]:
    """Return the schema registered for a type (or an instance's type), or None."""
    return _resolve(registry).get(type_or_instance)


def set_default_model_schema(
    cls: type, schema: ModelSchema, registry: Optional[SchemaRegistry] = None
) -> ModelSchema:
    _resolve(registry).set(cls, schema)
    return schema


def create_model_schema(
    cls: type,
    props: dict[str, PropDef],
    registry: Optional[SchemaRegistry] = None,
) -> ModelSchema:
    """Create and register the default schema for ``cls``.

    If a base class of ``cls`` already has a schema, the new schema extends it.

    Args:
        cls: The class the schema describes.
        props: Ordered property definitions.
        registry: Registry to use. Defaults to the process-wide one.

    Returns:
        The registered ModelSchema.
    """
    invariant(cls is not object, "one cannot simply define a model schema for object")
    invariant(isinstance(cls, type), "expected a class")
    registry = _resolve(registry)

    schema = ModelSchema(props=props, target_class=cls)
    for base in cls.__mro__[1:]:
        parent = registry.get(base)
        if parent is not None:
            if parent.target_class is not cls:
                schema.extends = parent
            break

    registry.set(cls, schema)
    return schema


def create_simple_schema(props: dict[str, PropDef]) -> ModelSchema:
    """Schema for plain dict-like objects; not registered anywhere."""
    return ModelSchema(props=props)


def serialize_all(*args, registry: Optional[SchemaRegistry] = None):
    """Serialize every primitive attribute of a class automatically.

    Installs ``"*": True`` on the class's default schema, creating the schema
    when the class has none of its own. Returns the class, so it can be used
    as a decorator::

        @serialize_all
        class Store:
            ...
    """
    invariant(
        len(args) == 1 and isinstance(args[0], type),
        "@serialize_all can only be used as class decorator",
    )
    target = args[0]
    registry = _resolve(registry)

    if not registry.has_own(target):
        logger.debug("Creating empty model schema for %s", target.__qualname__)
        create_model_schema(target, {}, registry=registry)

    registry.get(target).props[STAR] = True
    return target
