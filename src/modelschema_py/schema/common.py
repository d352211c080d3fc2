"""Shared types for model schemas: the SKIP sentinel, errors, value kinds."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

STAR = "*"  # Wildcard key in a schema's props


class _Skip:
    """Returned by a property serializer to drop the key from the result."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "SKIP"


SKIP = _Skip()


class SchemaContractError(Exception):
    pass


def invariant(condition: Any, message: str) -> None:
    if not condition:
        raise SchemaContractError(f"[modelschema] {message}")


PRIMITIVE_TYPES = (str, int, float, bool)


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, PRIMITIVE_TYPES)


def is_composite(value: Any) -> bool:
    return not is_primitive(value)


def read_prop(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute object. Missing reads as None."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def own_props(obj: Any) -> list[str]:
    """Own property names of ``obj`` in insertion order."""
    if isinstance(obj, Mapping):
        return list(obj.keys())
    try:
        return list(vars(obj).keys())
    except TypeError:
        return []
