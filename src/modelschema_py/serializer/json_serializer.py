"""Render serialized objects as a JSON string."""
from __future__ import annotations

import json
from typing import Optional

from modelschema_py.registry.default_registry import SchemaRegistry
from modelschema_py.serializer.dispatch import serialize


def serialize_json(*args, indent: Optional[int] = 2, registry: Optional[SchemaRegistry] = None) -> str:
    """Serialize like :func:`serialize` and dump the result with ``json.dumps``.

    Key order follows the schema, so the output is deterministic for a given
    object and schema.

    Returns:
        Pretty-printed JSON string.
    """
    return json.dumps(serialize(*args, registry=registry), indent=indent, ensure_ascii=False)
