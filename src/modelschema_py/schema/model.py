"""Model schema data model (ModelSchema, PropSchema)."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Pattern, Union

Serializer = Callable[[Any, Any, Any], Any]


def _identity(value, key=None, parent=None):
    return value


@dataclass
class PropSchema:
    """A custom property definition.

    When used as the ``"*"`` entry of a schema with a ``pattern``, the
    definition doubles as the schema for every matched key, so it may carry
    its own ``props`` and ``extends``.
    """
    serializer: Serializer = _identity
    jsonname: Optional[str] = None
    pattern: Optional[Pattern[str]] = None
    props: Optional[dict[str, "PropDef"]] = None
    extends: Optional["ModelSchema"] = None

    def __post_init__(self):
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern)


PropDef = Union[bool, PropSchema]


@dataclass
class ModelSchema:
    props: dict[str, PropDef] = field(default_factory=dict)
    extends: Optional[ModelSchema] = None
    target_class: Optional[type] = None

    def __repr__(self):
        name = self.target_class.__name__ if self.target_class else "simple"
        return f"ModelSchema({name}, props={list(self.props)!r})"


DEFAULT_PRIMITIVE_PROP = PropSchema(serializer=_identity)
