"""
Schema reflection: Python result type -> JSON Schema.

Usage::

    from openrouter_structured.schema import generate

    node = generate(MyModel)
    node.to_dict()
    # -> {"type": "object", "properties": {...}, "required": [...],
    #     "additionalProperties": False}
"""

from .generator import generate
from .node import SchemaNode
from .types import DataKind, resolve_data_kind

__all__ = ["DataKind", "SchemaNode", "generate", "resolve_data_kind"]
