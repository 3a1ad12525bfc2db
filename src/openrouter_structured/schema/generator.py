# src/openrouter_structured/schema/generator.py
"""
Reflect a Python result type into a :class:`SchemaNode` tree.

Object fields are taken in declaration order. A field only appears in the
schema when it declares an explicit ``alias``, and that alias is its JSON name.
A field with a default (or default factory) may be omitted by the model and
is therefore left out of ``required``. A field without an alias must have a
default, since the closed schema forbids the model from sending it::

    class Review(BaseModel):
        summary: str = Field(alias="summary")
        tags: list[str] = Field(alias="tags")
        note: str = Field("", alias="note")   # optional
        internal_id: int = 0                  # no alias: not in the schema

    generate(Review).to_dict()
    # {"type": "object",
    #  "properties": {"summary": {...}, "tags": {...}, "note": {...}},
    #  "required": ["summary", "tags"],
    #  "additionalProperties": False}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple, get_args

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..errors import CyclicShapeError, UnexportedFieldError, UnsupportedKindError
from .node import SchemaNode
from .types import DataKind, optional_inner, resolve_data_kind, strip_annotated

logger = logging.getLogger(__name__)


def generate(shape: Any) -> SchemaNode:
    """
    Build the schema tree describing *shape*.

    Args:
        shape: The result type (pydantic model, pydantic dataclass, list,
            tuple, Optional, or a scalar type).

    Returns:
        Root :class:`SchemaNode`.

    Raises:
        UnsupportedKindError: If *shape* or anything nested in it has no
            JSON Schema kind. No partial schema is returned.
        CyclicShapeError: If an object type refers back to itself.
        UnexportedFieldError: If a required field has no alias.
    """
    node = _generate(shape, ())
    logger.debug("Generated %s schema for %r", node.kind.value, shape)
    return node


# ------------------------------------------------------------------ #
# Internal helpers                                                     #
# ------------------------------------------------------------------ #


def _generate(shape: Any, path: Tuple[type, ...]) -> SchemaNode:
    shape = strip_annotated(shape)
    kind = resolve_data_kind(shape)

    if kind in (DataKind.STRING, DataKind.INTEGER, DataKind.NUMBER, DataKind.BOOLEAN):
        return SchemaNode.leaf(kind)

    if kind is DataKind.ARRAY:
        return SchemaNode.array_of(_generate(_element_shape(shape), path))

    if kind is DataKind.OPTIONAL:
        # Transparent: the node is the wrapped type's node, not marked nullable.
        return _generate(optional_inner(shape), path)

    if kind is DataKind.OBJECT:
        return _object_schema(shape, path)

    raise UnsupportedKindError(shape)


def _element_shape(shape: Any) -> Any:
    """Element type of a sequence type."""
    args = get_args(shape)
    if not args:
        raise UnsupportedKindError(shape, reason="sequence without an element type")

    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]

    first = args[0]
    if any(a != first for a in args[1:]):
        raise UnsupportedKindError(shape, reason="tuple elements must share one type")
    return first


def _declared_fields(shape: type) -> Dict[str, FieldInfo]:
    if issubclass(shape, BaseModel):
        return shape.model_fields
    return shape.__pydantic_fields__


def _object_schema(shape: type, path: Tuple[type, ...]) -> SchemaNode:
    if shape in path:
        raise CyclicShapeError(shape)
    path = path + (shape,)

    properties: Dict[str, SchemaNode] = {}
    required: List[str] = []

    for attr, field in _declared_fields(shape).items():
        if attr.startswith("_") or field.alias is None:
            if field.is_required():
                raise UnexportedFieldError(shape, attr)
            continue

        name = field.alias
        if field.is_required():
            required.append(name)
        properties[name] = _generate(field.annotation, path)

    return SchemaNode.closed_object(properties, required)
