# src/openrouter_structured/schema/types.py
"""
Data kinds understood by the schema generator, and the resolver that maps
a Python type onto one of them.
"""

from __future__ import annotations

import collections.abc
import types
from enum import Enum
from typing import Annotated, Any, Tuple, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.dataclasses import is_pydantic_dataclass

from ..errors import UnsupportedKindError

NoneType = type(None)


class DataKind(str, Enum):
    """Closed set of JSON Schema kinds a result type can map to."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    OPTIONAL = "optional"
    """Nullable wrapper; resolves to the wrapped type's kind once unwrapped."""

    def __str__(self) -> str:
        return self.value


# Order matters: bool is a subclass of int.
_SCALAR_KINDS: Tuple[Tuple[type, DataKind], ...] = (
    (bool, DataKind.BOOLEAN),
    (str, DataKind.STRING),
    (int, DataKind.INTEGER),
    (float, DataKind.NUMBER),
)

_SEQUENCE_ORIGINS = frozenset(
    {
        list,
        tuple,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
    }
)

_UNION_ORIGINS = frozenset({Union, types.UnionType})


# ============================================================================
# TYPE DETECTION
# ============================================================================


def strip_annotated(shape: Any) -> Any:
    """Return ``X`` for ``Annotated[X, ...]`` (recursively), else *shape*."""
    while get_origin(shape) is Annotated:
        shape = get_args(shape)[0]
    return shape


def is_object_shape(shape: Any) -> bool:
    """Check if type is a pydantic model or pydantic dataclass."""
    if not isinstance(shape, type):
        return False
    if issubclass(shape, BaseModel):
        return True
    return is_pydantic_dataclass(shape)


def optional_inner(shape: Any) -> Any | None:
    """Return ``X`` for ``Optional[X]`` / ``X | None``, else ``None``."""
    if get_origin(shape) not in _UNION_ORIGINS:
        return None
    members = [a for a in get_args(shape) if a is not NoneType]
    if len(members) != 1 or len(members) == len(get_args(shape)):
        return None
    return members[0]


def resolve_data_kind(shape: Any) -> DataKind:
    """
    Map a Python type onto its :class:`DataKind`.

    Args:
        shape: A type or typing construct (``list[str]``, ``Optional[int]``...)

    Returns:
        The matching data kind.

    Raises:
        UnsupportedKindError: If the type has no JSON Schema representation
            (mappings, callables, complex numbers, queues, ``Any``...).
    """
    shape = strip_annotated(shape)
    origin = get_origin(shape)

    if origin is None:
        if isinstance(shape, type):
            for base, kind in _SCALAR_KINDS:
                if issubclass(shape, base):
                    return kind
            if shape in _SEQUENCE_ORIGINS:
                return DataKind.ARRAY
            if is_object_shape(shape):
                return DataKind.OBJECT
        raise UnsupportedKindError(shape)

    if origin in _SEQUENCE_ORIGINS:
        return DataKind.ARRAY

    if optional_inner(shape) is not None:
        return DataKind.OPTIONAL

    raise UnsupportedKindError(shape)
