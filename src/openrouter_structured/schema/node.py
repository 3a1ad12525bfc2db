# src/openrouter_structured/schema/node.py
"""
``SchemaNode``: the tree produced by the schema generator.

Nodes are immutable; ``to_dict()`` renders the JSON Schema that goes into
the ``response_format`` envelope.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .types import DataKind


class SchemaNode(BaseModel):
    """JSON Schema description of one type.

    Only the fields that belong to ``kind`` may be set: ``items`` for arrays;
    ``properties``, ``required_fields`` and ``additional_properties_allowed``
    for objects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: DataKind
    description: Optional[str] = None
    enum_values: Optional[List[str]] = None
    properties: Optional[Dict[str, SchemaNode]] = None
    required_fields: Optional[List[str]] = None
    items: Optional[SchemaNode] = None
    additional_properties_allowed: Optional[bool] = None
    nullable: bool = False

    @model_validator(mode="after")
    def _check_kind_fields(self) -> SchemaNode:
        if self.kind is DataKind.OPTIONAL:
            raise ValueError("optional is a wrapper, not a schema node kind")

        if self.kind is DataKind.ARRAY and self.items is None:
            raise ValueError("array node requires items")
        if self.kind is not DataKind.ARRAY and self.items is not None:
            raise ValueError(f"items is only valid for array nodes, not {self.kind}")

        if self.kind is not DataKind.OBJECT:
            for name in ("properties", "required_fields", "additional_properties_allowed"):
                if getattr(self, name) is not None:
                    raise ValueError(
                        f"{name} is only valid for object nodes, not {self.kind}"
                    )
        return self

    # ------------------------------------------------------------------ #
    # Constructors                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def leaf(cls, kind: DataKind) -> SchemaNode:
        return cls(kind=kind)

    @classmethod
    def array_of(cls, items: SchemaNode) -> SchemaNode:
        return cls(kind=DataKind.ARRAY, items=items)

    @classmethod
    def closed_object(
        cls,
        properties: Dict[str, SchemaNode],
        required_fields: List[str],
    ) -> SchemaNode:
        """Closed object schema (``additionalProperties: false``)."""
        return cls(
            kind=DataKind.OBJECT,
            properties=properties,
            required_fields=required_fields,
            additional_properties_allowed=False,
        )

    # ------------------------------------------------------------------ #
    # Serialization                                                        #
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        """Render as a JSON Schema dict.

        Objects always carry ``properties`` and ``required``, even when empty.
        """
        d: Dict[str, Any] = {"type": self.kind.value}
        if self.description:
            d["description"] = self.description
        if self.enum_values:
            d["enum"] = list(self.enum_values)
        if self.kind is DataKind.OBJECT:
            d["properties"] = {
                name: child.to_dict() for name, child in (self.properties or {}).items()
            }
            d["required"] = list(self.required_fields or [])
        if self.items is not None:
            d["items"] = self.items.to_dict()
        if self.additional_properties_allowed is not None:
            d["additionalProperties"] = self.additional_properties_allowed
        if self.nullable:
            d["nullable"] = True
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
