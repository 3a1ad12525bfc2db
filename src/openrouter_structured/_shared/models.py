"""Typed Pydantic models for the outbound request body.

``ChatCompletionPayload`` is the frozen snapshot handed to the transport;
``to_api_dict()`` is exactly what gets POSTed as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ======================================================================== #
# Structured output envelope                                                #
# ======================================================================== #


class JsonSchemaFormat(BaseModel):
    """``response_format.json_schema`` block."""

    name: str = "response"
    strict: bool = True
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ResponseFormat(BaseModel):
    """``response_format`` envelope asking for JSON matching a schema."""

    type: str = "json_schema"
    json_schema: JsonSchemaFormat

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_schema(cls, schema: dict[str, Any]) -> ResponseFormat:
        return cls(json_schema=JsonSchemaFormat(schema=schema))


class ReasoningConfig(BaseModel):
    """``reasoning`` directive."""

    effort: str

    model_config = ConfigDict(frozen=True)


# ======================================================================== #
# Chat Completions payload                                                  #
# ======================================================================== #


class ChatCompletionPayload(BaseModel):
    """Typed body for ``POST /chat/completions``."""

    model: str
    messages: list[dict[str, Any]]
    response_format: ResponseFormat
    reasoning: ReasoningConfig | None = None

    model_config = ConfigDict(frozen=True)

    def to_api_dict(self) -> dict[str, Any]:
        """Serialize to the JSON body, dropping an unset ``reasoning``."""
        return self.model_dump(by_alias=True, exclude_none=True)
