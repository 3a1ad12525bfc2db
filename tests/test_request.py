"""Tests for request.py and the wire payload models."""

import json
from typing import Any, Dict, List

import pytest
from pydantic import BaseModel, Field

from openrouter_structured import (
    ChatCompletionRequest,
    Model,
    ReasoningEffort,
    SchemaGenerationError,
    SystemMessage,
    TextContent,
    UnsupportedKindError,
    UserMessage,
    chat_completion,
)
from openrouter_structured._shared.models import ChatCompletionPayload


class SummaryResponse(BaseModel):
    summary: str = Field(alias="summary")
    tags: List[str] = Field(alias="tags")


def _request() -> ChatCompletionRequest[SummaryResponse]:
    return (
        chat_completion(SummaryResponse)
        .use(Model.GEMINI_2_5_FLASH_LITE)
        .append_messages(
            SystemMessage(content="System prompt"),
            UserMessage(content=[TextContent(text="User prompt")]),
        )
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class TestBuilder:

    def test_fluent_methods_return_same_request(self):
        req = chat_completion(SummaryResponse)
        assert req.use("x/y") is req
        assert req.append_messages() is req
        assert req.with_reasoning_effort(None) is req

    def test_model_enum_is_stored_as_id(self):
        req = chat_completion(SummaryResponse).use(Model.CLAUDE_SONNET_4_5)
        assert req.model == "anthropic/claude-sonnet-4.5"

    def test_any_model_string_accepted(self):
        req = chat_completion(SummaryResponse).use("meta-llama/llama-3-70b")
        assert req.to_dict()["model"] == "meta-llama/llama-3-70b"

    def test_append_preserves_order_across_calls(self):
        req = chat_completion(SummaryResponse)
        req.append_messages(SystemMessage(content="a"))
        req.append_messages(UserMessage.from_text("b"), UserMessage.from_text("c"))
        roles = [m["role"] for m in req.to_dict()["messages"]]
        assert roles == ["system", "user", "user"]
        assert req.to_dict()["messages"][2]["content"][0]["text"] == "c"

    def test_reasoning_effort_from_string(self):
        req = chat_completion(SummaryResponse).with_reasoning_effort("high")
        assert req.reasoning_effort is ReasoningEffort.HIGH

    def test_unknown_reasoning_effort_rejected(self):
        with pytest.raises(ValueError):
            chat_completion(SummaryResponse).with_reasoning_effort("ultra")

    def test_repr(self):
        assert "SummaryResponse" in repr(_request())


# ═══════════════════════════════════════════════════════════════════════════════
# Serialization
# ═══════════════════════════════════════════════════════════════════════════════


class TestSerialization:

    def test_body_shape(self):
        data = json.loads(_request().to_json())

        assert data["model"] == "google/gemini-2.5-flash-lite"
        assert len(data["messages"]) == 2
        assert "reasoning" not in data

        fmt = data["response_format"]
        assert fmt["type"] == "json_schema"
        assert fmt["json_schema"]["name"] == "response"
        assert fmt["json_schema"]["strict"] is True

        schema = fmt["json_schema"]["schema"]
        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"summary", "tags"}
        assert schema["required"] == ["summary", "tags"]
        assert schema["additionalProperties"] is False

    @pytest.mark.parametrize("effort", list(ReasoningEffort))
    def test_reasoning_included_when_set(self, effort):
        data = _request().with_reasoning_effort(effort).to_dict()
        assert data["reasoning"] == {"effort": effort.value}

    @pytest.mark.parametrize("cleared", ["", None])
    def test_reasoning_omitted_when_cleared(self, cleared):
        req = _request().with_reasoning_effort(ReasoningEffort.XHIGH)
        req.with_reasoning_effort(cleared)
        assert "reasoning" not in req.to_dict()

    def test_schema_reflects_response_type_not_request(self):
        schema = chat_completion(int).to_dict()["response_format"]["json_schema"]["schema"]
        assert schema == {"type": "integer"}

    def test_payload_is_frozen(self):
        payload = _request().build_payload()
        assert isinstance(payload, ChatCompletionPayload)
        with pytest.raises(Exception):
            payload.model = "other"

    def test_schema_is_regenerated_per_serialization(self):
        req = _request()
        first = req.build_payload()
        req.append_messages(UserMessage.from_text("more"))
        second = req.build_payload()
        assert len(first.messages) == 2
        assert len(second.messages) == 3
        assert first.response_format == second.response_format


# ═══════════════════════════════════════════════════════════════════════════════
# Schema failures
# ═══════════════════════════════════════════════════════════════════════════════


class TestSchemaFailure:

    def test_map_result_type_fails(self):
        req = chat_completion(Dict[str, Any])
        with pytest.raises(SchemaGenerationError, match="error generating schema") as exc:
            req.build_payload()
        assert isinstance(exc.value.cause, UnsupportedKindError)
        assert isinstance(exc.value.__cause__, UnsupportedKindError)

    def test_to_json_propagates(self):
        with pytest.raises(SchemaGenerationError):
            chat_completion(complex).to_json()
