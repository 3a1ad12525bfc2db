"""Tests for messages.py: wire shapes of messages and content parts."""

import pytest
from pydantic import ValidationError

from openrouter_structured.messages import (
    ImageContent,
    SystemMessage,
    TextContent,
    UserMessage,
    messages_to_dicts,
)


class TestContentParts:

    def test_text(self):
        assert TextContent(text="hello").to_dict() == {"type": "text", "text": "hello"}

    def test_image_without_detail(self):
        part = ImageContent(url="https://example.com/cat.png")
        assert part.to_dict() == {
            "type": "image_url",
            "image_url": {"url": "https://example.com/cat.png"},
        }

    def test_image_with_detail(self):
        part = ImageContent(url="data:image/png;base64,AAAA", detail="low")
        assert part.to_dict()["image_url"] == {
            "url": "data:image/png;base64,AAAA",
            "detail": "low",
        }

    def test_image_detail_is_constrained(self):
        with pytest.raises(ValidationError):
            ImageContent(url="https://example.com/cat.png", detail="ultra")


class TestMessages:

    def test_system(self):
        assert SystemMessage(content="Be brief").to_dict() == {
            "role": "system",
            "content": "Be brief",
        }

    def test_system_with_name(self):
        d = SystemMessage(content="Be brief", name="rules").to_dict()
        assert d["name"] == "rules"

    def test_user_keeps_part_order(self):
        msg = UserMessage(
            content=[
                TextContent(text="What is in this picture?"),
                ImageContent(url="https://example.com/cat.png", detail="high"),
            ]
        )
        d = msg.to_dict()
        assert d["role"] == "user"
        assert [p["type"] for p in d["content"]] == ["text", "image_url"]
        assert "name" not in d

    def test_user_from_text(self):
        msg = UserMessage.from_text("Hi", name="alice")
        assert msg.to_dict() == {
            "role": "user",
            "content": [{"type": "text", "text": "Hi"}],
            "name": "alice",
        }

    def test_user_accepts_wire_dicts(self):
        msg = UserMessage(content=[{"type": "text", "text": "Hi"}])
        assert isinstance(msg.content[0], TextContent)

    def test_roles_are_fixed(self):
        with pytest.raises(ValidationError):
            SystemMessage(role="user", content="x")

    def test_messages_to_dicts(self):
        dicts = messages_to_dicts(
            [SystemMessage(content="sys"), UserMessage.from_text("usr")]
        )
        assert [d["role"] for d in dicts] == ["system", "user"]
