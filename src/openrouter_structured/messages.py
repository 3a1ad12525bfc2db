"""
Typed chat messages and content parts.

Both unions are closed: ``Message`` is ``SystemMessage | UserMessage`` and
``Content`` is ``TextContent | ImageContent``. Each variant converts itself
to the OpenRouter wire format with ``to_dict()``.

    SystemMessage(content="Answer in French")
        -> {"role": "system", "content": "Answer in French"}
    UserMessage(content=[TextContent(text="Hi")])
        -> {"role": "user", "content": [{"type": "text", "text": "Hi"}]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ImageDetail = Literal["auto", "low", "high"]


# ======================================================================== #
# Content parts                                                             #
# ======================================================================== #


class TextContent(BaseModel):
    """Plain text content part."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


class ImageContent(BaseModel):
    """Image content part, referenced by URL (or a ``data:`` URI)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    url: str
    detail: Optional[ImageDetail] = None

    def to_dict(self) -> Dict[str, Any]:
        image_url: Dict[str, Any] = {"url": self.url}
        if self.detail:
            image_url["detail"] = self.detail
        return {"type": self.type, "image_url": image_url}


Content = Union[TextContent, ImageContent]


# ======================================================================== #
# Messages                                                                  #
# ======================================================================== #


class SystemMessage(BaseModel):
    """System prompt."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system"] = "system"
    content: str
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"role": self.role, "content": self.content}
        if self.name:
            d["name"] = self.name
        return d


class UserMessage(BaseModel):
    """User turn made of one or more content parts."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: List[Content] = Field(default_factory=list)
    name: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, *, name: str | None = None) -> UserMessage:
        """Shortcut for a single text part."""
        return cls(content=[TextContent(text=text)], name=name)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "role": self.role,
            "content": [part.to_dict() for part in self.content],
        }
        if self.name:
            d["name"] = self.name
        return d


Message = Union[SystemMessage, UserMessage]


def messages_to_dicts(messages: List[Message]) -> List[Dict[str, Any]]:
    """Serialize a list of messages to the dicts sent in the request body."""
    return [m.to_dict() for m in messages]
