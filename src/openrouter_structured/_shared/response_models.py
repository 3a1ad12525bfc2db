"""Response envelopes returned by the gateway.

Only the fields this package reads are declared; everything else in the
body is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseMessage(BaseModel):
    """``choices[].message``; ``content`` holds the embedded JSON string."""

    role: str | None = None
    content: str | None = None

    model_config = ConfigDict(extra="ignore")


class Choice(BaseModel):
    message: ResponseMessage

    model_config = ConfigDict(extra="ignore")


class ChatCompletionResponse(BaseModel):
    """Successful response body."""

    id: str | None = None
    model: str | None = None
    choices: list[Choice] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class APIErrorDetail(BaseModel):
    code: Any = None
    message: str = ""
    param: Any = None
    type: str | None = None

    model_config = ConfigDict(extra="ignore")


class APIErrorResponse(BaseModel):
    """Error body: ``{"error": {"code", "message", "param", "type"}}``."""

    error: APIErrorDetail

    model_config = ConfigDict(extra="ignore")
