"""
Model identifiers and reasoning-effort levels accepted by OpenRouter.

Any model id string is accepted by the request builder; ``Model`` only
lists the ones this package is exercised against.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Model(str, Enum):
    """Known OpenRouter model identifiers."""

    GEMINI_2_5_FLASH_LITE = "google/gemini-2.5-flash-lite"
    GEMINI_3_FLASH_PREVIEW = "google/gemini-3-flash-preview"
    GEMINI_3_PRO_PREVIEW = "google/gemini-3-pro-preview"
    CLAUDE_SONNET_4_5 = "anthropic/claude-sonnet-4.5"
    GPT_5_2 = "openai/gpt-5.2"

    def __str__(self) -> str:
        return self.value


class ReasoningEffort(str, Enum):
    """
    How much deliberation the model applies before answering.

    See https://openrouter.ai/docs/api/api-reference/chat/send-chat-completion-request#request.body.reasoning
    """

    XHIGH = "xhigh"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    MINIMAL = "minimal"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


ModelLike = Union[Model, str]


def model_id(model: ModelLike) -> str:
    """Plain string id for a ``Model`` member or a raw id."""
    if isinstance(model, Model):
        return model.value
    return model
