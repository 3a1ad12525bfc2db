"""
Client configuration.

``ClientConfig`` holds transport settings only; the API key is passed per
call and never stored.

Usage::

    from openrouter_structured import ClientConfig

    config = ClientConfig(timeout=30.0)
    config = ClientConfig.from_env()   # OPENROUTER_BASE_URL / OPENROUTER_TIMEOUT
"""

from __future__ import annotations

import os
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_TIMEOUT = 60.0


class ClientConfig(BaseModel):
    """Transport settings for :class:`~openrouter_structured.client.CompletionClient`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(
        DEFAULT_BASE_URL,
        min_length=1,
        description="Gateway root; ``/chat/completions`` is appended.",
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0.0,
        description="Request timeout in seconds.",
    )
    default_headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent with every request (e.g. HTTP-Referer, X-Title).",
    )

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``OPENROUTER_BASE_URL`` and ``OPENROUTER_TIMEOUT``.

        Unset or blank variables fall back to the defaults.

        Raises:
            pydantic.ValidationError: If ``OPENROUTER_TIMEOUT`` is not a
                positive number.
        """
        base_url = (os.getenv("OPENROUTER_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        # The raw string goes through the ``timeout`` field's validation.
        timeout = (os.getenv("OPENROUTER_TIMEOUT") or "").strip() or DEFAULT_TIMEOUT
        return cls(base_url=base_url, timeout=timeout)
