"""
openrouter-structured - typed structured output over the OpenRouter gateway.

Describe the answer you want as a pydantic model, and get an instance of it
back. The model's JSON Schema is reflected from the class and sent as a
``response_format`` so the remote model replies in that shape.

Basic Usage:
    from pydantic import BaseModel, Field
    from openrouter_structured import Model, UserMessage, chat_completion

    class Summary(BaseModel):
        summary: str = Field(alias="summary")
        tags: list[str] = Field(alias="tags")

    result = (
        chat_completion(Summary)
        .use(Model.GEMINI_2_5_FLASH_LITE)
        .append_messages(UserMessage.from_text("Summarize: ..."))
        .generate_content(api_key)
    )
"""

from .client import CompletionClient, default_client
from .config import ClientConfig
from .errors import (
    CyclicShapeError,
    UnexportedFieldError,
    OpenRouterError,
    RemoteAPIError,
    ResponseDecodeError,
    SchemaError,
    SchemaGenerationError,
    TransportError,
    UnsupportedKindError,
)
from .messages import (
    Content,
    ImageContent,
    Message,
    SystemMessage,
    TextContent,
    UserMessage,
)
from .models import Model, ReasoningEffort
from .request import ChatCompletionRequest, chat_completion
from .schema import DataKind, SchemaNode, generate, resolve_data_kind

__version__ = "0.1.0"

__all__ = [
    # Requests
    "ChatCompletionRequest",
    "chat_completion",
    "CompletionClient",
    "ClientConfig",
    "default_client",
    # Messages
    "Content",
    "ImageContent",
    "Message",
    "SystemMessage",
    "TextContent",
    "UserMessage",
    # Enums
    "Model",
    "ReasoningEffort",
    # Schema
    "DataKind",
    "SchemaNode",
    "generate",
    "resolve_data_kind",
    # Errors
    "OpenRouterError",
    "SchemaError",
    "UnsupportedKindError",
    "CyclicShapeError",
    "UnexportedFieldError",
    "SchemaGenerationError",
    "TransportError",
    "RemoteAPIError",
    "ResponseDecodeError",
]
