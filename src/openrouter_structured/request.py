"""
Fluent builder for a structured chat-completion request.

The response schema is derived from the result type every time the request
is serialized, so a request can be reused after changing its messages::

    class Answer(BaseModel):
        answer: str = Field(alias="answer")

    request = (
        chat_completion(Answer)
        .use(Model.CLAUDE_SONNET_4_5)
        .append_messages(
            SystemMessage(content="You are a geography expert."),
            UserMessage.from_text("Which city is more populated, Paris or Tokyo?"),
        )
        .with_reasoning_effort(ReasoningEffort.LOW)
    )
    answer = request.generate_content(api_key)   # -> Answer
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from ._shared.models import ChatCompletionPayload, ReasoningConfig, ResponseFormat
from .errors import SchemaError, SchemaGenerationError
from .messages import Message, messages_to_dicts
from .models import ModelLike, ReasoningEffort, model_id
from .schema import generate

if TYPE_CHECKING:
    from .client import CompletionClient

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ChatCompletionRequest(Generic[T]):
    """Accumulates model, messages and reasoning effort for one result type."""

    def __init__(self, response_type: Type[T]) -> None:
        self.response_type = response_type
        self.model: str = ""
        self.messages: List[Message] = []
        self.reasoning_effort: Optional[ReasoningEffort] = None

    def __repr__(self) -> str:
        return (
            f"ChatCompletionRequest(response_type={self.response_type!r}, "
            f"model={self.model!r}, messages={len(self.messages)}, "
            f"reasoning_effort={self.reasoning_effort!r})"
        )

    # ------------------------------------------------------------------ #
    # Fluent setters                                                       #
    # ------------------------------------------------------------------ #

    def use(self, model: ModelLike) -> ChatCompletionRequest[T]:
        self.model = model_id(model)
        return self

    def append_messages(self, *messages: Message) -> ChatCompletionRequest[T]:
        self.messages.extend(messages)
        return self

    def with_reasoning_effort(
        self, value: Union[ReasoningEffort, str, None]
    ) -> ChatCompletionRequest[T]:
        """Set the reasoning effort; ``None`` or ``""`` removes the directive.

        Raises:
            ValueError: If *value* is not a known effort level.
        """
        self.reasoning_effort = ReasoningEffort(value) if value else None
        return self

    # ------------------------------------------------------------------ #
    # Serialization                                                        #
    # ------------------------------------------------------------------ #

    def build_payload(self) -> ChatCompletionPayload:
        """Generate the response schema and freeze the request body.

        Raises:
            SchemaGenerationError: If ``response_type`` cannot be reflected.
        """
        try:
            node = generate(self.response_type)
        except SchemaError as e:
            raise SchemaGenerationError(e) from e

        reasoning = None
        if self.reasoning_effort is not None:
            reasoning = ReasoningConfig(effort=self.reasoning_effort.value)

        logger.debug(
            "Built payload: model=%s messages=%d reasoning=%s",
            self.model,
            len(self.messages),
            reasoning.effort if reasoning else None,
        )
        return ChatCompletionPayload(
            model=self.model,
            messages=messages_to_dicts(self.messages),
            response_format=ResponseFormat.for_schema(node.to_dict()),
            reasoning=reasoning,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.build_payload().to_api_dict()

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    # ------------------------------------------------------------------ #
    # Execution                                                            #
    # ------------------------------------------------------------------ #

    def generate_content(
        self, api_key: str, *, client: Optional[CompletionClient] = None
    ) -> T:
        """Send the request and decode the answer into ``response_type``.

        Uses the process-wide :func:`~openrouter_structured.client.default_client`
        unless *client* is given.
        """
        from .client import default_client

        return (client or default_client()).execute(self, api_key)


def chat_completion(response_type: Type[T]) -> ChatCompletionRequest[T]:
    """Start a request whose answer is decoded into *response_type*."""
    return ChatCompletionRequest(response_type)
