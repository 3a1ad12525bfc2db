"""
Completion client: one synchronous POST per request.

The client wraps a single ``httpx.Client`` that is safe to share between
threads; each :meth:`CompletionClient.execute` call keeps its own request
and response state. There is no retry and no streaming.

Usage::

    from openrouter_structured import CompletionClient, chat_completion

    with CompletionClient() as client:
        result = client.execute(chat_completion(Answer).use(...), api_key)
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ._shared.response_models import APIErrorResponse, ChatCompletionResponse
from .config import ClientConfig
from .errors import RemoteAPIError, ResponseDecodeError, TransportError
from .request import ChatCompletionRequest

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _field_errors(error: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"field": ".".join(str(x) for x in err["loc"]), "error": err["msg"]}
        for err in error.errors()
    ]


class CompletionClient:
    """
    Sends :class:`ChatCompletionRequest` objects to the gateway.

    Args:
        config: Transport settings; defaults to ``ClientConfig()``.
        http_client: Pre-built ``httpx.Client`` to use instead of creating
            one. A client passed in is not closed by :meth:`close`.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=self.config.timeout)

    def __enter__(self) -> CompletionClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # ------------------------------------------------------------------ #
    # execute()                                                            #
    # ------------------------------------------------------------------ #

    def execute(self, request: ChatCompletionRequest[T], api_key: str) -> T:
        """Send *request* and decode the answer into its result type.

        Raises:
            SchemaGenerationError: The result type cannot be reflected
                (raised before any network I/O).
            TransportError: The HTTP exchange itself failed, or the
                configured URL is malformed.
            RemoteAPIError: The gateway answered with a non-2xx status.
            ResponseDecodeError: The envelope or its JSON content does not
                decode into the result type.
        """
        payload = request.build_payload()
        url = self.config.chat_completions_url
        # httpx.Headers is case-insensitive, so these replace any
        # "authorization"/"content-type" spelling in default_headers.
        headers = httpx.Headers(self.config.default_headers)
        headers["Authorization"] = f"Bearer {api_key}"
        headers["Content-Type"] = "application/json"

        logger.debug("POST %s model=%s", url, payload.model)
        try:
            response = self._http.post(url, headers=headers, json=payload.to_api_dict())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Request to %s failed: %s", url, e)
            raise TransportError(e) from e

        if not response.is_success:
            raise self._remote_error(response)

        content = self._extract_content(response)
        return self._decode_content(content, request.response_type)

    # ------------------------------------------------------------------ #
    # Response handling                                                    #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _remote_error(response: httpx.Response) -> RemoteAPIError:
        try:
            body = APIErrorResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                "Gateway returned %d with a non-standard error body",
                response.status_code,
            )
            return RemoteAPIError(
                response.status_code,
                response.text.strip() or response.reason_phrase,
                raw_output=response.text,
            )

        logger.warning(
            "Gateway returned %d: %s", response.status_code, body.error.message
        )
        return RemoteAPIError(
            response.status_code,
            body.error.message,
            code=body.error.code,
            param=body.error.param,
            error_type=body.error.type,
            raw_output=response.text,
        )

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        try:
            body = ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"error unmarshaling response: {e}",
                raw_output=response.text,
                field_errors=_field_errors(e),
            ) from e

        if not body.choices:
            raise ResponseDecodeError(
                "error unmarshaling response: no choices returned",
                raw_output=response.text,
            )

        content = body.choices[0].message.content
        if content is None:
            raise ResponseDecodeError(
                "error unmarshaling response: first choice has no content",
                raw_output=response.text,
            )
        return content

    @staticmethod
    def _decode_content(content: str, response_type: Any) -> Any:
        try:
            return TypeAdapter(response_type).validate_json(content)
        except ValidationError as e:
            field_errors = _field_errors(e)
            raise ResponseDecodeError(
                "error unmarshaling response: "
                + "; ".join(f"{fe['field']}: {fe['error']}" for fe in field_errors),
                raw_output=content,
                field_errors=field_errors,
            ) from e


# ======================================================================== #
# Process-wide default client                                               #
# ======================================================================== #

_default_client: Optional[CompletionClient] = None
_default_lock = threading.Lock()


def default_client() -> CompletionClient:
    """Shared client built from :meth:`ClientConfig.from_env` on first use."""
    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = CompletionClient(ClientConfig.from_env())
    return _default_client
