# src/openrouter_structured/errors.py
"""
Error classes for openrouter-structured.

Every failure is raised to the caller; nothing is retried internally.
"""

from __future__ import annotations

from typing import Any, Dict, List


def describe_shape(shape: Any) -> str:
    """Human-readable name of a type, used in error messages."""
    if isinstance(shape, type):
        return shape.__name__
    return repr(shape)


class OpenRouterError(Exception):
    """
    Base exception for all openrouter-structured errors.

    Attributes:
        message: Error description
        raw_output: Raw payload that caused the failure, if any
    """

    def __init__(self, message: str, *, raw_output: Any = None):
        super().__init__(message)
        self.message = message
        self.raw_output = raw_output


# ============================================================================
# SCHEMA
# ============================================================================


class SchemaError(OpenRouterError):
    """Base class for failures while reflecting a result type into a schema."""

    def __init__(self, message: str, *, shape: Any = None):
        super().__init__(message)
        self.shape = shape


class UnsupportedKindError(SchemaError):
    """
    Raised when a type (or a type nested inside it) has no JSON Schema kind.

    Example:
        UnsupportedKindError(dict[str, int])
        # -> "unsupported type: dict[str, int]"
    """

    def __init__(self, shape: Any, *, reason: str | None = None):
        message = f"unsupported type: {describe_shape(shape)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, shape=shape)


class CyclicShapeError(SchemaError):
    """Raised when an object type refers back to itself."""

    def __init__(self, shape: Any):
        super().__init__(
            f"cyclic type reference: {describe_shape(shape)}",
            shape=shape,
        )


class UnexportedFieldError(SchemaError):
    """
    Raised when a required field has no alias.

    Fields without an alias are left out of the closed object schema, so the
    model can never send them; a required one would fail every decode.

    Example:
        UnexportedFieldError(Plain, "answer")
        # -> "required field has no alias: Plain.answer"
    """

    def __init__(self, shape: Any, field_name: str):
        super().__init__(
            f"required field has no alias: {describe_shape(shape)}.{field_name}",
            shape=shape,
        )
        self.field_name = field_name


class SchemaGenerationError(OpenRouterError):
    """Raised by the request builder when the response schema cannot be generated."""

    def __init__(self, cause: SchemaError):
        super().__init__(f"error generating schema: {cause}")
        self.cause = cause


# ============================================================================
# TRANSPORT / REMOTE
# ============================================================================


class TransportError(OpenRouterError):
    """Network-level failure (connection refused, DNS, timeout, bad URL...)."""

    def __init__(self, cause: Exception):
        super().__init__(f"request failed: {cause}")
        self.cause = cause


class RemoteAPIError(OpenRouterError):
    """
    Raised when the gateway answers with a non-2xx status.

    The message keeps the format ``API error: <status> - <message>``.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        code: Any = None,
        param: Any = None,
        error_type: str | None = None,
        raw_output: Any = None,
    ):
        super().__init__(
            f"API error: {status_code} - {message}",
            raw_output=raw_output,
        )
        self.status_code = status_code
        self.remote_message = message
        self.code = code
        self.param = param
        self.error_type = error_type


class ResponseDecodeError(OpenRouterError):
    """
    Raised when the response envelope or its embedded JSON content
    cannot be decoded into the requested type.
    """

    def __init__(
        self,
        message: str,
        *,
        raw_output: Any = None,
        field_errors: List[Dict[str, Any]] | None = None,
    ):
        super().__init__(message, raw_output=raw_output)
        self.field_errors = field_errors or []
