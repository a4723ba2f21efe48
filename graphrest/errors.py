"""
Error types for graphrest and the remote error classifier.

Provides:
- GraphRestError base with code/message/details and dict serialization
- APIError for error-shaped replies from the remote service
- raise_for_error, applied once per invocation by the dispatcher
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from graphrest.transport.protocol import RemoteReply

ERROR_CODE_KEY = "error_code"


class GraphRestError(Exception):
    """Base exception for all graphrest errors."""

    def __init__(
        self,
        message: str,
        code: str = "GRAPHREST_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class APIError(GraphRestError):
    """Raised when the remote service answers with an error payload."""

    def __init__(
        self,
        error_code: Any,
        error_message: str | None = None,
        *,
        status_code: int | None = None,
        error_subcode: Any = None,
        request_args: Any = None,
        response_body: Any = None,
    ):
        self.error_code = error_code
        self.error_message = error_message
        self.error_subcode = error_subcode
        self.status_code = status_code
        self.request_args = request_args
        self.response_body = response_body
        super().__init__(
            error_message or "remote call failed",
            code=str(error_code),
            details={
                "error_subcode": error_subcode,
                "status_code": status_code,
                "request_args": request_args,
            },
        )

    def __str__(self) -> str:
        text = super().__str__()
        if self.status_code is not None:
            return f"{text} [HTTP {self.status_code}]"
        return text


def is_error_body(body: Any) -> bool:
    """Only mapping bodies with a truthy error code are errors."""
    return isinstance(body, dict) and bool(body.get(ERROR_CODE_KEY))


def raise_for_error(reply: RemoteReply) -> Any:
    """Return the reply body, or raise APIError when it is error-shaped."""
    body = reply.body
    if not is_error_body(body):
        return body
    error = APIError(
        body.get(ERROR_CODE_KEY),
        _error_message(body),
        status_code=reply.status_code,
        error_subcode=body.get("error_subcode"),
        request_args=body.get("request_args"),
        response_body=body,
    )
    logger.warning(f"Remote API error: {error}")
    raise error


def _error_message(body: dict[str, Any]) -> str | None:
    for key in ("error_msg", "error_message", "message"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None
