"""
Error taxonomy for the conversion endpoint.

Every error carries the HTTP status and the message that ends up in the
``{"error": ...}`` body.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

DEFAULT_UPSTREAM_MESSAGE = "Image conversion failed"


class ConversionError(Exception):
    status_code = 500
    message = DEFAULT_UPSTREAM_MESSAGE

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MethodNotAllowed(ConversionError):
    status_code = 405
    message = "Method not allowed"


class InvalidInput(ConversionError):
    status_code = 400
    message = "Invalid or missing imageDataUrl"


class PayloadTooLarge(ConversionError):
    status_code = 413
    message = "Image too large. Please use a smaller screenshot."


class UpstreamFailure(ConversionError):
    status_code = 500
    message = DEFAULT_UPSTREAM_MESSAGE


def _nested_api_message(exc: BaseException) -> Optional[str]:
    # openai.APIStatusError keeps the parsed "error" object in .body;
    # other clients nest it one level deeper or expose it as .error
    body: Any = getattr(exc, "body", None)
    if isinstance(body, Mapping):
        inner = body.get("error", body)
        if isinstance(inner, Mapping) and isinstance(inner.get("message"), str):
            return inner["message"]
        if isinstance(inner, str):
            return inner

    error: Any = getattr(exc, "error", None)
    if isinstance(error, Mapping) and isinstance(error.get("message"), str):
        return error["message"]
    if isinstance(getattr(error, "message", None), str):
        return error.message
    return None


def _status_of(exc: BaseException) -> int:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool) and 400 <= value <= 599:
            return value
    return UpstreamFailure.status_code


def error_from_exception(exc: BaseException) -> UpstreamFailure:
    """Translate whatever the inference call raised into an UpstreamFailure."""
    message = _nested_api_message(exc)
    if not message:
        own = getattr(exc, "message", None)
        message = own if isinstance(own, str) and own else str(exc)
    return UpstreamFailure(message or DEFAULT_UPSTREAM_MESSAGE, _status_of(exc))
