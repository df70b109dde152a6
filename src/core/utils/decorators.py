"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
import traceback
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import (
    MalformedRequestError,
    NotFoundError,
    OcularServiceError,
    ValidationError,
)
from core.utils.response import JsonDict, ResponseBuilder
from core.utils.validators import sanitize_validation_errors

logger = Logger(service="api-gateway-handler", UTC=True)

GENERIC_INTERNAL_MESSAGE = "Internal Server Error"

# KeyError, TypeError and the like escaping a handler are faults (500), not bad input
CLIENT_INPUT_ERRORS = (ValueError,)

FRIENDLY_PREFIXES = (
    "Invalid",
    "Missing",
    "Required",
    "Must",
    "Cannot",
    "Error decoding",
    "User",
    "Request",
)


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Messages that already read as caller guidance are kept verbatim.
    """
    exc_str = str(exc)

    if exc_str and exc_str.startswith(FRIENDLY_PREFIXES):
        return exc_str

    return "The provided data is invalid. Please check your input and try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def _to_error_response(
    exc: Exception,
    *,
    handler_name: str,
    request_id: str | None,
    cors_origin: str | None,
) -> JsonDict:
    """Map an exception escaping a handler onto a 400 / 404 / 500 response."""
    common: dict[str, Any] = {"request_id": request_id, "cors_origin": cors_origin}

    if isinstance(exc, PydanticValidationError):
        _log_error("Request validation failed", handler_name=handler_name, request_id=request_id, exc=exc)
        return ResponseBuilder.bad_request(
            "Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
            **common,
        )

    if isinstance(exc, (MalformedRequestError, ValidationError)):
        _log_error("Bad request", handler_name=handler_name, request_id=request_id, exc=exc)
        return ResponseBuilder.bad_request(exc.message, error=exc.error_code, **common)

    if isinstance(exc, NotFoundError):
        _log_error("Resource not found", handler_name=handler_name, request_id=request_id, exc=exc)
        return ResponseBuilder.not_found(exc.message, error=exc.error_code, **common)

    if isinstance(exc, OcularServiceError):
        # Store failures: the code is safe to expose, the message and details are not
        _log_error(
            "Service error in handler",
            handler_name=handler_name,
            request_id=request_id,
            exc=exc,
            level="exception",
        )
        return ResponseBuilder.internal_error(GENERIC_INTERNAL_MESSAGE, error=exc.error_code, **common)

    if isinstance(exc, CLIENT_INPUT_ERRORS):
        _log_error("Validation error in handler", handler_name=handler_name, request_id=request_id, exc=exc)
        return ResponseBuilder.bad_request(_get_user_friendly_message(exc), **common)

    # Timeouts and anything else unexpected
    _log_error(
        "Unexpected error in handler",
        handler_name=handler_name,
        request_id=request_id,
        exc=exc,
        level="exception",
    )
    return ResponseBuilder.error(
        status=HTTPStatus.INTERNAL_SERVER_ERROR,
        message=GENERIC_INTERNAL_MESSAGE,
        **common,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Translation of escaped errors into 400 / 404 / 500 responses
    - Sanitized error bodies (no internals or tracebacks leak to clients)

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return ResponseBuilder.ok({"message": "done"})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        try:
            return func(event, context)
        except Exception as exc:
            return _to_error_response(
                exc,
                handler_name=func.__name__,
                request_id=getattr(context, "aws_request_id", None),
                cors_origin=cors_origin,
            )

    return wrapper
