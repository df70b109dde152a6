"""
Lambda handler responsible for returning a user's image records.

Route: GET /api/ocular?userName=<name>
"""

import time
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import DynamoDBError, NotFoundError, ValidationError
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import GENERIC_INTERNAL_MESSAGE, api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import FetchUserRequest
from .service import FetchService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests for a user's image records.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response whose body is a JSON array of
        ``{"userName", "imageData"}`` records
    """
    started = time.perf_counter()
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received user fetch request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    params = event.get("queryStringParameters") or {}

    try:
        request = validate_request(FetchUserRequest, params)
    except PydanticValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Bad Request - userName is required in the query parameters",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    service = FetchService()

    try:
        records = service.fetch(request.user_name)

    except ValidationError as exc:
        return ResponseBuilder.bad_request(exc.message, error=exc.error_code, request_id=request_id)

    except NotFoundError as exc:
        logger.warning("User not found", extra={"user_name": request.user_name})
        return ResponseBuilder.not_found(
            "Not Found - User not found",
            error=exc.error_code,
            request_id=request_id,
        )

    except DynamoDBError as exc:
        logger.exception(
            "Fetching user data failed",
            extra={"user_name": request.user_name, "error_code": exc.error_code},
        )
        return ResponseBuilder.internal_error(
            GENERIC_INTERNAL_MESSAGE,
            error=exc.error_code,
            request_id=request_id,
        )

    logger.info(
        "Fetched data for user",
        extra={
            "user_name": request.user_name,
            "count": len(records),
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )

    return ResponseBuilder.records(records)
