"""
Lambda handler responsible for creating or merging a user's image records.

Route: POST /api/ocular
"""

import time
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import DynamoDBError, MalformedRequestError, ValidationError
from core.models.user import MergeOutcome
from core.utils.constants import MESSAGE_USER_CREATED, MESSAGE_USER_UPDATED, METRICS_NAMESPACE
from core.utils.decorators import GENERIC_INTERNAL_MESSAGE, api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import MergeUserRequest, MergeUserResponse
from .service import MergeService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)

OUTCOME_MESSAGES: dict[MergeOutcome, str] = {
    MergeOutcome.CREATED: MESSAGE_USER_CREATED,
    MergeOutcome.UPDATED: MESSAGE_USER_UPDATED,
}

OUTCOME_METRICS: dict[MergeOutcome, str] = {
    MergeOutcome.CREATED: "UserEntryCreated",
    MergeOutcome.UPDATED: "UserEntryUpdated",
}


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle create-or-merge requests for a user's image list.

    The merge completes before the response is returned, so a 200 always
    means the data was persisted.

    Expected API Gateway event structure:
    {
        "body": "{\"userName\": \"alice\", \"imageData\": [...]}",
        "isBase64Encoded": false
    }

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response with a ``message`` body
    """
    started = time.perf_counter()
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received user merge request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    try:
        body = parse_json_body(event)
    except MalformedRequestError as exc:
        logger.warning("Invalid JSON body received", extra={"error": exc.message})
        return ResponseBuilder.bad_request(exc.message, error=exc.error_code, request_id=request_id)

    try:
        request = validate_request(MergeUserRequest, body)
    except PydanticValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    service = MergeService()

    try:
        outcome = service.merge(request.to_record())

    except ValidationError as exc:
        return ResponseBuilder.bad_request(exc.message, error=exc.error_code, request_id=request_id)

    except DynamoDBError as exc:
        logger.exception(
            "Merging user data failed",
            extra={"user_name": request.user_name, "error_code": exc.error_code},
        )
        return ResponseBuilder.internal_error(
            GENERIC_INTERNAL_MESSAGE,
            error=exc.error_code,
            request_id=request_id,
        )

    metrics.add_metric(name=OUTCOME_METRICS[outcome], unit=MetricUnit.Count, value=1)

    logger.info(
        "Post requested data",
        extra={
            "user_name": request.user_name,
            "outcome": outcome.value,
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )

    response = MergeUserResponse(message=OUTCOME_MESSAGES[outcome])
    return ResponseBuilder.ok(response.model_dump())
