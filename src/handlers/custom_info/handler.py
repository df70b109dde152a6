"""
Lambda handler responsible for saving a user's custom profile info.

Route: POST /api/customInfo
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import DynamoDBError, MalformedRequestError
from core.utils.constants import MESSAGE_CUSTOM_INFO_SAVED, METRICS_NAMESPACE
from core.utils.decorators import GENERIC_INTERNAL_MESSAGE, api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import CustomInfoRequest, CustomInfoResponse
from .service import CustomInfoService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle custom info save requests."""
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received custom info request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    try:
        body = parse_json_body(event)
    except MalformedRequestError as exc:
        logger.warning("Invalid JSON body received", extra={"error": exc.message})
        return ResponseBuilder.bad_request(exc.message, error=exc.error_code, request_id=request_id)

    try:
        request = validate_request(CustomInfoRequest, body)
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

    try:
        CustomInfoService().save(
            user_name=request.user_name,
            email=request.email,
            custom_image=request.custom_image,
        )
    except DynamoDBError as exc:
        logger.exception(
            "Saving custom info failed",
            extra={"user_name": request.user_name},
        )
        return ResponseBuilder.internal_error(
            GENERIC_INTERNAL_MESSAGE,
            error=exc.error_code,
            request_id=request_id,
        )

    return ResponseBuilder.ok(CustomInfoResponse(message=MESSAGE_CUSTOM_INFO_SAVED).model_dump())
