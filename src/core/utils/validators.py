"""Request validation utilities."""

import base64
import json
from typing import Any, TypeVar

from pydantic import BaseModel

from core.models.errors import MalformedRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "at least 1 character" in msg_lower:
            msg = "This field must not be empty"
        elif "type" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model instance

    Raises:
        pydantic.ValidationError: If the data does not satisfy the model
    """
    return model.model_validate(data)


def parse_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode the JSON object carried in an API Gateway proxy event.

    Raises:
        MalformedRequestError: If the body is missing, not JSON, or not an object
    """
    raw_body = event.get("body")

    if raw_body is None or (isinstance(raw_body, str) and not raw_body.strip()):
        raise MalformedRequestError(message="Request body is required")

    if event.get("isBase64Encoded"):
        try:
            raw_body = base64.b64decode(raw_body).decode("utf-8")
        except (ValueError, UnicodeDecodeError) as exc:
            raise MalformedRequestError(message="Error decoding request body") from exc

    try:
        body = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MalformedRequestError(message="Error decoding request body") from exc

    if not isinstance(body, dict):
        raise MalformedRequestError(message="Request body must be a JSON object")

    return body
