"""Custom exception classes for the ocular user service.

Every error carries a human readable ``message``, a stable ``error_code``
used in response bodies, and optional ``details`` for logs. Subclasses only
pick their default code; callers may pass a more specific one.
"""

from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_INTERNAL_ERROR,
    ERROR_CODE_MALFORMED_REQUEST,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_USER_CONCURRENT_UPDATE,
    ERROR_CODE_USER_DECODE_FAILED,
    ERROR_CODE_VALIDATION_FAILED,
)


class OcularServiceError(Exception):
    """
    Base exception for all ocular service errors.

    All custom errors must inherit from this class.
    """

    default_error_code: ClassVar[str] = ERROR_CODE_INTERNAL_ERROR

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

        super().__init__(self.message)


# Caller errors (400)


class ValidationError(OcularServiceError):
    """Raised when required input is missing or invalid."""

    default_error_code = ERROR_CODE_VALIDATION_FAILED


class MalformedRequestError(OcularServiceError):
    """Raised when a request body cannot be parsed."""

    default_error_code = ERROR_CODE_MALFORMED_REQUEST


# Read miss (404)


class NotFoundError(OcularServiceError):
    """Raised when no record exists for the requested user."""

    default_error_code = ERROR_CODE_RESOURCE_NOT_FOUND


# Store failures (500)


class DynamoDBError(OcularServiceError):
    """Raised when a DynamoDB operation fails or times out."""

    default_error_code = ERROR_CODE_DYNAMODB


class RecordDecodeError(DynamoDBError):
    """Raised when a stored item does not decode into a UserRecord.

    The reader raises it after yielding every record that decoded, so it is
    distinguishable from the end of the sequence.
    """

    default_error_code = ERROR_CODE_USER_DECODE_FAILED


class ConcurrentUpdateError(DynamoDBError):
    """Raised when a merge keeps losing the version check to other writers."""

    default_error_code = ERROR_CODE_USER_CONCURRENT_UPDATE
