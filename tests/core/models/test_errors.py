"""Unit tests for custom error classes."""

import pytest

from core.models.errors import (
    ConcurrentUpdateError,
    DynamoDBError,
    MalformedRequestError,
    NotFoundError,
    OcularServiceError,
    RecordDecodeError,
    ValidationError,
)
from core.utils.constants import (
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_MALFORMED_REQUEST,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_USER_CONCURRENT_UPDATE,
    ERROR_CODE_USER_DECODE_FAILED,
    ERROR_CODE_VALIDATION_FAILED,
)


class TestOcularServiceError:
    def test_base_error_sets_fields(self) -> None:
        err = OcularServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"

    def test_base_error_defaults_details_to_empty_dict(self) -> None:
        err = OcularServiceError(message="Error", error_code="CODE")

        assert err.details == {}


@pytest.mark.parametrize(
    "error_cls,default_code",
    [
        (ValidationError, ERROR_CODE_VALIDATION_FAILED),
        (MalformedRequestError, ERROR_CODE_MALFORMED_REQUEST),
        (NotFoundError, ERROR_CODE_RESOURCE_NOT_FOUND),
        (DynamoDBError, ERROR_CODE_DYNAMODB),
        (RecordDecodeError, ERROR_CODE_USER_DECODE_FAILED),
        (ConcurrentUpdateError, ERROR_CODE_USER_CONCURRENT_UPDATE),
    ],
)
def test_errors_use_default_codes(error_cls, default_code) -> None:
    err = error_cls(message="msg")

    assert isinstance(err, OcularServiceError)
    assert err.error_code == default_code


def test_store_errors_share_internal_base() -> None:
    assert issubclass(RecordDecodeError, DynamoDBError)
    assert issubclass(ConcurrentUpdateError, DynamoDBError)


def test_error_code_can_be_overridden() -> None:
    err = NotFoundError(message="User not found", error_code="USER_NOT_FOUND")

    assert err.error_code == "USER_NOT_FOUND"


def test_base_error_without_code_is_internal() -> None:
    err = OcularServiceError(message="Unexpected")

    assert err.error_code == "INTERNAL_ERROR"
