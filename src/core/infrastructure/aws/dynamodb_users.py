"""DynamoDB-backed implementation of UserRecordRepository."""

from collections.abc import Iterator
from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import DynamoDBError, RecordDecodeError
from core.models.user import ImageEntry, UserRecord
from core.repositories.user_repository import UserRecordRepository
from core.utils.constants import (
    ATTR_CUSTOM_IMAGE,
    ATTR_EMAIL,
    ATTR_IMAGE_DATA,
    ATTR_USER_NAME,
    ATTR_VERSION,
    ERROR_CODE_CUSTOM_INFO_SAVE_FAILED,
    ERROR_CODE_USER_CREATE_FAILED,
    ERROR_CODE_USER_FETCH_FAILED,
    ERROR_CODE_USER_LOOKUP_FAILED,
    ERROR_CODE_USER_UPDATE_FAILED,
)

Item = dict[str, Any]

logger = Logger(UTC=True)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _is_conditional_check_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED


class DynamoDBUserStore(UserRecordRepository):
    """DynamoDB-backed user record storage with error handling.

    One item per user, partition key ``userName``. A numeric ``version``
    attribute guards read-modify-write cycles.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    @staticmethod
    def _decode(item: Any, *, user_name: str) -> UserRecord:
        if not isinstance(item, dict):
            raise RecordDecodeError(
                message="Invalid user record format",
                details={"user_name": user_name},
            )

        try:
            record = UserRecord.model_validate(item)
        except PydanticValidationError as exc:
            logger.error(
                "Stored user record failed to decode",
                extra={"user_name": user_name, "errors": exc.errors()},
            )
            raise RecordDecodeError(
                message="Invalid user record format",
                details={"user_name": user_name},
            ) from exc

        version = item.get(ATTR_VERSION)
        if version is not None:
            record.version = int(version)

        return record

    def _query_page(self, *, user_name: str, query_kwargs: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self._db.query(**query_kwargs)
        except ClientError as exc:
            logger.error("DynamoDB query failed", extra={"user_name": user_name})
            raise DynamoDBError(
                message="Unable to fetch user data",
                error_code=ERROR_CODE_USER_FETCH_FAILED,
                details={"user_name": user_name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error fetching user data")
            raise DynamoDBError(
                message="Unable to fetch user data",
                error_code=ERROR_CODE_USER_FETCH_FAILED,
                details={"user_name": user_name},
            ) from exc

        if not isinstance(response.get("Items", []), list):
            raise DynamoDBError(
                message="Invalid query response from DynamoDB",
                error_code=ERROR_CODE_USER_FETCH_FAILED,
                details={"user_name": user_name},
            )

        return response

    def iter_user_records(self, *, user_name: str, limit: int) -> Iterator[UserRecord]:
        """Lazily yield records matching the user name.

        NOTE:
        - Only ``userName`` and ``imageData`` are projected.
        - Query pages are fetched on demand, at most ``limit`` records are yielded.
        - A record that fails to decode ends the sequence with RecordDecodeError.
        """
        logger.debug(
            "Fetching user records",
            extra={"user_name": user_name, "limit": limit},
        )

        query_kwargs: dict[str, Any] = {
            "KeyConditionExpression": Key(ATTR_USER_NAME).eq(user_name),
            "ProjectionExpression": "#u, #d",
            "ExpressionAttributeNames": {"#u": ATTR_USER_NAME, "#d": ATTR_IMAGE_DATA},
            "Limit": limit,
        }

        yielded = 0
        while True:
            response = self._query_page(user_name=user_name, query_kwargs=query_kwargs)

            for item in response.get("Items", []):
                yield self._decode(item, user_name=user_name)
                yielded += 1
                if yielded >= limit:
                    return

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return
            query_kwargs["ExclusiveStartKey"] = last_evaluated_key

    def find_user(self, *, user_name: str) -> UserRecord | None:
        """Look up a single user record including its version token.

        Raises:
            RecordDecodeError: If the stored record cannot be decoded
            DynamoDBError: If the lookup fails
        """
        logger.debug("Looking up user", extra={"user_name": user_name})

        try:
            response = self._db.get_item(
                key={ATTR_USER_NAME: user_name},
                consistent_read=True,
            )
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"user_name": user_name})
            raise DynamoDBError(
                message="Unable to look up user",
                error_code=ERROR_CODE_USER_LOOKUP_FAILED,
                details={"user_name": user_name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error looking up user")
            raise DynamoDBError(
                message="Unable to look up user",
                error_code=ERROR_CODE_USER_LOOKUP_FAILED,
                details={"user_name": user_name},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        return self._decode(item, user_name=user_name)

    def create_user(self, *, record: UserRecord) -> bool:
        """Insert a new record unless one already exists for the user name.

        Raises:
            DynamoDBError: If creation fails
        """
        item: Item = {**record.to_document(), ATTR_VERSION: 1}

        try:
            self._db.put_item(
                item=item,
                condition_expression=f"attribute_not_exists({ATTR_USER_NAME})",  # Partition key
            )
        except ClientError as exc:
            if _is_conditional_check_failure(exc):
                logger.info(
                    "User already exists, create skipped",
                    extra={"user_name": record.user_name},
                )
                return False

            logger.error("DynamoDB put_item failed", extra={"user_name": record.user_name})
            raise DynamoDBError(
                message="Unable to create user entry",
                error_code=ERROR_CODE_USER_CREATE_FAILED,
                details={"user_name": record.user_name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error creating user entry")
            raise DynamoDBError(
                message="Unable to create user entry",
                error_code=ERROR_CODE_USER_CREATE_FAILED,
                details={"user_name": record.user_name},
            ) from exc

        logger.info(
            "User entry created",
            extra={"user_name": record.user_name, "image_count": len(record.images)},
        )
        return True

    def replace_images(
        self,
        *,
        user_name: str,
        images: list[ImageEntry],
        expected_version: int | None,
    ) -> bool:
        """Replace the stored image list if the version has not moved.

        Records written before versioning existed have no ``version``
        attribute; ``expected_version=None`` matches exactly those.

        Raises:
            DynamoDBError: If the update fails
        """
        next_version = (expected_version or 0) + 1

        names = {"#u": ATTR_USER_NAME, "#d": ATTR_IMAGE_DATA, "#v": ATTR_VERSION}
        values: dict[str, Any] = {
            ":images": [entry.to_document() for entry in images],
            ":next": next_version,
        }

        if expected_version is None:
            condition = "attribute_exists(#u) AND attribute_not_exists(#v)"
        else:
            condition = "attribute_exists(#u) AND #v = :expected"
            values[":expected"] = expected_version

        try:
            self._db.update_item(
                key={ATTR_USER_NAME: user_name},
                UpdateExpression="SET #d = :images, #v = :next",
                ConditionExpression=condition,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as exc:
            if _is_conditional_check_failure(exc):
                logger.warning(
                    "User entry changed or vanished before write",
                    extra={"user_name": user_name, "expected_version": expected_version},
                )
                return False

            logger.error("DynamoDB update_item failed", extra={"user_name": user_name})
            raise DynamoDBError(
                message="Unable to update user entry",
                error_code=ERROR_CODE_USER_UPDATE_FAILED,
                details={"user_name": user_name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error updating user entry")
            raise DynamoDBError(
                message="Unable to update user entry",
                error_code=ERROR_CODE_USER_UPDATE_FAILED,
                details={"user_name": user_name},
            ) from exc

        logger.info(
            "User images replaced",
            extra={"user_name": user_name, "image_count": len(images), "version": next_version},
        )
        return True

    def save_custom_info(
        self,
        *,
        user_name: str,
        email: str | None,
        custom_image: str | None,
    ) -> None:
        """Upsert custom profile attributes, creating the item if needed.

        Raises:
            DynamoDBError: If the update fails
        """
        assignments = ["#v = if_not_exists(#v, :zero)"]
        names = {"#v": ATTR_VERSION}
        values: dict[str, Any] = {":zero": 0}

        if email is not None:
            assignments.append("#e = :email")
            names["#e"] = ATTR_EMAIL
            values[":email"] = email

        if custom_image is not None:
            assignments.append("#c = :custom_image")
            names["#c"] = ATTR_CUSTOM_IMAGE
            values[":custom_image"] = custom_image

        try:
            self._db.update_item(
                key={ATTR_USER_NAME: user_name},
                UpdateExpression="SET " + ", ".join(assignments),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as exc:
            logger.error("DynamoDB custom info update failed", extra={"user_name": user_name})
            raise DynamoDBError(
                message="Unable to save custom info",
                error_code=ERROR_CODE_CUSTOM_INFO_SAVE_FAILED,
                details={"user_name": user_name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error saving custom info")
            raise DynamoDBError(
                message="Unable to save custom info",
                error_code=ERROR_CODE_CUSTOM_INFO_SAVE_FAILED,
                details={"user_name": user_name},
            ) from exc

        logger.info("Custom info saved", extra={"user_name": user_name})
