"""
Business logic for fetching a user's image records.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_users import DynamoDBUserStore
from core.models.errors import NotFoundError, ValidationError
from core.models.user import UserRecord
from core.repositories.user_repository import UserRecordRepository
from core.utils.constants import ERROR_CODE_USER_NOT_FOUND, FETCH_RESULT_LIMIT

logger = Logger(UTC=True)


class FetchService:
    """Application service responsible for reading user records.

    Consumes the repository's lazy record sequence and materialises it for
    the response. A decode failure part-way through surfaces as an error
    rather than a silently shortened result.
    """

    def __init__(self, repository: UserRecordRepository | None = None) -> None:
        self.repository = repository or DynamoDBUserStore()

    def fetch(self, user_name: str, *, limit: int = FETCH_RESULT_LIMIT) -> list[UserRecord]:
        """
        Return every stored record for ``user_name`` (at most ``limit``).

        Raises:
            ValidationError: If user_name is empty
            NotFoundError: If no record exists for the user
            RecordDecodeError: If a stored record cannot be decoded
            DynamoDBError: If the query fails or times out
        """
        if not user_name:
            raise ValidationError(
                message="userName is required in the query parameters",
                details={"field": "userName"},
            )

        records = list(self.repository.iter_user_records(user_name=user_name, limit=limit))

        if not records:
            logger.info("No user records found", extra={"user_name": user_name})
            raise NotFoundError(
                message="User not found",
                error_code=ERROR_CODE_USER_NOT_FOUND,
                details={"user_name": user_name},
            )

        logger.info(
            "User records fetched",
            extra={"user_name": user_name, "count": len(records)},
        )
        return records
