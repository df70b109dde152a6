"""Business logic for the create-or-merge user operation.

This module looks up the stored record for a user, inserts it when absent,
and otherwise merges the incoming image entries into the stored list by
image reference. Writes are conditional on the version read during lookup,
so concurrent merges for the same user are retried instead of overwriting
each other.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_users import DynamoDBUserStore
from core.merging.image_entry_merger import ImageEntryMerger
from core.models.errors import ConcurrentUpdateError, DynamoDBError, ValidationError
from core.models.user import MergeOutcome, UserRecord
from core.repositories.user_repository import UserRecordRepository
from core.utils.constants import ERROR_CODE_USER_NOT_MATCHED, MERGE_MAX_ATTEMPTS

logger = Logger(UTC=True)


class MergeService:
    """Application service responsible for upserting user image records.

    This service orchestrates:
    - Looking up the existing record and its version
    - Creating the record when none exists
    - Merging incoming entries into the stored list
    - Writing the merged list back under a version check
    """

    def __init__(
        self,
        repository: UserRecordRepository | None = None,
        merger: ImageEntryMerger | None = None,
        *,
        max_attempts: int = MERGE_MAX_ATTEMPTS,
    ) -> None:
        self.repository = repository or DynamoDBUserStore()
        self.merger = merger or ImageEntryMerger()
        self.max_attempts = max_attempts

    def merge(self, incoming: UserRecord) -> MergeOutcome:
        """Create or merge the incoming record.

        Args:
            incoming: User name plus the submitted image entries

        Returns:
            MergeOutcome.CREATED or MergeOutcome.UPDATED

        Raises:
            ValidationError: If the user name is empty
            DynamoDBError: If the lookup or write fails, or the record
                disappears between lookup and write
            ConcurrentUpdateError: If other writers keep winning the race
        """
        user_name = incoming.user_name
        if not user_name:
            raise ValidationError(
                message="userName is required",
                details={"field": "userName"},
            )

        logger.debug(
            "Starting user merge",
            extra={"user_name": user_name, "incoming_count": len(incoming.images)},
        )

        existing = self.repository.find_user(user_name=user_name)

        for attempt in range(1, self.max_attempts + 1):
            if existing is None:
                if self.repository.create_user(record=incoming):
                    logger.info(
                        "Success: New user entry created",
                        extra={"user_name": user_name, "attempt": attempt},
                    )
                    return MergeOutcome.CREATED

                # Another writer created the record first; merge into theirs
                existing = self.repository.find_user(user_name=user_name)
                continue

            result = self.merger.merge(existing.images, incoming.images, user_name=user_name)

            if self.repository.replace_images(
                user_name=user_name,
                images=result.images,
                expected_version=existing.version,
            ):
                logger.info(
                    "Success: Updated user entry",
                    extra={
                        "user_name": user_name,
                        "updated": len(result.updated),
                        "appended": len(result.appended),
                        "attempt": attempt,
                    },
                )
                return MergeOutcome.UPDATED

            existing = self.repository.find_user(user_name=user_name)
            if existing is None:
                logger.error(
                    "User entry vanished between lookup and write",
                    extra={"user_name": user_name},
                )
                raise DynamoDBError(
                    message="Unable to update user entry",
                    error_code=ERROR_CODE_USER_NOT_MATCHED,
                    details={"user_name": user_name},
                )

            logger.warning(
                "User entry modified concurrently, retrying merge",
                extra={"user_name": user_name, "attempt": attempt},
            )

        raise ConcurrentUpdateError(
            message="Unable to update user entry",
            details={"user_name": user_name, "attempts": self.max_attempts},
        )
