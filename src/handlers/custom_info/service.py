"""Business logic for saving custom profile info."""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_users import DynamoDBUserStore
from core.repositories.user_repository import UserRecordRepository

logger = Logger(UTC=True)


class CustomInfoService:
    """Stores email / custom image alongside a user's record."""

    def __init__(self, repository: UserRecordRepository | None = None) -> None:
        self.repository = repository or DynamoDBUserStore()

    def save(self, *, user_name: str, email: str | None, custom_image: str | None) -> None:
        """Upsert the supplied attributes; image data is left untouched.

        Raises:
            DynamoDBError: If the write fails
        """
        logger.debug(
            "Saving custom info",
            extra={
                "user_name": user_name,
                "has_email": email is not None,
                "has_custom_image": custom_image is not None,
            },
        )
        self.repository.save_custom_info(
            user_name=user_name,
            email=email,
            custom_image=custom_image,
        )
