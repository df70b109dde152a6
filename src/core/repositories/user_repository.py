"""Abstract contract for user record persistence."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from core.models.user import ImageEntry, UserRecord


class UserRecordRepository(ABC):
    """Contract for storing and retrieving user image records.

    Implementations could be DynamoDB, MongoDB, an in-memory fake, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def iter_user_records(self, *, user_name: str, limit: int) -> Iterator[UserRecord]:
        """Lazily yield records matching the user name.

        Each yielded record carries only ``userName`` and ``imageData``.

        Args:
            user_name: Exact user name to match
            limit: Maximum number of records to yield

        Raises:
            RecordDecodeError: If a stored record cannot be decoded; raised
                after every earlier record has been yielded
            DynamoDBError: If the query fails
        """

    @abstractmethod
    def find_user(self, *, user_name: str) -> UserRecord | None:
        """Look up a single user record including its version token.

        Returns:
            The record, or None if no record exists

        Raises:
            RecordDecodeError: If the stored record cannot be decoded
            DynamoDBError: If the lookup fails
        """

    @abstractmethod
    def create_user(self, *, record: UserRecord) -> bool:
        """Insert a new record.

        Returns:
            True if the record was inserted, False if a record with the same
            user name already exists

        Raises:
            DynamoDBError: If the insert fails for other reasons
        """

    @abstractmethod
    def replace_images(
        self,
        *,
        user_name: str,
        images: list[ImageEntry],
        expected_version: int | None,
    ) -> bool:
        """Replace the stored image list wholesale.

        The write only applies if the stored version still equals
        ``expected_version``.

        Returns:
            True if the write applied, False if the record was missing or
            its version had moved on

        Raises:
            DynamoDBError: If the update fails for other reasons
        """

    @abstractmethod
    def save_custom_info(
        self,
        *,
        user_name: str,
        email: str | None,
        custom_image: str | None,
    ) -> None:
        """Upsert custom profile attributes without touching image data.

        Raises:
            DynamoDBError: If the update fails
        """
