"""Thin DynamoDB adapter wrapping boto3 table operations."""

import os
from typing import Any, Protocol, cast

import boto3
from botocore.config import Config

from core.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_USERS_TABLE_NAME,
    STORE_MAX_POOL_CONNECTIONS,
    STORE_MAX_RETRY_ATTEMPTS,
    STORE_OPERATION_TIMEOUT_SECONDS,
)


class DynamoDBTable(Protocol):
    """Minimal DynamoDB Table protocol."""

    def put_item(self, *, Item: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def get_item(self, *, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def update_item(self, *, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def query(self, **kwargs: Any) -> dict[str, Any]: ...


class DynamoDBAdapterProtocol(Protocol):
    """Adapter surface the repository depends on (repository-facing)."""

    def put_item(
        self,
        *,
        item: dict[str, Any],
        condition_expression: str | None = None,
    ) -> dict[str, Any]: ...

    def get_item(
        self,
        *,
        key: dict[str, Any],
        consistent_read: bool = False,
    ) -> dict[str, Any]: ...

    def update_item(self, *, key: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...

    def query(self, **kwargs: Any) -> dict[str, Any]: ...


def build_client_config() -> Config:
    """botocore config bounding every store call and sizing the connection pool."""
    return Config(
        connect_timeout=STORE_OPERATION_TIMEOUT_SECONDS,
        read_timeout=STORE_OPERATION_TIMEOUT_SECONDS,
        max_pool_connections=STORE_MAX_POOL_CONNECTIONS,
        retries={"max_attempts": STORE_MAX_RETRY_ATTEMPTS, "mode": "standard"},
    )


class DynamoDBAdapter:
    """Low-level operations on the users table.

    Mechanical only: boto3 errors (ClientError, timeouts) propagate to the
    repository, which translates them into domain errors.
    """

    def __init__(self, table_name: str | None = None) -> None:
        table_name = table_name or os.getenv(ENV_USERS_TABLE_NAME)
        if not table_name:
            raise RuntimeError(
                f"{ENV_USERS_TABLE_NAME} environment variable is not set"
            )

        dynamodb = boto3.resource(
            "dynamodb",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
            config=build_client_config(),
        )

        self.table_name = table_name
        self.table: DynamoDBTable = cast(
            DynamoDBTable,
            dynamodb.Table(table_name),
        )

    def put_item(
        self,
        *,
        item: dict[str, Any],
        condition_expression: str | None = None,
    ) -> dict[str, Any]:
        """Put a whole item, optionally guarded by a condition expression."""
        kwargs: dict[str, Any] = {"Item": item}

        if condition_expression:
            kwargs["ConditionExpression"] = condition_expression

        return self.table.put_item(**kwargs)

    def get_item(
        self,
        *,
        key: dict[str, Any],
        consistent_read: bool = False,
    ) -> dict[str, Any]:
        return self.table.get_item(Key=key, ConsistentRead=consistent_read)

    def update_item(self, *, key: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        return self.table.update_item(Key=key, **kwargs)

    def query(self, **kwargs: Any) -> dict[str, Any]:
        """Run one query page; paging is left to the caller."""
        return self.table.query(**kwargs)
