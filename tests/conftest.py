"""
Pytest configuration and fixtures for ocular service tests.
Provides AWS mocking and a DynamoDB users table with proper cleanup.
"""

import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("OCULAR_USERS_TABLE_NAME", "ocular-users-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "ocular-test")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "OcularTests")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


@pytest.fixture(scope="function")
def aws_mock(monkeypatch):
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_users_table(dynamodb_resource):
    """Helper to create the users table keyed by userName."""
    return dynamodb_resource.create_table(
        TableName=os.getenv("OCULAR_USERS_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "userName", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "userName", "AttributeType": "S"},
        ],
    )


def _cleanup_users(table):
    """Helper to delete all items from the users table."""
    try:
        response = table.scan(ProjectionExpression="userName")
        with table.batch_writer() as batch:
            for item in response.get("Items", []):
                batch.delete_item(Key={"userName": item["userName"]})
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise


@pytest.fixture(scope="function")
def users_table(dynamodb_resource):
    """
    Create and manage the DynamoDB users table for testing.

    Cleanup Strategy:
    - Items are deleted after each test (teardown)
    - Table is NOT deleted (moto cleans up on context exit)
    """
    table_name = os.getenv("OCULAR_USERS_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_users_table(dynamodb_resource)
        table.wait_until_exists()

    yield table

    _cleanup_users(table)


@pytest.fixture
def put_user_item(users_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a raw user item into DynamoDB.

    Usage:
        item = put_user_item({"userName": "alice", "imageData": []})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        users_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def get_user_item(users_table) -> Callable[[str], dict[str, Any] | None]:
    """
    Helper to read a raw user item back from DynamoDB.

    Usage:
        item = get_user_item("alice")
    """

    def _get(user_name: str) -> dict[str, Any] | None:
        response: dict[str, Any] = users_table.get_item(
            Key={"userName": user_name},
            ConsistentRead=True,
        )
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def sample_user_item() -> dict[str, Any]:
    """Stored user item with two image entries."""
    return {
        "userName": "john",
        "version": 1,
        "imageData": [
            {
                "imageName": "Sunset",
                "image": "https://cdn.example.com/sunset.jpg",
                "category": "nature",
                "date": "2024-01-01",
                "saved": True,
            },
            {
                "imageName": "Cat",
                "image": "https://cdn.example.com/cat.jpg",
                "category": "animals",
                "date": "2024-01-02",
            },
        ],
    }
