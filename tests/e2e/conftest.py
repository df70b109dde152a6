""" """

import logging

import boto3
from botocore.exceptions import ClientError
import pytest

from e2e_api_client import E2EAPIClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

DYNAMODB_TABLE_NAME = "ocular-users-snd"
ENDPOINT_BASE_URL = "http://localhost:4566"

# ============================================================================
# API Details Fixture
# ============================================================================


@pytest.fixture(scope="session")
def api_details():
    """Get API Gateway details from LocalStack"""
    try:
        apigateway = boto3.client("apigateway", endpoint_url=ENDPOINT_BASE_URL)

        apis = apigateway.get_rest_apis()
        api = next(api for api in apis["items"] if "ocular" in api["name"])
        api_id = api["id"]

        keys = apigateway.get_api_keys(includeValues=True)
        api_key = keys["items"][0]["value"] if keys["items"] else "test-key"

        endpoint = f"{ENDPOINT_BASE_URL}/restapis/{api_id}/snd/_user_request_"

        return {"api_id": api_id, "api_key": api_key, "endpoint": endpoint, "stage": "snd"}
    except Exception as e:
        logger.warning(f"Could not get API details from LocalStack: {e}")
        pytest.skip(f"Could not get API details from LocalStack: {e}")


# ============================================================================
# API Headers Fixture
# ============================================================================


@pytest.fixture(scope="session")
def api_headers(api_details):
    """Default HTTP headers for API requests"""
    return {"Content-Type": "application/json", "x-api-key": api_details["api_key"]}


# ============================================================================
# API Client Fixture
# ============================================================================


@pytest.fixture
def api_client(api_details, api_headers):
    """HTTP client wrapper for E2E API testing"""
    _client = E2EAPIClient(api_details["endpoint"], api_headers)
    yield _client
    _cleanup_dynamodb()


def _cleanup_dynamodb():
    """Delete all items from the DynamoDB users table."""
    logger.info("Cleaning DynamoDB table: %s", DYNAMODB_TABLE_NAME)

    dynamodb = boto3.resource("dynamodb", endpoint_url=ENDPOINT_BASE_URL)
    table = dynamodb.Table(DYNAMODB_TABLE_NAME)

    try:
        deleted = 0
        start_key = None

        while True:
            scan_kwargs = {
                "ProjectionExpression": "userName",
            }
            if start_key:
                scan_kwargs["ExclusiveStartKey"] = start_key

            response = table.scan(**scan_kwargs)
            items = response.get("Items", [])

            for item in items:
                table.delete_item(Key={"userName": item["userName"]})
                deleted += 1

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break

        logger.info("Deleted %d items from DynamoDB table", deleted)

    except ClientError as err:
        logger.error(
            "Failed to cleanup DynamoDB table: %s",
            DYNAMODB_TABLE_NAME,
            exc_info=err,
        )


# ============================================================================
# Sample Payloads
# ============================================================================


@pytest.fixture
def e2e_user_name():
    return "e2e-ocular-user"


@pytest.fixture
def merge_payload(e2e_user_name) -> dict:
    return {
        "userName": e2e_user_name,
        "imageData": [
            {
                "imageName": "Kitten",
                "image": "https://cdn.example.com/kitten.jpg",
                "category": "cats",
                "date": "2024-05-01",
                "saved": True,
            }
        ],
    }
