import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def fetch_user_event() -> Callable[..., dict[str, Any]]:
    def _event(user_name: str | None = "alice") -> dict[str, Any]:
        params = {"userName": user_name} if user_name is not None else None
        return {
            "httpMethod": "GET",
            "path": "/api/ocular",
            "queryStringParameters": params,
            "headers": {"Accept": "application/json"},
        }

    return _event


@pytest.fixture
def merge_user_event() -> Callable[..., dict[str, Any]]:
    def _event(body: dict[str, Any] | str) -> dict[str, Any]:
        return {
            "httpMethod": "POST",
            "path": "/api/ocular",
            "body": body if isinstance(body, str) else json.dumps(body),
            "isBase64Encoded": False,
            "headers": {"Content-Type": "application/json"},
        }

    return _event


@pytest.fixture
def custom_info_event() -> Callable[..., dict[str, Any]]:
    def _event(body: dict[str, Any] | str) -> dict[str, Any]:
        return {
            "httpMethod": "POST",
            "path": "/api/customInfo",
            "body": body if isinstance(body, str) else json.dumps(body),
            "headers": {"Content-Type": "application/json"},
        }

    return _event
