"""
API Gateway response builder for the ocular endpoints.

Success bodies come in two shapes: the bare JSON array of user records
returned by the read endpoint, and a ``{"message": ...}`` acknowledgement
for writes (any JSON object body). Errors share one envelope:
``{"error", "message", "timestamp", ["details"], ["request_id"]}``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus
import json
from typing import Any

from core.models.user import UserRecord
from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    EXPOSE_HEADERS,
)

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    CORS_RESPONSE_HEADERS: dict[str, str] = {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }

    @staticmethod
    def _headers(cors_origin: str | None) -> dict[str, str]:
        headers = {"Content-Type": DEFAULT_CONTENT_TYPE, **ResponseBuilder.CORS_RESPONSE_HEADERS}
        if cors_origin:
            headers["Access-Control-Allow-Origin"] = cors_origin
        return headers

    @staticmethod
    def _send(status: HTTPStatus, body: str, cors_origin: str | None) -> JsonDict:
        return {
            "statusCode": status.value,
            "headers": ResponseBuilder._headers(cors_origin),
            "body": body,
        }

    @staticmethod
    def records(
        records: list[UserRecord],
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """200 with a bare JSON array of ``{"userName", "imageData"}`` documents."""
        documents = [record.to_document() for record in records]
        return ResponseBuilder._send(HTTPStatus.OK, json.dumps(documents), cors_origin)

    @staticmethod
    def ok(
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """200 with a JSON object body, e.g. ``{"message": ...}``."""
        payload: JsonDict = dict(body)
        if request_id:
            payload["request_id"] = request_id
        return ResponseBuilder._send(HTTPStatus.OK, json.dumps(payload), cors_origin)

    @staticmethod
    def no_content(*, cors_origin: str | None = None) -> JsonDict:
        return ResponseBuilder._send(HTTPStatus.NO_CONTENT, "", cors_origin)

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if details:
            payload["details"] = details
        if request_id:
            payload["request_id"] = request_id

        return ResponseBuilder._send(status, json.dumps(payload), cors_origin)

    @staticmethod
    def bad_request(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.BAD_REQUEST, message=message, **kwargs)

    @staticmethod
    def not_found(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.NOT_FOUND, message=message, **kwargs)

    @staticmethod
    def internal_error(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            **kwargs,
        )
