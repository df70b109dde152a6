"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_MALFORMED_REQUEST = "MALFORMED_REQUEST"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_USER_NOT_FOUND = "USER_NOT_FOUND"

# User Record / DynamoDB Errors
ERROR_CODE_DYNAMODB = "DYNAMODB_ERROR"
ERROR_CODE_USER_FETCH_FAILED = "USER_FETCH_FAILED"
ERROR_CODE_USER_LOOKUP_FAILED = "USER_LOOKUP_FAILED"
ERROR_CODE_USER_CREATE_FAILED = "USER_CREATE_FAILED"
ERROR_CODE_USER_UPDATE_FAILED = "USER_UPDATE_FAILED"
ERROR_CODE_USER_NOT_MATCHED = "USER_NOT_MATCHED"
ERROR_CODE_USER_DECODE_FAILED = "USER_DECODE_FAILED"
ERROR_CODE_USER_CONCURRENT_UPDATE = "USER_CONCURRENT_UPDATE"
ERROR_CODE_CUSTOM_INFO_SAVE_FAILED = "CUSTOM_INFO_SAVE_FAILED"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# User Record Attributes
# ============================================================================

ATTR_USER_NAME: Final = "userName"
ATTR_IMAGE_DATA: Final = "imageData"
ATTR_VERSION: Final = "version"
ATTR_EMAIL: Final = "email"
ATTR_CUSTOM_IMAGE: Final = "customImage"

USER_NAME_MAX_LENGTH = 128

# ============================================================================
# Store Access
# ============================================================================

FETCH_RESULT_LIMIT = 10
STORE_OPERATION_TIMEOUT_SECONDS = 5
STORE_MAX_POOL_CONNECTIONS = 100
STORE_MAX_RETRY_ATTEMPTS = 2
MERGE_MAX_ATTEMPTS = 3

# ============================================================================
# Observability
# ============================================================================

METRICS_NAMESPACE = "OcularImageService"

# ============================================================================
# Response Messages
# ============================================================================

MESSAGE_USER_CREATED = "New user entry created"
MESSAGE_USER_UPDATED = "User entry updated"
MESSAGE_CUSTOM_INFO_SAVED = "Custom info saved"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_USERS_TABLE_NAME = "OCULAR_USERS_TABLE_NAME"
