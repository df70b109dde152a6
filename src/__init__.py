"""Ocular User Image Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless per-user image metadata service using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
