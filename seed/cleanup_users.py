#!/usr/bin/env python3
"""
Cleanup script to remove seeded user records.

The API exposes no delete route, so items are removed from the
DynamoDB table directly.

Run:
    python seed/cleanup_users.py \
      --table-name ocular-users-snd \
      --user-name alice --user-name bob
"""

import argparse
import sys

from aws_lambda_powertools import Logger
import boto3

logger = Logger(service="cleanup")

DEFAULT_ENDPOINT_URL = "http://localhost:4566"
DEFAULT_TABLE_NAME = "ocular-users-snd"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded Ocular user records")

    parser.add_argument(
        "--table-name",
        default=DEFAULT_TABLE_NAME,
        help="DynamoDB users table name",
    )
    parser.add_argument(
        "--endpoint-url",
        default=DEFAULT_ENDPOINT_URL,
        help="DynamoDB endpoint (LocalStack)",
    )
    parser.add_argument(
        "--user-name",
        action="append",
        required=True,
        dest="user_names",
        help="User whose record should be deleted (repeatable)",
    )

    return parser.parse_args()


def cleanup_users() -> None:
    try:
        args = parse_args()

        dynamodb = boto3.resource("dynamodb", endpoint_url=args.endpoint_url)
        table = dynamodb.Table(args.table_name)

        logger.info(
            "Starting cleanup process",
            extra={"table_name": args.table_name, "user_names": args.user_names},
        )

        for user_name in args.user_names:
            response = table.delete_item(
                Key={"userName": user_name},
                ReturnValues="ALL_OLD",
            )

            if "Attributes" in response:
                logger.info("Deleted user", extra={"user_name": user_name})
            else:
                logger.info("User not present, nothing to delete", extra={"user_name": user_name})

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_users()
