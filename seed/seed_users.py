#!/usr/bin/env python3
"""
Seed script to populate user image records via the API.

Run:
    python seed/seed_users.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


OCULAR_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api/ocular"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed user image records via the Ocular API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of users to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "users.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def seed_users() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        headers: dict[str, str] = {
            "Content-Type": "application/json",
        }
        if args.api_key:
            headers["x-api-key"] = args.api_key

        api_url = OCULAR_API_URL.format(args.api_id)

        logger.info(
            "Starting seeding process",
            extra={"api_base_url": api_url},
        )

        users = cast(list[dict[str, Any]], data.get("users", []))[: args.limit]

        for user in users:
            response = requests.post(
                api_url,
                headers=headers,
                json=user,
                timeout=30,
            )

            if response.ok:
                logger.info(
                    "Seeded user",
                    extra={
                        "user_name": user["userName"],
                        "image_count": len(user.get("imageData", [])),
                        "message": response.json().get("message"),
                    },
                )
            else:
                logger.error(
                    "Failed to seed user",
                    extra={
                        "user_name": user["userName"],
                        "status": response.status_code,
                        "response": response.text,
                    },
                )

        logger.info("Seeding completed")

        if not users:
            return

        first_user = users[0]["userName"]
        fetch_response = requests.get(
            api_url,
            headers=headers,
            params={"userName": first_user},
            timeout=30,
        )

        logger.info(
            "Fetch user response",
            extra={
                "status": fetch_response.status_code,
                "response": fetch_response.json() if fetch_response.ok else fetch_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_users()
