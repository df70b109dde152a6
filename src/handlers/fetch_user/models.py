"""Pydantic models for the fetch user request."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import USER_NAME_MAX_LENGTH


class FetchUserRequest(BaseModel):
    """Validation model for fetch user API."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    user_name: str = Field(
        ...,
        alias="userName",
        min_length=1,
        max_length=USER_NAME_MAX_LENGTH,
        description="User whose image records are returned",
    )
