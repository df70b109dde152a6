"""Pydantic models for the custom info request/response."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.utils.constants import USER_NAME_MAX_LENGTH


class CustomInfoRequest(BaseModel):
    """Validation model for saving a user's custom profile info."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    user_name: str = Field(
        ...,
        alias="userName",
        min_length=1,
        max_length=USER_NAME_MAX_LENGTH,
    )
    email: str | None = Field(None, max_length=320, description="Contact email")
    custom_image: str | None = Field(
        None,
        alias="customImage",
        description="Reference to the user's custom image",
    )

    @model_validator(mode="after")
    def require_some_info(self) -> "CustomInfoRequest":
        """At least one of email / customImage must be supplied."""
        if self.email is None and self.custom_image is None:
            raise ValueError("Request must include email or customImage")
        return self


class CustomInfoResponse(BaseModel):
    message: str
