"""Pydantic models for the merge user request/response."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.models.user import ImageEntry, UserRecord
from core.utils.constants import USER_NAME_MAX_LENGTH


class MergeUserRequest(BaseModel):
    """Validation model for the create-or-merge user API.

    Body shape: ``{"userName": "...", "imageData": [{...}, ...]}``.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    user_name: str = Field(
        ...,
        alias="userName",
        min_length=1,
        max_length=USER_NAME_MAX_LENGTH,
        description="User whose image list is merged",
    )
    images: list[ImageEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("imageData", "images"),
        description="Incoming image entries",
    )

    @field_validator("images", mode="before")
    @classmethod
    def null_images_as_empty(cls, value: Any) -> Any:
        """A null ``imageData`` means no entries."""
        return [] if value is None else value

    def to_record(self) -> UserRecord:
        return UserRecord(user_name=self.user_name, images=self.images)


class MergeUserResponse(BaseModel):
    """Response model for a completed merge."""

    message: str = Field(..., description="Outcome message")
