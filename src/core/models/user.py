"""Shared user record models."""

from enum import Enum
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)


class ImageEntry(BaseModel):
    """Metadata for a single image saved against a user.

    Identity within a user record is the ``image`` reference alone.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    image_name: StrictStr | None = Field(None, alias="imageName", description="Display name of the image")
    image: StrictStr | None = Field(None, description="Image reference (identity key)")
    category: StrictStr | None = Field(None, description="Image category")
    date: StrictStr | None = Field(None, description="Client supplied date string")
    saved: StrictBool | None = Field(None, description="Whether the user saved the image")

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase shape used on the wire and in DynamoDB."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserRecord(BaseModel):
    """A user and the ordered list of their image entries."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_name: StrictStr = Field(..., alias="userName", description="Unique user name")
    images: list[ImageEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("imageData", "images"),
        serialization_alias="imageData",
        description="Ordered image entries",
    )

    # Optimistic concurrency token; never serialized.
    version: int | None = Field(None, exclude=True)

    @field_validator("images", mode="before")
    @classmethod
    def null_images_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase shape used on the wire and in DynamoDB."""
        return {
            "userName": self.user_name,
            "imageData": [entry.to_document() for entry in self.images],
        }


class MergeOutcome(str, Enum):
    """Result of merging an incoming user record into the store."""

    CREATED = "created"
    UPDATED = "updated"

