"""Unit tests for the shared user record models."""

import pytest
from pydantic import ValidationError

from core.models.user import ImageEntry, MergeOutcome, UserRecord


class TestImageEntry:
    def test_accepts_camel_case_keys(self) -> None:
        image = ImageEntry.model_validate(
            {"imageName": "Cat", "image": "img1", "category": "cats", "date": "2024-01-01", "saved": True}
        )

        assert image.image_name == "Cat"
        assert image.saved is True

    def test_all_fields_optional(self) -> None:
        assert ImageEntry.model_validate({}).to_document() == {}

    def test_to_document_omits_absent_fields_but_keeps_false(self) -> None:
        image = ImageEntry(image="img1", saved=False)

        assert image.to_document() == {"image": "img1", "saved": False}

    def test_rejects_non_boolean_saved(self) -> None:
        with pytest.raises(ValidationError):
            ImageEntry.model_validate({"image": "img1", "saved": "yes"})

    def test_unknown_keys_ignored(self) -> None:
        image = ImageEntry.model_validate({"image": "img1", "likes": 3})

        assert image.to_document() == {"image": "img1"}


class TestUserRecord:
    def test_reads_image_data_key(self) -> None:
        record = UserRecord.model_validate(
            {"userName": "alice", "imageData": [{"image": "img1"}]}
        )

        assert record.user_name == "alice"
        assert record.images[0].image == "img1"

    def test_reads_images_alias(self) -> None:
        record = UserRecord.model_validate({"userName": "alice", "images": [{"image": "img1"}]})

        assert len(record.images) == 1

    def test_missing_images_defaults_to_empty(self) -> None:
        assert UserRecord.model_validate({"userName": "alice"}).images == []

    def test_null_images_treated_as_empty(self) -> None:
        assert UserRecord.model_validate({"userName": "alice", "imageData": None}).images == []

    def test_user_name_required(self) -> None:
        with pytest.raises(ValidationError):
            UserRecord.model_validate({"imageData": []})

    def test_to_document_shape(self) -> None:
        record = UserRecord(
            user_name="alice",
            images=[ImageEntry(image="img1", category="cats", saved=True)],
            version=4,
        )

        assert record.to_document() == {
            "userName": "alice",
            "imageData": [{"image": "img1", "category": "cats", "saved": True}],
        }

    def test_version_never_serialized(self) -> None:
        record = UserRecord(user_name="alice", version=2)

        assert "version" not in record.model_dump()


def test_merge_outcome_values() -> None:
    assert MergeOutcome.CREATED.value == "created"
    assert MergeOutcome.UPDATED.value == "updated"
