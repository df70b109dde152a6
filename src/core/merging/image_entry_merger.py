"""
Merge of incoming image entries into a user's stored entry list.

Operates purely in memory on already-fetched entries; persistence and
concurrency control are the caller's concern.
"""

from dataclasses import dataclass, field

from aws_lambda_powertools import Logger

from core.models.user import ImageEntry

logger = Logger(UTC=True)


@dataclass
class MergeResult:
    """Merged entry list plus the image references that were touched."""

    images: list[ImageEntry]
    updated: list[str | None] = field(default_factory=list)
    appended: list[str | None] = field(default_factory=list)


class ImageEntryMerger:
    """
    Reconcile incoming image entries with an existing list.

    Rules:
    - Identity is the ``image`` reference only; ``imageName`` is ignored
      when matching.
    - A matching entry keeps its position and its ``imageName``; its
      ``image``, ``category``, ``date`` and ``saved`` take the incoming values.
    - A non-matching entry is appended.
    - Duplicates already present in the existing list are left as they are;
      only the first occurrence is ever updated.
    """

    @staticmethod
    def find_image_index(images: list[ImageEntry], image: str | None) -> int:
        """Return the index of the first entry with the given reference, or -1."""
        for index, entry in enumerate(images):
            if entry.image == image:
                return index
        return -1

    def merge(
        self,
        existing: list[ImageEntry],
        incoming: list[ImageEntry],
        *,
        user_name: str | None = None,
    ) -> MergeResult:
        """
        Merge ``incoming`` into a copy of ``existing``.

        Args:
            existing: Entries currently stored for the user
            incoming: Entries submitted by the client
            user_name: Used for log context only

        Returns:
            MergeResult with the full merged list; ``existing`` is not mutated
        """
        merged: list[ImageEntry] = [entry.model_copy() for entry in existing]
        result = MergeResult(images=merged)

        for new_entry in incoming:
            index = self.find_image_index(merged, new_entry.image)

            if index != -1:
                merged[index] = merged[index].model_copy(
                    update={
                        "image": new_entry.image,
                        "category": new_entry.category,
                        "date": new_entry.date,
                        "saved": new_entry.saved,
                    }
                )
                result.updated.append(new_entry.image)
                logger.info(
                    "Updated image entry",
                    extra={"user_name": user_name, "image": new_entry.image},
                )
            else:
                merged.append(new_entry.model_copy())
                result.appended.append(new_entry.image)
                logger.info(
                    "Appended image entry",
                    extra={"user_name": user_name, "image": new_entry.image},
                )

        return result
