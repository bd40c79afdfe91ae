"""
Data types used by the primary category API
"""
from __future__ import annotations

from enum import Enum
from typing import Mapping, Union

from attrs import define

from ..content.models import Category

# Value of the "none" option in the primary category selector. Submitting it
# clears the primary category.
NONE_VALUE = "-1"

# Names of the form fields the selector renders and the save hook reads.
CATEGORY_FIELD = "primary_category"
NONCE_FIELD = "primary_category_nonce"


@define(frozen=True)
class Found:
    """
    The content item's primary category.
    """
    category: Category


@define(frozen=True)
class NotAssigned:
    """
    The content item has no primary category.
    """


@define(frozen=True)
class LookupFailed:
    """
    A primary category is stored, but it can't be resolved to a Category.
    """
    reason: str


AssignmentResult = Union[Found, NotAssigned, LookupFailed]


class SaveOutcome(Enum):
    """
    What set_primary_category() did.
    """
    ASSIGNED = "assigned"
    REMOVED = "removed"
    SKIPPED = "skipped"


@define(frozen=True)
class SubmittedSelection:
    """
    The primary category fields of a submitted edit form.

    Both values are None when the corresponding field was missing or blank.
    """
    nonce: str | None
    category_ref: str | None

    @classmethod
    def from_data(cls, data: Mapping[str, object]) -> SubmittedSelection:
        """
        Pull the selection out of raw form data (e.g. ``request.POST``).
        """
        return cls(
            nonce=_clean(data.get(NONCE_FIELD)),
            category_ref=_clean(data.get(CATEGORY_FIELD)),
        )

    @property
    def is_none(self) -> bool:
        """
        Did the editor pick the "none" option?
        """
        return self.category_ref == NONE_VALUE


def _clean(value: object) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
