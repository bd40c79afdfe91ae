"""
Primary category models.

A content item can be a member of any number of categories, but at most one of
them is its *primary* category. The primary designation is stored here, apart
from ordinary membership (``CategoryMembership`` in the content app), so that
changing or clearing it never affects which categories the item is in.
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from primary_category.lib.fields import created_field, modified_field

from ..content.models import Category, ContentItem

__all__ = [
    "PrimaryCategory",
]


class PrimaryCategory(models.Model):
    """
    Links a ContentItem with the Category that is its primary category.

    If the Category is deleted, ``category`` is set to NULL rather than deleting
    this row, so the stale assignment can still be reported (and displayed via
    the cached ``_slug``) until an editor picks a new one.
    """

    id = models.BigAutoField(primary_key=True)
    content_item = models.ForeignKey(
        ContentItem,
        on_delete=models.CASCADE,
        related_name="primary_category_assignments",
    )
    category = models.ForeignKey(
        Category,
        null=True,
        default=None,
        on_delete=models.SET_NULL,
        related_name="primary_category_assignments",
        help_text=_("The primary category. NULL if that category has since been deleted."),
    )
    _slug = models.SlugField(
        max_length=200,
        allow_unicode=True,
        help_text=_(
            "Slug of the category at the time it was assigned. Used to display stale assignments."
        ),
    )
    created = created_field()
    modified = modified_field()

    class Meta:
        verbose_name = "Primary category"
        verbose_name_plural = "Primary categories"
        constraints = [
            # A content item has at most one primary category.
            models.UniqueConstraint(
                fields=["content_item"],
                name="pc_primary_uniq_content_item",
            ),
        ]
        permissions = [
            ("manage_primary_categories", "Can manage primary categories"),
        ]

    def __repr__(self) -> str:
        """
        Developer-facing representation of a PrimaryCategory.
        """
        return str(self)

    def __str__(self) -> str:
        """
        User-facing string representation of a PrimaryCategory.
        """
        return f"<{self.__class__.__name__}> {self.content_item_id}: {self.slug}"

    @property
    def slug(self) -> str:
        """
        Slug of the primary category, falling back to the cached one if it was deleted.
        """
        if self.category_id and self.category:
            return self.category.slug
        return self._slug

    @property
    def is_stale(self) -> bool:
        """
        Has the assigned category been deleted?
        """
        return self.category_id is None
