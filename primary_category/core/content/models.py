"""
Content store models.

These are the models a site's content lives in: categories arranged in a
hierarchy, content items (articles, pages...), and the ordinary, non-exclusive
membership of content items in categories.

Other apps (like ``primary_category.core.primary``) hang their own data off of
these models, but should use ``api.py`` rather than writing to them directly.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from primary_category.lib.fields import created_field, modified_field, slug_field, title_field

__all__ = [
    "Category",
    "CategoryMembership",
    "ContentItem",
]


class Category(models.Model):
    """
    A node in the category hierarchy, identified by its slug.
    """

    id = models.BigAutoField(primary_key=True)
    slug = slug_field(unique=True)
    name = title_field(max_length=200)
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        default=None,
        on_delete=models.CASCADE,
        related_name="children",
        help_text=_("Category one level up from this one, forming a hierarchy."),
    )

    class Meta:
        verbose_name_plural = "Categories"
        ordering = ["name", "id"]

    def __repr__(self) -> str:
        """
        Developer-facing representation of a Category.
        """
        return str(self)

    def __str__(self) -> str:
        """
        User-facing string representation of a Category.
        """
        return f"<{self.__class__.__name__}> ({self.id}) {self.slug}"

    @property
    def depth(self) -> int:
        """
        How many ancestors this Category has. Zero for root categories.
        """
        depth = 0
        ancestor = self.parent
        while ancestor is not None:
            depth += 1
            ancestor = ancestor.parent
        return depth


class ContentItem(models.Model):
    """
    A single unit of publishable content, e.g. an article.

    ``content_type`` is a free-form kind like "post" or "page"; it is not
    Django's ContentType.
    """

    id = models.BigAutoField(primary_key=True)
    title = title_field()
    slug = slug_field()
    content_type = models.CharField(
        max_length=50,
        default="post",
        db_index=True,
        help_text=_("Kind of content, e.g. 'post' or 'page'."),
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    created = created_field()
    modified = modified_field()

    categories: models.ManyToManyField[Category, "CategoryMembership"] = models.ManyToManyField(
        Category,
        through="CategoryMembership",
        related_name="content_items",
    )

    class Meta:
        # Newest first is the default listing order.
        ordering = ["-created", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["content_type", "slug"],
                name="pc_content_uniq_type_slug",
            ),
        ]

    def __repr__(self) -> str:
        """
        Developer-facing representation of a ContentItem.
        """
        return str(self)

    def __str__(self) -> str:
        """
        User-facing string representation of a ContentItem.
        """
        return f"<{self.__class__.__name__}> ({self.id}) {self.content_type}:{self.slug}"

    def get_absolute_url(self) -> str:
        """
        Permalink for this item.
        """
        return reverse(
            "pc_content:content_item",
            kwargs={"content_type": self.content_type, "slug": self.slug},
        )


class CategoryMembership(models.Model):
    """
    ContentItem -> Category association.
    """

    content_item = models.ForeignKey(ContentItem, on_delete=models.CASCADE)
    category = models.ForeignKey(Category, on_delete=models.CASCADE)
    created = created_field()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["content_item", "category"],
                name="pc_content_uniq_item_category",
            ),
        ]

    def __str__(self) -> str:
        return f"<{self.__class__.__name__}> ({self.content_item_id} in {self.category_id})"
