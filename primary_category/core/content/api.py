"""
Content store API

Anyone using the content app should use these APIs instead of creating or
modifying the models directly.

No permissions/rules are enforced by these methods -- these must be enforced by
the callers.
"""
from __future__ import annotations

from django.db.models import QuerySet

from .models import Category, CategoryMembership, ContentItem

# The public API is listed in the __all__ entries below. Internal helper
# functions that are private to this module should start with an underscore.
__all__ = [
    "CategoryDoesNotExist",
    "ContentItemDoesNotExist",
    "add_to_category",
    "create_category",
    "create_content_item",
    "get_category",
    "get_category_by_slug",
    "get_content_item",
    "get_content_items",
    "get_item_categories",
    "is_in_category",
    "remove_from_category",
]

# Export these as part of the API
CategoryDoesNotExist = Category.DoesNotExist
ContentItemDoesNotExist = ContentItem.DoesNotExist


def create_category(slug: str, name: str, *, parent: Category | None = None) -> Category:
    """
    Creates, saves, and returns a new Category.
    """
    category = Category(slug=slug, name=name, parent=parent)
    category.full_clean()
    category.save()
    return category


def get_category(category_id: int) -> Category:
    """
    Get a Category by ID. Raises CategoryDoesNotExist if there is none.
    """
    return Category.objects.select_related("parent").get(pk=category_id)


def get_category_by_slug(slug: str) -> Category | None:
    """
    Returns the Category with the given slug, or None.
    """
    if not slug:
        return None
    return Category.objects.filter(slug=slug).first()


def create_content_item(
    title: str,
    slug: str,
    *,
    content_type: str = "post",
    author_id: int | None = None,
    categories: list[Category] | None = None,
) -> ContentItem:
    """
    Create a new ContentItem, optionally placing it in some categories.
    """
    item = ContentItem(title=title, slug=slug, content_type=content_type, author_id=author_id)
    item.full_clean()
    item.save()
    for category in categories or []:
        add_to_category(item.id, category.id)
    return item


def get_content_item(content_item_id: int) -> ContentItem:
    """
    Get a ContentItem by ID. Raises ContentItemDoesNotExist if there is none.
    """
    return ContentItem.objects.get(pk=content_item_id)


def get_content_items(content_types: list[str] | None = None) -> QuerySet[ContentItem]:
    """
    Returns all ContentItems, newest first.

    Pass content_types to limit the results to those kinds of content.
    """
    qs = ContentItem.objects.all()
    if content_types:
        qs = qs.filter(content_type__in=content_types)
    return qs


def get_item_categories(content_item_id: int) -> QuerySet[Category]:
    """
    Returns the Categories the given ContentItem is a member of.
    """
    return Category.objects.filter(categorymembership__content_item_id=content_item_id)


def is_in_category(content_item_id: int, category_id: int) -> bool:
    """
    Is the ContentItem a member of the Category?
    """
    return CategoryMembership.objects.filter(
        content_item_id=content_item_id,
        category_id=category_id,
    ).exists()


def add_to_category(content_item_id: int, category_id: int) -> bool:
    """
    Add the ContentItem to the Category, keeping all existing memberships.

    Returns True if a new membership was created, False if the item was already
    in that category.
    """
    _membership, created = CategoryMembership.objects.get_or_create(
        content_item_id=content_item_id,
        category_id=category_id,
    )
    return created


def remove_from_category(content_item_id: int, category_id: int) -> None:
    """
    Remove the ContentItem from the Category. A no-op if it wasn't a member.
    """
    CategoryMembership.objects.filter(
        content_item_id=content_item_id,
        category_id=category_id,
    ).delete()
