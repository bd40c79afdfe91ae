"""
Django rules-based permissions for primary categories
"""
from __future__ import annotations

from typing import Callable

# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

from ..content.models import ContentItem
from ..content.rules import UserType

# Global staff manage the set of primary categories.
# (Superusers can already do anything)
is_primary_category_admin: Callable[[UserType], bool] = rules.is_staff


@rules.predicate
def can_change_primary_category(user: UserType, content_item: ContentItem | None = None) -> bool:
    """
    Anyone who can edit a content item can choose its primary category.
    """
    if content_item is None:
        return False
    return user.has_perm("pc_content.change_contentitem", content_item)


rules.add_perm("pc_primary.change_primary_category", can_change_primary_category)
rules.add_perm("pc_primary.manage_primary_categories", is_primary_category_admin)
rules.add_perm("pc_primary.view_primarycategory", is_primary_category_admin)
