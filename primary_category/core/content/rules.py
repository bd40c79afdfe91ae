"""
Django rules-based permissions for the content store
"""
from __future__ import annotations

from typing import Callable, Union

import django.contrib.auth.models
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

from .models import ContentItem

UserType = Union[
    django.contrib.auth.models.User, django.contrib.auth.models.AnonymousUser
]


# Global staff are editors of all content.
# (Superusers can already do anything)
is_editor: Callable[[UserType], bool] = rules.is_staff


@rules.predicate
def is_author(user: UserType, content_item: ContentItem | None = None) -> bool:
    """
    Authors can edit their own content items.
    """
    if content_item is None or not user.is_authenticated:
        return False
    return content_item.author_id == user.id


can_change_content_item = is_editor | is_author

rules.add_perm("pc_content.change_contentitem", can_change_content_item)
rules.add_perm("pc_content.delete_contentitem", can_change_content_item)
rules.add_perm("pc_content.view_contentitem", rules.always_allow)
