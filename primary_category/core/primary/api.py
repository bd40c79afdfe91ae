"""
Primary category API

Anyone using the primary category app should use these APIs instead of creating
or modifying the models directly. Setting a primary category also adds the
content item to that category, and clearing or changing it never removes the
item from any category.

Reads never raise for missing, stale or unreadable data. Writes check the anti-forgery
token, permissions and autosave flag carried by the ``HostContext`` and quietly
do nothing if any of them fail.
"""
from __future__ import annotations

import logging
from typing import Mapping

from django.db import DatabaseError, transaction
from django.db.models import QuerySet
from django.forms import Select
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from primary_category.conf import get_setting

from ..content import api as content_api
from ..content.models import Category, ContentItem
from .data import (
    CATEGORY_FIELD,
    NONCE_FIELD,
    NONE_VALUE,
    AssignmentResult,
    Found,
    LookupFailed,
    NotAssigned,
    SaveOutcome,
    SubmittedSelection,
)
from .host import HostContext, nonce_scope
from .models import PrimaryCategory

log = logging.getLogger(__name__)

__all__ = [
    "find_by_primary_category",
    "get_primary_category",
    "get_primary_category_or_none",
    "remove_primary_category",
    "render_listing",
    "render_selector",
    "save_primary_category",
    "set_primary_category",
]


def get_primary_category(content_item_id: int) -> AssignmentResult:
    """
    Returns the primary category of the given content item.

    * Found(category) if there is one.
    * NotAssigned() if there is none.
    * LookupFailed(reason) if one is stored but its category no longer exists,
      or if it couldn't be read at all.
    """
    try:
        assignment = (
            PrimaryCategory.objects
            .filter(content_item_id=content_item_id)
            .select_related("category")
            .order_by("id")
            .first()
        )
    except DatabaseError:
        log.exception(f"Unable to read the primary category of content item {content_item_id}")
        return LookupFailed("primary category could not be read")
    if assignment is None:
        return NotAssigned()
    if assignment.is_stale:
        reason = f"category '{assignment.slug}' no longer exists"
        log.warning(f"Stale primary category for content item {content_item_id}: {reason}")
        return LookupFailed(reason)
    return Found(assignment.category)


def get_primary_category_or_none(content_item_id: int) -> Category | None:
    """
    Returns the primary Category of the given content item, treating lookup errors as "no primary category".
    """
    result = get_primary_category(content_item_id)
    return result.category if isinstance(result, Found) else None


def _skip(content_item_id: int, reason: str) -> SaveOutcome:
    log.info(f"Not saving primary category for content item {content_item_id}: {reason}")
    return SaveOutcome.SKIPPED


def set_primary_category(
    content_item_id: int,
    selection: SubmittedSelection,
    host: HostContext,
) -> SaveOutcome:
    """
    Apply an editor's primary category selection to a content item.

    Checks, in this order, that the nonce is valid, the user can edit the item,
    this isn't an autosave, the item is of a content type that has primary
    categories, and a value was submitted. If any check fails nothing changes
    and SaveOutcome.SKIPPED is returned.

    The "none" value clears the primary category (SaveOutcome.REMOVED).
    Otherwise, if the value resolves to a selectable category, it replaces any
    previous primary category and the item is added to that category if it
    isn't a member already (SaveOutcome.ASSIGNED).
    """
    if not host.verify_token(selection.nonce, nonce_scope(content_item_id)):
        return _skip(content_item_id, "missing or invalid nonce")

    try:
        content_item = content_api.get_content_item(content_item_id)
    except content_api.ContentItemDoesNotExist:
        return _skip(content_item_id, "no such content item")

    if not host.can_edit(content_item):
        return _skip(content_item_id, f"{host.user} may not edit it")

    if host.is_autosave:
        return _skip(content_item_id, "autosave")

    if content_item.content_type not in get_setting("CONTENT_TYPES"):
        return _skip(content_item_id, f"content type '{content_item.content_type}' has no primary category")

    if selection.category_ref is None:
        return _skip(content_item_id, "no category submitted")

    if selection.is_none:
        remove_primary_category(content_item_id)
        return SaveOutcome.REMOVED

    try:
        category = host.directory.resolve_by_ref(selection.category_ref)
    except content_api.CategoryDoesNotExist:
        return _skip(content_item_id, f"unknown category {selection.category_ref!r}")

    with transaction.atomic():
        PrimaryCategory.objects.update_or_create(
            content_item_id=content_item_id,
            defaults={"category": category, "_slug": category.slug},
        )
        if not content_api.is_in_category(content_item_id, category.id):
            content_api.add_to_category(content_item_id, category.id)

    log.info(f"Primary category of content item {content_item_id} set to {category.slug}")
    return SaveOutcome.ASSIGNED


def save_primary_category(content_item_id: int, data: Mapping[str, object], host: HostContext) -> int:
    """
    Save hook for content edit forms.

    ``data`` is the raw submitted form data. Always returns ``content_item_id``,
    whether or not anything changed.
    """
    set_primary_category(content_item_id, SubmittedSelection.from_data(data), host)
    return content_item_id


def remove_primary_category(content_item_id: int) -> None:
    """
    Clear the primary category of the given content item, if it has one.

    Only the primary designation is removed; the item stays in every category
    it is a member of. Should there ever be more than one assignment, only the
    oldest is removed.
    """
    assignment = PrimaryCategory.objects.filter(content_item_id=content_item_id).order_by("id").first()
    if assignment is not None:
        assignment.delete()
        log.info(f"Primary category of content item {content_item_id} removed")


def _selector_choices(host: HostContext) -> list[tuple[str, str]]:
    choices = [(NONE_VALUE, "none")]
    choices.extend((str(category.id), category.name) for category in host.directory.selectable())
    return choices


def render_selector(content_item_id: int, host: HostContext) -> SafeString:
    """
    Render the primary category form fields for the given content item's edit form.

    That's a hidden nonce field plus a select box of every selectable category,
    with the item's current primary category (or "none") selected.
    """
    current = get_primary_category(content_item_id)
    selected = str(current.category.id) if isinstance(current, Found) else NONE_VALUE

    nonce_html = format_html(
        '<input type="hidden" name="{}" value="{}">',
        NONCE_FIELD,
        host.issue_token(nonce_scope(content_item_id)),
    )
    select_html = Select(choices=_selector_choices(host)).render(
        CATEGORY_FIELD,
        selected,
        attrs={"id": f"id_{CATEGORY_FIELD}"},
    )
    return format_html("<div>{}{}</div>", nonce_html, select_html)


def _parse_content_types(content_types: list[str] | str | None) -> list[str]:
    if isinstance(content_types, str):
        content_types = content_types.split(",")
    parsed = [content_type.strip() for content_type in content_types or [] if content_type.strip()]
    return parsed or list(get_setting("CONTENT_TYPES"))


def find_by_primary_category(
    category_slug: str,
    content_types: list[str] | str | None = None,
) -> QuerySet[ContentItem] | None:
    """
    Returns all content items whose primary category has the given slug.

    content_types limits the results to those kinds of content; it can be a
    list or a comma-separated string, and defaults to the CONTENT_TYPES setting.
    Items come back in the content store's default order (newest first).

    Returns None if no category slug is given.
    """
    if not category_slug:
        return None
    return content_api.get_content_items(_parse_content_types(content_types)).filter(
        primary_category_assignments__category__slug=category_slug,
    )


def render_listing(
    category_slug: str,
    content_types: list[str] | str | None = None,
) -> SafeString | None:
    """
    Render a list of links to the content items with the given primary category.

    Returns None if no category slug is given. If nothing matches, the list is
    rendered empty.
    """
    items = find_by_primary_category(category_slug, content_types)
    if items is None:
        return None
    links = format_html_join(
        "",
        '<li><a href="{}">{}</a></li>',
        ((item.get_absolute_url(), item.title) for item in items),
    )
    return format_html('<ul class="primary-category-listing">{}</ul>', links)
