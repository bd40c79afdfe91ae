"""
Capabilities the primary category service needs from the site hosting it.

The API functions don't reach for the current request or user themselves.
Callers build a ``HostContext`` at the boundary (a view, an admin hook) and pass
it in, which also lets tests swap in their own directory or user.
"""
from __future__ import annotations

import logging

from attrs import define, field
from django.contrib.auth.models import AnonymousUser
from django.core import signing
from django.db.models import QuerySet
from django.http import HttpRequest

from primary_category.conf import get_setting

from ..content import api as content_api
from ..content.models import Category, ContentItem
from .rules import UserType

log = logging.getLogger(__name__)

# Salt for the anti-forgery tokens, so they can't be swapped with other signed values.
NONCE_SALT = "primary_category.nonce"

# Request header a client sets on automatic (background) saves.
AUTOSAVE_HEADER = "X-Autosave"


class CategoryDirectory:
    """
    Looks up the categories that can be used as primary categories.

    The "uncategorized" category can never be a primary category, so it is
    neither offered by ``selectable()`` nor accepted by ``resolve_by_ref()``.
    """

    def uncategorized(self) -> Category | None:
        return content_api.get_category_by_slug(get_setting("UNCATEGORIZED_SLUG"))

    def selectable(self) -> QuerySet[Category]:
        """
        All categories that can be chosen as a primary category.
        """
        qs = Category.objects.select_related("parent").order_by("name", "id")
        return qs.exclude(slug=get_setting("UNCATEGORIZED_SLUG"))

    def resolve_by_slug(self, slug: str) -> Category | None:
        return content_api.get_category_by_slug(slug)

    def resolve_by_ref(self, ref: int | str) -> Category:
        """
        Resolve a submitted category reference (its ID) to a selectable Category.

        Raises CategoryDoesNotExist if the reference is malformed, unknown, or
        refers to the "uncategorized" category.
        """
        try:
            category_id = int(ref)
        except (TypeError, ValueError):
            raise content_api.CategoryDoesNotExist(  # pylint: disable=raise-missing-from
                f"Not a valid category reference: {ref!r}"
            )
        try:
            return self.selectable().get(pk=category_id)
        except OverflowError:
            # Some database backends reject IDs outside the integer range instead of matching nothing.
            raise content_api.CategoryDoesNotExist(  # pylint: disable=raise-missing-from
                f"Category reference out of range: {ref!r}"
            )


@define
class HostContext:
    """
    The acting user plus the host capabilities used by the primary category API.
    """

    user: UserType = field(factory=AnonymousUser)
    directory: CategoryDirectory = field(factory=CategoryDirectory)
    is_autosave: bool = False

    @classmethod
    def from_request(cls, request: HttpRequest, **kwargs) -> HostContext:
        """
        Build a HostContext for the user making ``request``.
        """
        is_autosave = request.headers.get(AUTOSAVE_HEADER, "").lower() in ("1", "true")
        return cls(user=request.user, is_autosave=is_autosave, **kwargs)

    def can_edit(self, content_item: ContentItem) -> bool:
        return self.user.has_perm("pc_primary.change_primary_category", content_item)

    def _signer(self) -> signing.TimestampSigner:
        # Tokens are bound to the acting user, so one user's token can't be replayed by another.
        user_key = self.user.pk if self.user.is_authenticated else "anonymous"
        return signing.TimestampSigner(salt=f"{NONCE_SALT}:{user_key}")

    def issue_token(self, scope: str) -> str:
        """
        Issue an anti-forgery token for ``scope``.
        """
        return self._signer().sign(scope)

    def verify_token(self, submitted: str | None, scope: str) -> bool:
        """
        Is ``submitted`` a token we issued for ``scope`` (to this user) that hasn't expired?
        """
        if not submitted:
            return False
        try:
            value = self._signer().unsign(submitted, max_age=get_setting("NONCE_MAX_AGE"))
        except signing.BadSignature as exc:
            log.info(f"Rejected primary category nonce for {scope}: {exc}")
            return False
        return value == scope


def nonce_scope(content_item_id: int) -> str:
    """
    The anti-forgery token scope for editing a content item's primary category.
    """
    return f"primary-category:{content_item_id}"
