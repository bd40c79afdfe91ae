"""
Useful utilities for testing primary category code.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model

from primary_category.core.content import api as content_api
from primary_category.core.content.models import Category, ContentItem
from primary_category.core.primary.data import SubmittedSelection
from primary_category.core.primary.host import HostContext, nonce_scope

User = get_user_model()


class PrimaryCategoryTestMixin:
    """
    Base class with a few categories, content items and users pre-created.
    """
    uncategorized: Category
    news: Category
    sports: Category
    local_news: Category
    item: ContentItem

    def setUp(self):
        super().setUp()
        self.editor = User.objects.create(username="editor", email="editor@example.com", is_staff=True)
        self.author = User.objects.create(username="author", email="author@example.com")
        self.reader = User.objects.create(username="reader", email="reader@example.com")

        self.uncategorized = content_api.create_category("uncategorized", "Uncategorized")
        self.news = content_api.create_category("news", "News")
        self.sports = content_api.create_category("sports", "Sports")
        self.local_news = content_api.create_category("local-news", "Local News", parent=self.news)

        self.item = content_api.create_content_item(
            "Election results",
            "election-results",
            author_id=self.author.id,
            categories=[self.uncategorized],
        )
        self.host = HostContext(user=self.editor)

    def selection(self, category_ref, item: ContentItem | None = None, host: HostContext | None = None):
        """
        A SubmittedSelection with a valid nonce for ``item`` (default: self.item).
        """
        item = item or self.item
        host = host or self.host
        return SubmittedSelection(
            nonce=host.issue_token(nonce_scope(item.id)),
            category_ref=None if category_ref is None else str(category_ref),
        )

    def member_slugs(self, item: ContentItem | None = None) -> set[str]:
        item = item or self.item
        return set(content_api.get_item_categories(item.id).values_list("slug", flat=True))
