"""
Test the host capabilities used by the primary category API
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import ddt  # type: ignore[import]
import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase, override_settings
from freezegun import freeze_time

from primary_category.conf import get_setting
from primary_category.core.content import api as content_api
from primary_category.core.primary.data import CATEGORY_FIELD, NONCE_FIELD, SubmittedSelection
from primary_category.core.primary.host import AUTOSAVE_HEADER, CategoryDirectory, HostContext, nonce_scope

from .utils import PrimaryCategoryTestMixin


@ddt.ddt
class TestCategoryDirectory(PrimaryCategoryTestMixin, TestCase):
    """
    Test looking up categories.
    """

    def test_uncategorized(self) -> None:
        assert CategoryDirectory().uncategorized() == self.uncategorized

    @override_settings(PRIMARY_CATEGORY={"UNCATEGORIZED_SLUG": "misc"})
    def test_uncategorized_setting(self) -> None:
        directory = CategoryDirectory()
        assert directory.uncategorized() is None
        assert self.uncategorized in directory.selectable()

    def test_selectable(self) -> None:
        assert list(CategoryDirectory().selectable()) == [self.local_news, self.news, self.sports]

    def test_resolve_by_slug(self) -> None:
        directory = CategoryDirectory()
        assert directory.resolve_by_slug("news") == self.news
        assert directory.resolve_by_slug("nope") is None
        assert directory.resolve_by_slug("") is None

    def test_resolve_by_ref(self) -> None:
        directory = CategoryDirectory()
        assert directory.resolve_by_ref(self.news.id) == self.news
        assert directory.resolve_by_ref(str(self.sports.id)) == self.sports

    @ddt.data("abc", "", None, "999999", "99999999999999999999999")
    def test_resolve_by_bad_ref(self, ref) -> None:
        with pytest.raises(content_api.CategoryDoesNotExist):
            CategoryDirectory().resolve_by_ref(ref)

    def test_resolve_uncategorized_ref(self) -> None:
        with pytest.raises(content_api.CategoryDoesNotExist):
            CategoryDirectory().resolve_by_ref(self.uncategorized.id)


@ddt.ddt
class TestHostContext(PrimaryCategoryTestMixin, TestCase):
    """
    Test permission checks, nonces and building a HostContext from a request.
    """

    def test_defaults(self) -> None:
        host = HostContext()
        assert isinstance(host.user, AnonymousUser)
        assert isinstance(host.directory, CategoryDirectory)
        assert not host.is_autosave
        assert not host.can_edit(self.item)

    def test_can_edit(self) -> None:
        assert HostContext(user=self.editor).can_edit(self.item)
        assert HostContext(user=self.author).can_edit(self.item)
        assert not HostContext(user=self.reader).can_edit(self.item)

    def test_token(self) -> None:
        scope = nonce_scope(self.item.id)
        token = self.host.issue_token(scope)
        assert self.host.verify_token(token, scope)
        assert not self.host.verify_token(token, nonce_scope(self.item.id + 1))
        assert not HostContext(user=self.reader).verify_token(token, scope)
        assert not self.host.verify_token(token + "x", scope)
        assert not self.host.verify_token(None, scope)

    def test_anonymous_token(self) -> None:
        host = HostContext()
        scope = nonce_scope(self.item.id)
        assert host.verify_token(host.issue_token(scope), scope)
        assert not self.host.verify_token(host.issue_token(scope), scope)

    def test_token_expiry(self) -> None:
        scope = nonce_scope(self.item.id)
        issued = datetime(2024, 1, 1, tzinfo=timezone.utc)
        with freeze_time(issued):
            token = self.host.issue_token(scope)
        with freeze_time(issued + timedelta(seconds=get_setting("NONCE_MAX_AGE") - 1)):
            assert self.host.verify_token(token, scope)
        with freeze_time(issued + timedelta(seconds=get_setting("NONCE_MAX_AGE") + 1)):
            assert not self.host.verify_token(token, scope)

    @ddt.data(
        ({}, False),
        ({f"HTTP_{AUTOSAVE_HEADER.upper().replace('-', '_')}": "1"}, True),
        ({f"HTTP_{AUTOSAVE_HEADER.upper().replace('-', '_')}": "true"}, True),
        ({f"HTTP_{AUTOSAVE_HEADER.upper().replace('-', '_')}": "0"}, False),
    )
    @ddt.unpack
    def test_from_request(self, headers, is_autosave) -> None:
        request = RequestFactory().post("/", **headers)
        request.user = self.editor
        host = HostContext.from_request(request)
        assert host.user == self.editor
        assert host.is_autosave == is_autosave


class TestSubmittedSelection(TestCase):
    """
    Test building a SubmittedSelection from raw form data.
    """

    def test_from_data(self) -> None:
        selection = SubmittedSelection.from_data({NONCE_FIELD: "abc", CATEGORY_FIELD: " 5 ", "title": "x"})
        assert selection == SubmittedSelection(nonce="abc", category_ref="5")
        assert not selection.is_none

    def test_from_data_missing(self) -> None:
        assert SubmittedSelection.from_data({}) == SubmittedSelection(nonce=None, category_ref=None)
        assert SubmittedSelection.from_data({NONCE_FIELD: "", CATEGORY_FIELD: "  "}) == SubmittedSelection(
            nonce=None, category_ref=None,
        )

    def test_none(self) -> None:
        assert SubmittedSelection.from_data({CATEGORY_FIELD: "-1"}).is_none


class TestSettings(TestCase):
    """
    Test reading the PRIMARY_CATEGORY setting.
    """

    def test_configured(self) -> None:
        with override_settings(PRIMARY_CATEGORY={"CONTENT_TYPES": ["page"]}):
            assert get_setting("CONTENT_TYPES") == ["page"]
            assert get_setting("UNCATEGORIZED_SLUG") == "uncategorized"

    @override_settings()
    def test_missing_setting(self) -> None:
        from django.conf import settings  # pylint: disable=import-outside-toplevel
        del settings.PRIMARY_CATEGORY
        assert get_setting("CONTENT_TYPES") == ["post"]
        assert get_setting("NONCE_MAX_AGE") == 60 * 60 * 24

    def test_unknown_setting(self) -> None:
        with pytest.raises(KeyError):
            get_setting("NOPE")
