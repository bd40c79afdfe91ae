"""
Django admin for primary categories
"""
from __future__ import annotations

from django.contrib import admin
from django.db.models import Prefetch

from primary_category.conf import get_setting
from primary_category.lib.admin_utils import ReadOnlyModelAdmin

from ..content.admin import ContentItemAdmin
from ..content.models import ContentItem
from . import api
from .host import HostContext
from .models import PrimaryCategory


@admin.register(PrimaryCategory)
class PrimaryCategoryAdmin(ReadOnlyModelAdmin):
    """
    Admin definition for PrimaryCategory model

    Primary categories are chosen on the content item's own change page, so
    this is read-only.
    """
    list_display = ["content_item", "slug", "is_stale", "modified"]
    list_select_related = ["content_item", "category"]
    search_fields = ["_slug", "content_item__title"]
    readonly_fields = ["content_item", "category", "_slug", "created", "modified"]

    def has_view_permission(self, request, obj=None):
        return request.user.has_perm("pc_primary.manage_primary_categories")

    def has_module_permission(self, request):
        return request.user.has_perm("pc_primary.manage_primary_categories")


admin.site.unregister(ContentItem)


@admin.register(ContentItem)
class ContentItemWithPrimaryCategoryAdmin(ContentItemAdmin):
    """
    ContentItem admin with a primary category selector and list column.

    The selector's nonce is tied to the item's ID, so it is only shown once the
    item has been saved; it isn't on the "add" page.
    """
    list_display = [*ContentItemAdmin.list_display, "primary_category"]
    change_form_template = "admin/pc_content/contentitem/primary_category_change_form.html"

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related(
            Prefetch(
                "primary_category_assignments",
                queryset=PrimaryCategory.objects.select_related("category").order_by("id"),
            )
        )

    @admin.display(description="Primary category")
    def primary_category(self, obj: ContentItem) -> str:
        """
        The primary category's name, or "-" if there is none or it was deleted.
        """
        assignments = obj.primary_category_assignments.all()
        if not assignments or assignments[0].is_stale:
            return "-"
        return assignments[0].category.name

    def render_change_form(self, request, context, add=False, change=False, form_url="", obj=None):
        """
        Add the selector to existing items of a content type that has primary categories.
        """
        if obj is not None and obj.content_type in get_setting("CONTENT_TYPES"):
            context["primary_category_selector"] = api.render_selector(obj.id, HostContext.from_request(request))
        return super().render_change_form(request, context, add=add, change=change, form_url=form_url, obj=obj)

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        api.save_primary_category(obj.id, request.POST, HostContext.from_request(request))
