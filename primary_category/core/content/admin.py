"""
Django admin for the content store
"""
from __future__ import annotations

from django.contrib import admin

from .models import Category, ContentItem


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """
    Admin definition for Category model
    """
    autocomplete_fields = ["parent"]
    search_fields = ["slug", "name"]
    list_display = ["name", "slug", "parent"]


@admin.register(ContentItem)
class ContentItemAdmin(admin.ModelAdmin):
    """
    Admin definition for ContentItem model
    """
    fields = ["title", "slug", "content_type", "author", "categories_list"]
    readonly_fields = ["categories_list"]
    list_display = ["title", "content_type", "author", "created"]
    list_filter = ["content_type"]
    search_fields = ["title", "slug"]

    @admin.display(description="Categories")
    def categories_list(self, obj: ContentItem) -> str:
        return ", ".join(category.name for category in obj.categories.all())
