"""
Convenience utilities for the Django Admin.
"""
from django.contrib import admin


class ReadOnlyModelAdmin(admin.ModelAdmin):
    """
    ModelAdmin subclass that removes any editing ability.

    The Django Admin is handy for looking at model data, but changes to our
    models have to go through the rules in the api.py modules (a primary
    category assignment also adds a category membership, for instance), so
    editing them directly in the Django Admin is unsafe.

    Admin classes for models that are only changed through an API should
    subclass this class instead of admin.ModelAdmin.
    """

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
