"""
Django metadata for the content store Django application.
"""
from django.apps import AppConfig


class ContentConfig(AppConfig):
    """
    Configuration for the content store Django application.
    """

    name = "primary_category.core.content"
    verbose_name = "Primary Category > Content"
    default_auto_field = "django.db.models.BigAutoField"
    label = "pc_content"

    def ready(self):
        """
        Register this app's rules-based permissions at startup.
        """
        from . import rules  # pylint: disable=unused-import,import-outside-toplevel
