"""
Django metadata for the primary category Django application.
"""
from django.apps import AppConfig


class PrimaryConfig(AppConfig):
    """
    Configuration for the primary category Django application.
    """

    name = "primary_category.core.primary"
    verbose_name = "Primary Category > Primary categories"
    default_auto_field = "django.db.models.BigAutoField"
    label = "pc_primary"

    def ready(self):
        """
        Register this app's rules-based permissions at startup.
        """
        from . import rules  # pylint: disable=unused-import,import-outside-toplevel
