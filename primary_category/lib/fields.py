"""
Convenience functions to make consistent field conventions easier.

Slugs are the stable, human-readable keys that templates and template tags use
to refer to categories and content, so every model that has one should declare
it the same way.
"""
from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _


def slug_field(**kwargs) -> models.SlugField:
    """
    Return a ``SlugField`` used as a stable, externally visible key.

    You may override any argument that you would normally pass into
    ``SlugField``.
    """
    final_kwargs = {
        "max_length": 200,
        "null": False,
        "blank": False,
        "allow_unicode": True,
        "help_text": _("Stable, URL-friendly key. Avoid changing it once it has been published."),
    }
    final_kwargs.update(kwargs)

    return models.SlugField(**final_kwargs)


def title_field(**kwargs) -> models.CharField:
    """
    Human-readable title or display name.
    """
    final_kwargs = {
        "max_length": 500,
        "null": False,
        "blank": False,
    }
    final_kwargs.update(kwargs)

    return models.CharField(**final_kwargs)


def created_field() -> models.DateTimeField:
    """
    Creation time, set automatically when the row is first saved.

    Django's USE_TZ setting should be True so this is stored in UTC.
    """
    return models.DateTimeField(auto_now_add=True, db_index=True)


def modified_field() -> models.DateTimeField:
    """
    Last modification time, updated on every save.
    """
    return models.DateTimeField(auto_now=True)
