"""
Settings for the primary_category apps.

Everything is read from a single ``PRIMARY_CATEGORY`` dict in the Django
settings. Missing keys (or a missing setting) fall back to ``DEFAULTS``.
"""
from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Slug of the default category that can never be chosen as primary.
    "UNCATEGORIZED_SLUG": "uncategorized",
    # Content types that get a primary category selector, and the default
    # content types for primary category listings.
    "CONTENT_TYPES": ["post"],
    # How long (in seconds) a primary category form nonce stays valid.
    "NONCE_MAX_AGE": 60 * 60 * 24,
}


def get_setting(name: str) -> Any:
    """
    Return the configured value for ``name``, or its default.
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown PRIMARY_CATEGORY setting: {name}")
    configured = getattr(settings, "PRIMARY_CATEGORY", None) or {}
    return configured.get(name, DEFAULTS[name])
