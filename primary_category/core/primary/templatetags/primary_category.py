"""
Template tags for listing content by primary category.

Usage::

    {% load primary_category %}
    {% primary_category_posts category="news" %}
    {% primary_category_posts category="news" post_type="post,page" %}
"""
from django import template

from .. import api

register = template.Library()


@register.simple_tag
def primary_category_posts(**options):
    """
    List links to the content items whose primary category is ``category``.

    ``post_type`` is an optional comma-separated list of content types. Renders
    nothing if ``category`` is missing or empty.
    """
    listing = api.render_listing(options.get("category") or "", options.get("post_type"))
    return listing or ""
