"""
Views for the content store application
"""
from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from django.utils.html import format_html

from .models import ContentItem


def content_item(request, content_type, slug):
    """
    Permalink target for a ContentItem.

    Sites are expected to render content with their own templates; this only
    makes sure every permalink resolves to something.
    """
    item = get_object_or_404(ContentItem, content_type=content_type, slug=slug)
    return HttpResponse(format_html("<h1>{}</h1>", item.title))
