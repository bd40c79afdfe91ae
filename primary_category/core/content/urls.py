"""
URLs for the content store application
"""
from django.urls import path

from .views import content_item

app_name = "pc_content"
urlpatterns = [
    path("<str:content_type>/<str:slug>/", content_item, name="content_item"),
]
