from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("content/", include("primary_category.core.content.urls")),
]
