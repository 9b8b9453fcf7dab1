"""
URL configuration for the blocksite project.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("blocks/", include("apps.blocks.urls")),
]
