# PATH: apps/api/config/urls.py
from django.contrib import admin
from django.urls import path, include

from apps.api.common.views import health_check


urlpatterns = [
    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # Health
    # =========================
    path("healthz", health_check, name="health-check"),

    # =========================
    # API
    # =========================
    path("api/", include("apps.api.v1.urls")),
]
