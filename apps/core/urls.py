# apps/core/urls.py

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from apps.api.common.auth_jwt import RoleLoginView
from apps.core.views import MeView

urlpatterns = [
    path("login", RoleLoginView.as_view(), name="auth-login"),
    path("refresh", TokenRefreshView.as_view(), name="auth-refresh"),
    path("me", MeView.as_view(), name="auth-me"),
]
