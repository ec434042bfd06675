# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from apps.core.models import User


@admin.register(User)
class ReadingUserAdmin(UserAdmin):
    list_display = ("id", "username", "name", "role", "is_active", "is_staff")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "name")
    fieldsets = UserAdmin.fieldsets + (
        ("역할", {"fields": ("name", "role")}),
    )
