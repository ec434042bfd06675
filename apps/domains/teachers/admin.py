from django.contrib import admin
from .models import Teacher


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    list_display = ("id", "teacher_id", "name", "created_at")
    search_fields = ("teacher_id", "name")
