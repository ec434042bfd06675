from django.contrib import admin
from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "student_id",
        "name",
        "school_level",
        "grade",
        "class_no",
        "number",
        "is_active",
        "created_at",
    )
    list_filter = (
        "school_level",
        "grade",
        "class_no",
        "is_active",
    )
    search_fields = ("name", "student_id")
