from django.contrib import admin
from .models import Passage, AssignedPassage


@admin.register(Passage)
class PassageAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "category", "subcategory", "difficulty", "created_at")
    list_filter = ("category", "difficulty")
    search_fields = ("title",)


@admin.register(AssignedPassage)
class AssignedPassageAdmin(admin.ModelAdmin):
    list_display = ("id", "passage", "assigned_to", "target_grade", "target_class", "due_date")
    list_filter = ("target_grade",)
