from django.contrib import admin
from .models import Exam, AssignedExam


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "category", "target_school", "target_grade", "exam_type", "is_public")
    list_filter = ("category", "exam_type", "is_public")
    search_fields = ("title",)


@admin.register(AssignedExam)
class AssignedExamAdmin(admin.ModelAdmin):
    list_display = ("id", "exam", "student", "due_date")
