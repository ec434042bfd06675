from django.contrib import admin
from .models import Result, QuestionAnswer, ExamResult, WrongAnswer


class QuestionAnswerInline(admin.TabularInline):
    model = QuestionAnswer
    extra = 0


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "passage", "score", "reading_time", "submitted_at")
    list_filter = ("passage__category",)
    inlines = [QuestionAnswerInline]


@admin.register(ExamResult)
class ExamResultAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "exam", "score", "total_time", "submitted_at")


@admin.register(WrongAnswer)
class WrongAnswerAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "question_type", "category", "is_reviewed", "created_at")
    list_filter = ("is_reviewed", "category")
