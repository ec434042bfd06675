# apps/domains/results/urls.py
from django.urls import path

from .views.dashboard_view import DashboardStatsView, RecentActivitiesView, StatisticsView
from .views.student_result_view import (
    StudentRankingView,
    StudentResultDetailView,
    StudentResultListCreateView,
    StudentWrongAnswerDetailView,
    StudentWrongAnswerListView,
)
from .views.teacher_result_view import (
    ResultExportView,
    TeacherResultDetailView,
    TeacherResultListView,
    UpdateGradingView,
)

student_urlpatterns = [
    path("results", StudentResultListCreateView.as_view()),
    path("results/<int:pk>", StudentResultDetailView.as_view()),
    path("wrong-answers", StudentWrongAnswerListView.as_view()),
    path("wrong-answers/<int:pk>", StudentWrongAnswerDetailView.as_view()),
    path("ranking", StudentRankingView.as_view()),
]

teacher_urlpatterns = [
    path("results", TeacherResultListView.as_view()),
    path("results/export", ResultExportView.as_view()),
    path("results/<int:pk>", TeacherResultDetailView.as_view()),
    path("results/<int:pk>/update-grading", UpdateGradingView.as_view()),
    path("statistics", StatisticsView.as_view()),
    path("stats", DashboardStatsView.as_view()),
    path("recent-activities", RecentActivitiesView.as_view()),
]
