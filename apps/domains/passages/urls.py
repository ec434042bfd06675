# apps/domains/passages/urls.py
from django.urls import path

from .views import (
    StudentAssignmentListView,
    StudentPassageDetailView,
    StudentPassageListView,
    TeacherPassageDetailView,
    TeacherPassageFullDetailView,
    TeacherPassageListCreateView,
)

student_urlpatterns = [
    path("passages", StudentPassageListView.as_view()),
    path("passages/<int:pk>", StudentPassageDetailView.as_view()),
    path("assignments", StudentAssignmentListView.as_view()),
]

teacher_urlpatterns = [
    path("passages", TeacherPassageListCreateView.as_view()),
    path("passages/<int:pk>", TeacherPassageDetailView.as_view()),
    path("passages/<int:pk>/detail", TeacherPassageFullDetailView.as_view()),
]
