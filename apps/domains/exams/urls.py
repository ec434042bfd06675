# apps/domains/exams/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views.student_exam_view import (
    GrammarExamListView,
    SelfStudyExamListView,
    StudentExamDetailView,
    StudentExamSubmitView,
)
from .views.teacher_exam_view import ExamViewSet

router = SimpleRouter(trailing_slash=False)
router.register("exams", ExamViewSet, basename="teacher-exam")

teacher_urlpatterns = router.urls

student_urlpatterns = [
    path("exams/self-study", SelfStudyExamListView.as_view()),
    path("exams/grammar", GrammarExamListView.as_view()),
    path("exams/<int:pk>", StudentExamDetailView.as_view()),
    path("exams/<int:pk>/submit", StudentExamSubmitView.as_view()),
]
