# apps/domains/questions/urls.py
from django.urls import path

from .views import (
    GrammarQuestionDetailView,
    GrammarQuestionListView,
    TeacherQuestionDetailView,
    TeacherQuestionListCreateView,
)

teacher_urlpatterns = [
    path("questions", TeacherQuestionListCreateView.as_view()),
    path("questions/<int:pk>", TeacherQuestionDetailView.as_view()),
]

student_urlpatterns = [
    path("grammar/questions", GrammarQuestionListView.as_view()),
    path("grammar/questions/<int:pk>", GrammarQuestionDetailView.as_view()),
]
