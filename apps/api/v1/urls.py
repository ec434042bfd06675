# apps/api/v1/urls.py
from django.urls import path, include

from apps.domains.students import urls as students_urls
from apps.domains.passages import urls as passages_urls
from apps.domains.questions import urls as questions_urls
from apps.domains.exams import urls as exams_urls
from apps.domains.results import urls as results_urls

urlpatterns = [
    # =========================
    # Auth (JWT)
    # =========================
    path("auth/", include("apps.core.urls")),

    # =========================
    # 학생 전용 (/api/student/...)
    # =========================
    path("student/", include(passages_urls.student_urlpatterns)),
    path("student/", include(questions_urls.student_urlpatterns)),
    path("student/", include(exams_urls.student_urlpatterns)),
    path("student/", include(results_urls.student_urlpatterns)),

    # =========================
    # 교사 전용 (/api/teacher/...)
    # =========================
    path("teacher/", include(students_urls.teacher_urlpatterns)),
    path("teacher/", include(passages_urls.teacher_urlpatterns)),
    path("teacher/", include(questions_urls.teacher_urlpatterns)),
    path("teacher/", include(exams_urls.teacher_urlpatterns)),
    path("teacher/", include(results_urls.teacher_urlpatterns)),
]
