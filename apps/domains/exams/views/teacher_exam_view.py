# PATH: apps/domains/exams/views/teacher_exam_view.py
import logging

from django.db.models import Count

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.common.pagination import TeacherListPagination
from apps.core.context import TeacherContextMixin
from apps.core.permissions import IsTeacher
from apps.domains.exams.filters import ExamFilter
from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.assignment import ExamAssignSerializer
from apps.domains.exams.serializers.exam import ExamSerializer, ExamWriteSerializer
from apps.domains.exams.services.assignment import (
    assign_exam,
    build_exam_status,
    list_assignments,
)

logger = logging.getLogger(__name__)


class ExamViewSet(TeacherContextMixin, ModelViewSet):
    """
    교사 시험지 관리

    - GET/POST        /api/teacher/exams
    - GET/PUT/DELETE  /api/teacher/exams/{id}
    - GET/POST        /api/teacher/exams/{id}/assign
    - GET             /api/teacher/exams/{id}/status
    """
    permission_classes = [IsAuthenticated, IsTeacher]
    serializer_class = ExamSerializer
    pagination_class = TeacherListPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = ExamFilter
    http_method_names = ["get", "post", "put", "delete", "head", "options"]
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return (
            Exam.objects
            .annotate(
                result_count=Count("exam_results", distinct=True),
                assigned_count=Count("assigned_exams", distinct=True),
            )
            .order_by("-created_at", "-id")
        )

    def get_object(self):
        exam = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if exam is None:
            raise NotFound("시험지를 찾을 수 없습니다.")
        return exam

    def retrieve(self, request, *args, **kwargs):
        return Response({"exam": ExamSerializer(self.get_object()).data})

    def create(self, request, *args, **kwargs):
        serializer = ExamWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = serializer.save_to(Exam())
        logger.info("exam created id=%s teacher=%s", exam.id, self.ctx.teacher.id)
        return Response({"exam": ExamSerializer(exam).data}, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        exam = self.get_object()
        serializer = ExamWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = serializer.save_to(exam)
        logger.info("exam updated id=%s teacher=%s", exam.id, self.ctx.teacher.id)
        return Response({"exam": ExamSerializer(exam).data})

    def destroy(self, request, *args, **kwargs):
        exam = self.get_object()
        exam_id = exam.id
        exam.delete()
        logger.info("exam deleted id=%s teacher=%s", exam_id, self.ctx.teacher.id)
        return Response({"message": "시험지가 삭제되었습니다."})

    @action(detail=True, methods=["get", "post"], url_path="assign")
    def assign(self, request, pk=None):
        exam = self.get_object()

        if request.method == "GET":
            return Response({"assignments": list_assignments(exam)})

        serializer = ExamAssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        count = assign_exam(
            exam,
            serializer.validated_data["student_ids"],
            serializer.validated_data["due_date"],
        )
        return Response({
            "message": f"{count}명의 학생에게 시험지가 배정되었습니다.",
            "count": count,
        })

    @action(detail=True, methods=["get"], url_path="status")
    def exam_status(self, request, pk=None):
        return Response(build_exam_status(self.get_object()))
