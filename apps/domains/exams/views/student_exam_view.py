# PATH: apps/domains/exams/views/student_exam_view.py
from django.db.models import Count

from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.context import StudentContextMixin
from apps.core.permissions import IsStudent
from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.exam import (
    StudentExamListSerializer,
    StudentExamSheetSerializer,
)
from apps.domains.exams.serializers.submission import ExamSubmitSerializer
from apps.domains.results.models import ExamResult
from apps.domains.results.services.grading_service import submit_exam


def _public_exams(exam_type):
    return (
        Exam.objects
        .filter(exam_type=exam_type, is_public=True)
        .annotate(result_count=Count("exam_results"))
        .order_by("-created_at", "-id")
    )


def _get_exam(pk) -> Exam:
    exam = Exam.objects.filter(pk=pk).first()
    if exam is None:
        raise NotFound("시험지를 찾을 수 없습니다.")
    return exam


class SelfStudyExamListView(StudentContextMixin, APIView):
    """GET /api/student/exams/self-study?category"""
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = _public_exams(Exam.ExamType.SELF_STUDY)
        category = (request.query_params.get("category") or "").strip()
        if category:
            qs = qs.filter(category=category)
        return Response({"exams": StudentExamListSerializer(qs, many=True).data})


class GrammarExamListView(StudentContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = _public_exams(Exam.ExamType.GRAMMAR)
        return Response({"exams": StudentExamListSerializer(qs, many=True).data})


class StudentExamDetailView(StudentContextMixin, APIView):
    """
    GET /api/student/exams/{id}
    - 정답 / 해설 없이 반환
    - 이미 응시한 시험이면 400
    """
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, pk: int):
        exam = _get_exam(pk)
        if ExamResult.objects.filter(exam=exam, student=self.ctx.student).exists():
            raise ValidationError("이미 완료한 시험입니다.")
        return Response({"exam": StudentExamSheetSerializer(exam).data})


class StudentExamSubmitView(StudentContextMixin, APIView):
    """POST /api/student/exams/{id}/submit"""
    permission_classes = [IsAuthenticated, IsStudent]

    def post(self, request, pk: int):
        serializer = ExamSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = _get_exam(pk)
        return Response(submit_exam(
            self.ctx,
            exam,
            answers=serializer.validated_data["answers"],
            elapsed_time=serializer.validated_data["elapsed_time"],
        ))
