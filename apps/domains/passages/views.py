# PATH: apps/domains/passages/views.py
import logging

from django.db.models import Count

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.context import StudentContextMixin, TeacherContextMixin
from apps.core.permissions import IsStudent, IsTeacher
from apps.domains.questions.serializers import QuestionSerializer

from .filters import PassageFilter
from .models import Passage
from .serializers import (
    PassageListSerializer,
    PassageSerializer,
    PassageSummarySerializer,
    PassageWithQuestionsSerializer,
    PassageWriteSerializer,
    StudentPassageListSerializer,
)
from .services import build_student_assignments, passage_with_counts

logger = logging.getLogger(__name__)

RECENT_RESULT_LIMIT = 10


def _get_passage(queryset, pk) -> Passage:
    passage = queryset.filter(pk=pk).first()
    if passage is None:
        raise NotFound("지문을 찾을 수 없습니다.")
    return passage


# =========================================================
# 학생
# =========================================================

class StudentPassageListView(StudentContextMixin, APIView):
    """GET /api/student/passages?category&subcategory&difficulty&search"""
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = Passage.objects.annotate(question_count=Count("questions"))
        qs = PassageFilter(request.query_params, queryset=qs).qs.order_by("-created_at", "-id")
        return Response({"passages": StudentPassageListSerializer(qs, many=True).data})


class StudentPassageDetailView(StudentContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, pk: int):
        passage = _get_passage(Passage.objects.all(), pk)
        return Response({"passage": PassageWithQuestionsSerializer(passage).data})


class StudentAssignmentListView(StudentContextMixin, APIView):
    """GET /api/student/assignments"""
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        return Response(build_student_assignments(self.ctx))


# =========================================================
# 교사
# =========================================================

class TeacherPassageListCreateView(TeacherContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        qs = passage_with_counts().order_by("-created_at", "-id")
        return Response({"passages": PassageListSerializer(qs, many=True).data})

    def post(self, request):
        serializer = PassageWriteSerializer(data=request.data, context={"require_qa": True})
        serializer.is_valid(raise_exception=True)
        passage = serializer.save_to(Passage())
        logger.info("passage created id=%s teacher=%s", passage.id, self.ctx.teacher.id)
        return Response(
            {
                "message": "지문이 성공적으로 등록되었습니다.",
                "passage": PassageSummarySerializer(passage).data,
            },
            status=status.HTTP_201_CREATED,
        )


class TeacherPassageDetailView(TeacherContextMixin, APIView):
    """GET / PUT / DELETE /api/teacher/passages/{id}"""
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request, pk: int):
        passage = _get_passage(Passage.objects.all(), pk)
        return Response({"passage": PassageSerializer(passage).data})

    def put(self, request, pk: int):
        passage = _get_passage(Passage.objects.all(), pk)
        serializer = PassageWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        passage = serializer.save_to(passage)
        logger.info("passage updated id=%s teacher=%s", passage.id, self.ctx.teacher.id)
        return Response({
            "message": "지문이 성공적으로 수정되었습니다.",
            "passage": PassageSummarySerializer(passage).data,
        })

    def delete(self, request, pk: int):
        passage = _get_passage(Passage.objects.all(), pk)
        passage_id = passage.id
        passage.delete()
        logger.info("passage deleted id=%s teacher=%s", passage_id, self.ctx.teacher.id)
        return Response({"message": "지문이 성공적으로 삭제되었습니다."})


class TeacherPassageFullDetailView(TeacherContextMixin, APIView):
    """
    GET /api/teacher/passages/{id}/detail
    - 문제 목록 (최신순) + 최근 풀이 10건 + 개수
    """
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request, pk: int):
        passage = _get_passage(passage_with_counts(), pk)
        recent = (
            passage.results
            .select_related("student")
            .order_by("-submitted_at", "-id")[:RECENT_RESULT_LIMIT]
        )

        data = PassageSerializer(passage).data
        data["questions"] = QuestionSerializer(
            passage.questions.order_by("-created_at", "-id"), many=True,
        ).data
        data["results"] = [
            {
                "id": r.id,
                "score": r.score,
                "reading_time": r.reading_time,
                "submitted_at": r.submitted_at,
                "student": {"name": r.student.name, "student_id": r.student.student_id},
            }
            for r in recent
        ]
        data["counts"] = {
            "questions": passage.question_count,
            "results": passage.result_count,
        }
        return Response({"passage": data})
