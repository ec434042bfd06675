# PATH: apps/domains/results/views/student_result_view.py
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.context import StudentContextMixin
from apps.core.permissions import IsStudent
from apps.domains.passages.models import Passage
from apps.domains.results.models import Result
from apps.domains.results.serializers.result import (
    ResultDetailSerializer,
    StudentResultListSerializer,
)
from apps.domains.results.serializers.submission import (
    PassageSubmitSerializer,
    ReviewSerializer,
)
from apps.domains.results.serializers.wrong_answer import (
    WrongAnswerDetailSerializer,
    WrongAnswerSerializer,
)
from apps.domains.results.services.grading_service import submit_passage_reading
from apps.domains.results.services.ranking import RANKING_TYPES, build_ranking
from apps.domains.results.services.result_query import student_result_stats
from apps.domains.results.services.wrong_answer_service import (
    WrongAnswerQuery,
    get_wrong_answer_for_student,
    list_wrong_answers_for_student,
    mark_review,
)


class StudentResultListCreateView(StudentContextMixin, APIView):
    """
    GET  /api/student/results?category   내 풀이 기록 + 요약
    POST /api/student/results            지문 독해 제출
    """
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = (
            Result.objects
            .filter(student=self.ctx.student)
            .select_related("passage")
            .order_by("-submitted_at", "-id")
        )
        category = (request.query_params.get("category") or "").strip()
        if category:
            qs = qs.filter(passage__category=category)

        return Response({
            "results": StudentResultListSerializer(qs, many=True).data,
            "stats": student_result_stats(qs),
        })

    def post(self, request):
        serializer = PassageSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        passage = Passage.objects.filter(pk=data["passage_id"]).first()
        if passage is None:
            raise NotFound("지문을 찾을 수 없습니다.")

        return Response(submit_passage_reading(
            self.ctx,
            passage,
            reading_time=data["reading_time"],
            paragraph_answers=data["paragraph_answers"],
            question_answers=data["question_answers"],
        ))


class StudentResultDetailView(StudentContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, pk: int):
        result = (
            Result.objects
            .select_related("student", "passage")
            .prefetch_related("question_answers__question")
            .filter(pk=pk)
            .first()
        )
        if result is None:
            raise NotFound("결과를 찾을 수 없습니다.")
        if result.student_id != self.ctx.student.id:
            raise PermissionDenied("권한이 없습니다.")
        return Response({"result": ResultDetailSerializer(result).data})


class StudentWrongAnswerListView(StudentContextMixin, APIView):
    """GET /api/student/wrong-answers?category&is_reviewed"""
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        rows, stats = list_wrong_answers_for_student(
            self.ctx, WrongAnswerQuery.from_params(request.query_params)
        )
        return Response({
            "wrong_answers": WrongAnswerSerializer(rows, many=True).data,
            "stats": stats,
        })


class StudentWrongAnswerDetailView(StudentContextMixin, APIView):
    """
    GET   /api/student/wrong-answers/{id}
    PATCH /api/student/wrong-answers/{id}  {is_correct, student_answer?}
    """
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, pk: int):
        wa = get_wrong_answer_for_student(self.ctx, pk)
        return Response({"wrong_answer": WrongAnswerDetailSerializer(wa).data})

    def patch(self, request, pk: int):
        wa = get_wrong_answer_for_student(self.ctx, pk)
        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        is_correct = serializer.validated_data["is_correct"]
        mark_review(self.ctx, wa, is_correct=is_correct)
        return Response({"message": "복습이 완료되었습니다.", "is_correct": is_correct})


class StudentRankingView(StudentContextMixin, APIView):
    """GET /api/student/ranking?type=class|grade|all (기본 class)"""
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        ranking_type = request.query_params.get("type") or "class"
        if ranking_type not in RANKING_TYPES:
            raise ValidationError("올바른 순위 유형을 선택해주세요.")
        return Response(build_ranking(self.ctx, ranking_type))
