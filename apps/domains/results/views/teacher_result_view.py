# PATH: apps/domains/results/views/teacher_result_view.py
import logging

from django.db.models import Count

from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.pagination import TeacherListPagination
from apps.core.context import TeacherContextMixin
from apps.core.permissions import IsTeacher
from apps.domains.results.models import Result
from apps.domains.results.serializers.result import ResultDetailSerializer, ResultListSerializer
from apps.domains.results.serializers.submission import RegradeSerializer
from apps.domains.results.services.export import (
    build_results_workbook,
    export_filename,
    workbook_response,
)
from apps.domains.results.services.regrade_service import update_grading
from apps.domains.results.services.result_query import ResultQuery, filter_results

logger = logging.getLogger(__name__)


class TeacherResultListView(TeacherContextMixin, APIView):
    """
    GET /api/teacher/results
    ?student_id&passage_id&start_date&end_date&sort_by&sort_order&page&limit
    """
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        qs = filter_results(ResultQuery.from_params(request.query_params))
        qs = qs.annotate(question_count=Count("question_answers"))

        paginator = TeacherListPagination()
        page = paginator.paginate_queryset(qs, request, view=self)
        return paginator.get_paginated_response(ResultListSerializer(page, many=True).data)


class TeacherResultDetailView(TeacherContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request, pk: int):
        result = (
            Result.objects
            .select_related("student", "passage")
            .prefetch_related("question_answers__question")
            .filter(pk=pk)
            .first()
        )
        if result is None:
            raise NotFound("존재하지 않는 성적입니다.")
        return Response({"result": ResultDetailSerializer(result).data})


class UpdateGradingView(TeacherContextMixin, APIView):
    """
    PATCH /api/teacher/results/{id}/update-grading
    {item_index, question_index, is_correct}

    {id} 는 시험지 결과(ExamResult) id
    """
    permission_classes = [IsAuthenticated, IsTeacher]

    def patch(self, request, pk: int):
        serializer = RegradeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        outcome = update_grading(exam_result_id=pk, **serializer.validated_data)
        logger.info(
            "regrade by teacher=%s exam_result=%s score=%s",
            self.ctx.teacher.id, pk, outcome.score,
        )
        return Response({
            "message": "채점이 수정되었습니다.",
            "success": True,
            "score": outcome.score,
            "wrong_count": outcome.wrong_count,
            "total_questions": outcome.total_questions,
        })


class ResultExportView(TeacherContextMixin, APIView):
    """GET /api/teacher/results/export (목록과 같은 필터)"""
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        qs = filter_results(ResultQuery.from_params(request.query_params))
        qs = qs.annotate(question_count=Count("question_answers"))

        wb = build_results_workbook(qs)
        return workbook_response(wb, export_filename(self.ctx.now.date()))
