# PATH: apps/domains/questions/views.py
from django.db.models import Count
from django.shortcuts import get_object_or_404

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.common.pagination import TeacherListPagination
from apps.core.context import StudentContextMixin, TeacherContextMixin
from apps.core.permissions import IsStudent, IsTeacher
from apps.domains.results.serializers.submission import GrammarSubmitSerializer
from apps.domains.results.services.grading_service import grade_grammar_question

from .filters import QuestionFilter
from .models import Question
from .serializers import (
    GrammarQuestionListSerializer,
    QuestionSerializer,
    QuestionWriteSerializer,
    TeacherQuestionDetailSerializer,
    TeacherQuestionListSerializer,
)
from .services import recent_answer_stats, save_question


# =========================================================
# 교사: 문제 관리
# =========================================================

class TeacherQuestionListCreateView(TeacherContextMixin, ListAPIView):
    """
    GET  /api/teacher/questions?page&limit&search&passage_id&type
    POST /api/teacher/questions
    """
    permission_classes = [IsAuthenticated, IsTeacher]
    serializer_class = TeacherQuestionListSerializer
    pagination_class = TeacherListPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = QuestionFilter

    def get_queryset(self):
        return (
            Question.objects
            .select_related("passage")
            .annotate(answer_count=Count("question_answers"))
            .order_by("-created_at", "-id")
        )

    def post(self, request):
        serializer = QuestionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        question = save_question(serializer.validated_data)
        return Response(
            {"question": QuestionSerializer(question).data},
            status=status.HTTP_201_CREATED,
        )


class TeacherQuestionDetailView(TeacherContextMixin, APIView):
    """
    GET / PUT / DELETE /api/teacher/questions/{id}
    """
    permission_classes = [IsAuthenticated, IsTeacher]

    def _get(self, pk):
        question = Question.objects.select_related("passage").filter(pk=pk).first()
        if question is None:
            raise NotFound("문제를 찾을 수 없습니다.")
        return question

    def get(self, request, pk: int):
        question = self._get(pk)
        recent_answers, stats = recent_answer_stats(question)
        return Response({
            "question": TeacherQuestionDetailSerializer(question).data,
            "recent_answers": recent_answers,
            "stats": stats,
        })

    def put(self, request, pk: int):
        question = self._get(pk)
        serializer = QuestionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        question = save_question(serializer.validated_data, instance=question)
        return Response({"question": QuestionSerializer(question).data})

    def delete(self, request, pk: int):
        self._get(pk).delete()
        return Response({"message": "문제가 삭제되었습니다."})


# =========================================================
# 학생: 문법 / 개념 문제 (지문 없는 독립 문제)
# =========================================================

class GrammarQuestionListView(StudentContextMixin, APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = Question.objects.filter(passage__isnull=True).order_by("-created_at", "-id")
        return Response({"questions": GrammarQuestionListSerializer(qs, many=True).data})


class GrammarQuestionDetailView(StudentContextMixin, APIView):
    """
    GET  /api/student/grammar/questions/{id}
    POST /api/student/grammar/questions/{id}  {answer}
    """
    permission_classes = [IsAuthenticated, IsStudent]

    def _get(self, pk):
        return get_object_or_404(Question, pk=pk, passage__isnull=True)

    def get(self, request, pk: int):
        return Response({"question": QuestionSerializer(self._get(pk)).data})

    def post(self, request, pk: int):
        question = self._get(pk)
        serializer = GrammarSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(grade_grammar_question(self.ctx, question, serializer.validated_data["answer"]))
