# PATH: apps/domains/results/serializers/wrong_answer.py
from rest_framework import serializers

from apps.domains.passages.serializers import PassageSummarySerializer
from apps.domains.results.models import WrongAnswer
from apps.domains.results.services.wrong_answer_service import category_of


class WrongAnswerSerializer(serializers.ModelSerializer):
    category = serializers.SerializerMethodField()
    passage = serializers.SerializerMethodField()
    exam = serializers.SerializerMethodField()

    class Meta:
        model = WrongAnswer
        fields = [
            "id",
            "question_id",
            "result_id",
            "exam_result_id",
            "item_index",
            "question_index",
            "question_text",
            "question_type",
            "student_answer",
            "correct_answer",
            "explanation",
            "category",
            "is_reviewed",
            "reviewed_at",
            "created_at",
            "passage",
            "exam",
        ]

    def get_category(self, obj):
        return category_of(obj)

    def get_passage(self, obj):
        passage = obj.question.passage if obj.question_id else None
        return PassageSummarySerializer(passage).data if passage else None

    def get_exam(self, obj):
        if not obj.exam_result_id:
            return None
        exam = obj.exam_result.exam
        return {"id": exam.id, "title": exam.title, "category": exam.category}


class WrongAnswerDetailSerializer(WrongAnswerSerializer):
    """복습 화면: 원 문제의 선택지 / 오답 해설 포함"""
    options = serializers.SerializerMethodField()
    wrong_answer_explanations = serializers.SerializerMethodField()

    class Meta(WrongAnswerSerializer.Meta):
        fields = WrongAnswerSerializer.Meta.fields + ["options", "wrong_answer_explanations"]

    def _exam_question(self, obj):
        if not obj.exam_result_id:
            return None
        items = obj.exam_result.exam.items or []
        if obj.item_index is None or obj.item_index >= len(items):
            return None
        questions = items[obj.item_index].get("questions") or []
        if obj.question_index is None or obj.question_index >= len(questions):
            return None
        return questions[obj.question_index]

    def get_options(self, obj):
        if obj.question_id:
            return obj.question.options
        q = self._exam_question(obj)
        return (q or {}).get("options")

    def get_wrong_answer_explanations(self, obj):
        return obj.question.wrong_answer_explanations if obj.question_id else None
