# PATH: apps/domains/results/serializers/result.py
from rest_framework import serializers

from apps.domains.passages.serializers import PassageSummarySerializer
from apps.domains.questions.serializers import QuestionSerializer
from apps.domains.results.models import QuestionAnswer, Result
from apps.domains.students.models import Student


class ResultStudentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Student
        fields = ["id", "student_id", "name", "grade", "class_no", "number"]


class ResultPassageSerializer(PassageSummarySerializer):
    class Meta(PassageSummarySerializer.Meta):
        fields = PassageSummarySerializer.Meta.fields + ["content_blocks"]


class QuestionAnswerSerializer(serializers.ModelSerializer):
    question = QuestionSerializer(read_only=True)

    class Meta:
        model = QuestionAnswer
        fields = ["id", "answer", "is_correct", "question"]


class ResultListSerializer(serializers.ModelSerializer):
    """목록용. question_count 는 annotate 값"""
    student = ResultStudentSerializer(read_only=True)
    passage = PassageSummarySerializer(read_only=True)
    question_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Result
        fields = [
            "id",
            "score",
            "reading_time",
            "submitted_at",
            "student",
            "passage",
            "question_count",
        ]


class StudentResultListSerializer(serializers.ModelSerializer):
    passage = PassageSummarySerializer(read_only=True)

    class Meta:
        model = Result
        fields = ["id", "score", "reading_time", "submitted_at", "passage"]


class ResultDetailSerializer(serializers.ModelSerializer):
    student = ResultStudentSerializer(read_only=True)
    passage = ResultPassageSerializer(read_only=True)
    question_answers = QuestionAnswerSerializer(many=True, read_only=True)

    class Meta:
        model = Result
        fields = [
            "id",
            "score",
            "reading_time",
            "paragraph_answers",
            "submitted_at",
            "student",
            "passage",
            "question_answers",
        ]
