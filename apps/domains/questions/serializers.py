# PATH: apps/domains/questions/serializers.py
from rest_framework import serializers

from apps.domains.questions.models import Question


class PassageBriefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    category = serializers.CharField()
    subcategory = serializers.CharField()
    difficulty = serializers.CharField()


class QuestionSerializer(serializers.ModelSerializer):
    """문제 전체 (정답 포함)"""
    passage_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Question
        fields = [
            "id",
            "passage_id",
            "type",
            "text",
            "options",
            "answers",
            "explanation",
            "wrong_answer_explanations",
            "created_at",
        ]


class GrammarQuestionListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Question
        fields = ["id", "text", "type", "created_at"]


class TeacherQuestionListSerializer(QuestionSerializer):
    passage = PassageBriefSerializer(allow_null=True, read_only=True)
    answer_count = serializers.IntegerField(read_only=True)

    class Meta(QuestionSerializer.Meta):
        fields = QuestionSerializer.Meta.fields + ["passage", "answer_count"]


class TeacherQuestionDetailSerializer(QuestionSerializer):
    passage = PassageBriefSerializer(allow_null=True, read_only=True)
    counts = serializers.SerializerMethodField()

    class Meta(QuestionSerializer.Meta):
        fields = QuestionSerializer.Meta.fields + ["passage", "counts"]

    def get_counts(self, obj):
        return {
            "question_answers": obj.question_answers.count(),
            "wrong_answers": obj.wrong_answers.count(),
        }


class QuestionWriteSerializer(serializers.Serializer):
    """
    문제 등록 / 수정 공용
    - type: 객관식 / 단답형 / 서술형
    - answers: 1개 이상
    - 객관식은 options 필수
    - passage_id 가 있으면 지문이 존재해야 함 (뷰에서 404)
    """
    passage_id = serializers.IntegerField(required=False, allow_null=True)
    type = serializers.ChoiceField(
        choices=Question.Type.values,
        error_messages={"invalid_choice": "올바른 문제 유형을 선택해주세요."},
    )
    text = serializers.CharField(
        error_messages={"blank": "필수 항목을 입력해주세요.", "required": "필수 항목을 입력해주세요."},
    )
    options = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        allow_null=True,
    )
    answers = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        allow_empty=False,
        error_messages={
            "empty": "필수 항목을 입력해주세요.",
            "required": "필수 항목을 입력해주세요.",
        },
    )
    explanation = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    wrong_answer_explanations = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs["type"] == Question.Type.MULTIPLE_CHOICE and not attrs.get("options"):
            raise serializers.ValidationError({"options": "객관식 문제는 선택지를 입력해주세요."})
        return attrs
