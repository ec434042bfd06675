# PATH: apps/domains/passages/serializers.py
from rest_framework import serializers

from apps.domains.questions.serializers import QuestionSerializer
from .models import Passage

REQUIRED_MESSAGE = "필수 필드가 누락되었습니다."
BLOCK_CONTENT_MESSAGE = "모든 문단의 내용을 입력해주세요."


class PassageSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Passage
        fields = ["id", "title", "category", "subcategory", "difficulty"]


class PassageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Passage
        fields = [
            "id",
            "title",
            "category",
            "subcategory",
            "difficulty",
            "content_blocks",
            "created_at",
            "updated_at",
        ]


class PassageListSerializer(PassageSummarySerializer):
    """question_count / result_count 는 annotate 값"""
    question_count = serializers.IntegerField(read_only=True)
    result_count = serializers.IntegerField(read_only=True, required=False)
    created_at = serializers.DateTimeField(read_only=True)

    class Meta(PassageSummarySerializer.Meta):
        fields = PassageSummarySerializer.Meta.fields + [
            "question_count",
            "result_count",
            "created_at",
        ]


class StudentPassageListSerializer(PassageSummarySerializer):
    question_count = serializers.IntegerField(read_only=True)

    class Meta(PassageSummarySerializer.Meta):
        fields = PassageSummarySerializer.Meta.fields + ["question_count", "created_at"]


class PassageWithQuestionsSerializer(PassageSerializer):
    questions = serializers.SerializerMethodField()

    class Meta(PassageSerializer.Meta):
        fields = PassageSerializer.Meta.fields + ["questions"]

    def get_questions(self, obj):
        return QuestionSerializer(obj.questions.order_by("id"), many=True).data


class ContentBlockSerializer(serializers.Serializer):
    """
    문단 블록
    - para 는 항상 필수
    - 등록 시에는 q / a 도 필수 (context["require_qa"])
    """
    para = serializers.CharField(
        error_messages={"required": BLOCK_CONTENT_MESSAGE, "blank": BLOCK_CONTENT_MESSAGE, "null": BLOCK_CONTENT_MESSAGE},
    )
    q = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    a = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    explanation = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        if self.context.get("require_qa") and not (attrs.get("q") and attrs.get("a")):
            raise serializers.ValidationError("모든 문단의 필수 필드(para, q, a)를 입력해주세요.")
        return attrs


class PassageWriteSerializer(serializers.Serializer):
    title = serializers.CharField(error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE})
    category = serializers.CharField(error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE})
    subcategory = serializers.CharField(error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE})
    difficulty = serializers.CharField(error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE})
    content_blocks = ContentBlockSerializer(
        many=True,
        allow_empty=False,
        error_messages={
            "required": REQUIRED_MESSAGE,
            "empty": "최소 1개의 문단이 필요합니다.",
        },
    )

    def validate_content_blocks(self, value):
        return [dict(b) for b in value]

    def save_to(self, passage: Passage) -> Passage:
        for field, value in self.validated_data.items():
            setattr(passage, field, value)
        passage.save()
        return passage
