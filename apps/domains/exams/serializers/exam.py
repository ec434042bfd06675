# PATH: apps/domains/exams/serializers/exam.py
from rest_framework import serializers

from apps.domains.exams.models import Exam
from apps.domains.questions.models import Question

REQUIRED_MESSAGE = "필수 항목을 입력해주세요."


class ExamSerializer(serializers.ModelSerializer):
    """교사용 (정답 포함). result_count / assigned_count 는 annotate 값"""
    result_count = serializers.IntegerField(read_only=True, default=0)
    assigned_count = serializers.IntegerField(read_only=True, default=0)
    total_questions = serializers.IntegerField(read_only=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "title",
            "category",
            "target_school",
            "target_grade",
            "target_class",
            "exam_type",
            "is_public",
            "items",
            "total_questions",
            "result_count",
            "assigned_count",
            "created_at",
            "updated_at",
        ]


class ExamWriteSerializer(serializers.Serializer):
    """
    시험지 등록 / 수정 공용

    items: [{"passage": str, "questions": [{"text", "type", "options", "answers", "explanation"}]}]
    - 문항 그룹 1개 이상, 그룹마다 질문 1개 이상
    - 질문은 text 와 answers(1개 이상) 필수
    - 질문 type 은 객관식 / 단답형 / 서술형 중 하나
    """
    title = serializers.CharField(error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE})
    category = serializers.ChoiceField(
        choices=Exam.Category.values,
        error_messages={
            "required": REQUIRED_MESSAGE,
            "invalid_choice": "올바른 영역을 선택해주세요.",
        },
    )
    target_school = serializers.ChoiceField(
        choices=[c[0] for c in Exam.TARGET_SCHOOL_CHOICES],
        required=False,
        error_messages={"invalid_choice": "올바른 학교급을 선택해주세요."},
    )
    target_grade = serializers.IntegerField(
        min_value=1,
        error_messages={"required": REQUIRED_MESSAGE, "null": REQUIRED_MESSAGE},
    )
    target_class = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    exam_type = serializers.ChoiceField(
        choices=Exam.ExamType.values,
        required=False,
        error_messages={"invalid_choice": "올바른 시험 유형을 선택해주세요."},
    )
    is_public = serializers.BooleanField(required=False)
    items = serializers.ListField(
        child=serializers.DictField(),
        allow_empty=False,
        error_messages={"required": REQUIRED_MESSAGE, "empty": REQUIRED_MESSAGE},
    )

    def validate_items(self, items):
        for i, item in enumerate(items, start=1):
            questions = item.get("questions")
            if not isinstance(questions, list) or not questions:
                raise serializers.ValidationError(f"{i}번 문항 그룹에 질문이 없습니다.")
            for j, q in enumerate(questions, start=1):
                answers = q.get("answers") if isinstance(q, dict) else None
                if not isinstance(q, dict) or not q.get("text") or not isinstance(answers, list) or not answers:
                    raise serializers.ValidationError(
                        f"{i}번 문항 그룹의 {j}번 질문이 유효하지 않습니다."
                    )
                if q.get("type") not in Question.Type.values:
                    raise serializers.ValidationError(
                        f"{i}번 문항 그룹의 {j}번 질문 유형이 올바르지 않습니다."
                    )
        return items

    def save_to(self, exam: Exam) -> Exam:
        data = dict(self.validated_data)
        data["target_class"] = data.get("target_class") or None
        for field, value in data.items():
            setattr(exam, field, value)
        exam.save()
        return exam


class StudentExamListSerializer(serializers.ModelSerializer):
    result_count = serializers.IntegerField(read_only=True, default=0)
    total_questions = serializers.IntegerField(read_only=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "title",
            "category",
            "target_school",
            "target_grade",
            "exam_type",
            "total_questions",
            "result_count",
            "created_at",
        ]


class StudentExamSheetSerializer(serializers.ModelSerializer):
    """응시용 시험지: 정답 / 해설 제외"""
    items = serializers.SerializerMethodField()

    class Meta:
        model = Exam
        fields = ["id", "title", "category", "target_school", "target_grade", "items"]

    def get_items(self, obj):
        return [
            {
                "passage": item.get("passage"),
                "questions": [
                    {
                        "text": q.get("text"),
                        "type": q.get("type"),
                        "options": q.get("options") or [],
                    }
                    for q in (item.get("questions") or [])
                ],
            }
            for item in (obj.items or [])
        ]
