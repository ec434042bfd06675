# PATH: apps/domains/exams/serializers/submission.py
from rest_framework import serializers

INVALID_ANSWERS = "답안이 올바르지 않습니다."


class ExamAnswerSerializer(serializers.Serializer):
    item_index = serializers.IntegerField(min_value=0)
    question_index = serializers.IntegerField(min_value=0)
    answer = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        default=list,
    )


class ExamSubmitSerializer(serializers.Serializer):
    answers = ExamAnswerSerializer(
        many=True,
        error_messages={
            "required": INVALID_ANSWERS,
            "null": INVALID_ANSWERS,
            "not_a_list": INVALID_ANSWERS,
        },
    )
    elapsed_time = serializers.IntegerField(min_value=0, required=False, default=0)

    def validate_answers(self, value):
        return [dict(a) for a in value]
