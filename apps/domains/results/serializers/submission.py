# PATH: apps/domains/results/serializers/submission.py
from rest_framework import serializers

INVALID_REQUEST = "잘못된 요청입니다."
INVALID_ANSWER = "답안이 올바르지 않습니다."


class PassageSubmitSerializer(serializers.Serializer):
    """
    지문 독해 제출
    - paragraph_answers: 문단 순서대로 요약 답안
    - question_answers: {question_id: 답안}
    """
    passage_id = serializers.IntegerField(
        error_messages={"required": "지문을 선택해주세요.", "invalid": "지문을 선택해주세요."},
    )
    reading_time = serializers.IntegerField(min_value=0, required=False, default=0)
    paragraph_answers = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        default=list,
    )
    question_answers = serializers.DictField(
        child=serializers.CharField(allow_blank=True, allow_null=True, trim_whitespace=False),
        required=False,
        default=dict,
    )


class StrictIntegerField(serializers.IntegerField):
    """JSON 숫자만 허용 ("1" 같은 문자열, true/false 거부)"""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid")
        return data


class StrictCharField(serializers.CharField):
    """문자열만 허용 (숫자를 문자열로 바꾸지 않는다)"""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


_strict_errors = {
    "required": INVALID_REQUEST,
    "invalid": INVALID_REQUEST,
    "null": INVALID_REQUEST,
    "min_value": INVALID_REQUEST,
}


class RegradeSerializer(serializers.Serializer):
    item_index = StrictIntegerField(min_value=0, error_messages=_strict_errors)
    question_index = StrictIntegerField(min_value=0, error_messages=_strict_errors)
    is_correct = StrictBooleanField(error_messages=_strict_errors)


class ReviewSerializer(serializers.Serializer):
    is_correct = serializers.BooleanField(required=False, default=False)
    student_answer = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class GrammarSubmitSerializer(serializers.Serializer):
    """
    문법 문제 제출
    - 객관식은 정확히 비교하므로 앞뒤 공백을 자르지 않는다
    """
    answer = StrictCharField(
        allow_blank=True,
        allow_null=True,
        required=False,
        default="",
        trim_whitespace=False,
        error_messages={"invalid": INVALID_ANSWER},
    )
