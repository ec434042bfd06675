# PATH: apps/domains/exams/serializers/assignment.py
from rest_framework import serializers

from apps.domains.students.models import Student


class AssignStudentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Student
        fields = ["id", "student_id", "name", "school_level", "grade", "class_no", "number"]


class ExamAssignSerializer(serializers.Serializer):
    student_ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=False,
        error_messages={
            "required": "배정할 학생을 선택해주세요.",
            "empty": "배정할 학생을 선택해주세요.",
            "not_a_list": "배정할 학생을 선택해주세요.",
        },
    )
    due_date = serializers.DateTimeField(
        error_messages={
            "required": "마감일을 선택해주세요.",
            "null": "마감일을 선택해주세요.",
            "invalid": "마감일 형식이 올바르지 않습니다.",
        },
    )

    def validate_student_ids(self, value):
        # 중복 id 는 한 번만
        return list(dict.fromkeys(value))
