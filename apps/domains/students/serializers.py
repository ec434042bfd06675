from rest_framework import serializers

from apps.domains.students.models import Student
from apps.domains.results.models import ExamResult


# -------------------------------
# Nested
# -------------------------------

class StudentExamResultSerializer(serializers.ModelSerializer):
    exam = serializers.SerializerMethodField()

    class Meta:
        model = ExamResult
        fields = ["id", "score", "total_time", "submitted_at", "exam"]

    def get_exam(self, obj):
        return {
            "id": obj.exam_id,
            "title": obj.exam.title,
            "category": obj.exam.category,
        }


# -------------------------------
# Student
# -------------------------------

class StudentListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Student
        fields = [
            "id",
            "student_id",
            "name",
            "school_level",
            "grade",
            "class_no",
            "number",
            "is_active",
            "activation_start_date",
            "activation_end_date",
            "created_at",
        ]


class StudentDetailSerializer(StudentListSerializer):
    user = serializers.SerializerMethodField()
    exam_results = serializers.SerializerMethodField()

    class Meta(StudentListSerializer.Meta):
        fields = StudentListSerializer.Meta.fields + ["user", "exam_results"]

    def get_user(self, obj):
        return {
            "id": obj.user_id,
            "username": obj.user.username,
            "name": obj.user.name,
            "role": obj.user.role,
            "date_joined": obj.user.date_joined,
        }

    def get_exam_results(self, obj):
        qs = (
            obj.exam_results
            .select_related("exam")
            .order_by("-submitted_at")[:10]
        )
        return StudentExamResultSerializer(qs, many=True).data


class StudentCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)
    grade = serializers.IntegerField(min_value=1, max_value=99)
    class_no = serializers.IntegerField(min_value=1, max_value=99)
    number = serializers.IntegerField(min_value=1, max_value=99)
    password = serializers.CharField(write_only=True)

    user_id = serializers.CharField(required=False, allow_blank=True, max_length=150)
    school_level = serializers.ChoiceField(
        choices=[c[0] for c in Student.SCHOOL_LEVEL_CHOICES],
        required=False,
    )
    is_active = serializers.BooleanField(required=False, default=True)
    activation_start_date = serializers.DateTimeField(required=False, allow_null=True)
    activation_end_date = serializers.DateTimeField(required=False, allow_null=True)


class StudentUpdateSerializer(serializers.Serializer):
    """학번 / 학년 / 반 / 번호는 받지 않는다 (변경 불가)."""
    name = serializers.CharField(max_length=50)
    school_level = serializers.ChoiceField(
        choices=[c[0] for c in Student.SCHOOL_LEVEL_CHOICES],
        error_messages={"invalid_choice": "올바른 학교급을 선택해주세요."},
    )
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
    is_active = serializers.BooleanField(required=False)
    activation_start_date = serializers.DateTimeField(required=False, allow_null=True)
    activation_end_date = serializers.DateTimeField(required=False, allow_null=True)
