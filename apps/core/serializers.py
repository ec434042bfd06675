# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


class MeSerializer(serializers.ModelSerializer):
    """
    현재 로그인 사용자 요약
    - 학생이면 학번 / 학년 / 반 / 번호 포함
    - 교사면 teacher_id 포함
    """
    student_id = serializers.SerializerMethodField()
    teacher_id = serializers.SerializerMethodField()
    school_level = serializers.SerializerMethodField()
    grade = serializers.SerializerMethodField()
    class_no = serializers.SerializerMethodField()
    number = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "role",
            "student_id",
            "teacher_id",
            "school_level",
            "grade",
            "class_no",
            "number",
        ]

    def _student(self, obj):
        return getattr(obj, "student_profile", None)

    def get_student_id(self, obj):
        s = self._student(obj)
        return s.student_id if s else None

    def get_teacher_id(self, obj):
        t = getattr(obj, "teacher_profile", None)
        return t.teacher_id if t else None

    def get_school_level(self, obj):
        s = self._student(obj)
        return s.school_level if s else None

    def get_grade(self, obj):
        s = self._student(obj)
        return s.grade if s else None

    def get_class_no(self, obj):
        s = self._student(obj)
        return s.class_no if s else None

    def get_number(self, obj):
        s = self._student(obj)
        return s.number if s else None
