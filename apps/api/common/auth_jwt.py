# JWT 발급 시 역할(교사/학생)별 로그인 규칙 적용.
# - 교사: teacher_id + 비밀번호
# - 학생: 로그인 아이디 + 학번 + 비밀번호, 활성 학생만
from __future__ import annotations

import logging

from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.models import Role
from apps.domains.students.models import Student
from apps.domains.teachers.models import Teacher

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "로그인 아이디 또는 비밀번호가 올바르지 않습니다."


def _issue_tokens(user) -> dict:
    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
        "role": user.role,
    }


class RoleLoginSerializer(serializers.Serializer):
    user_type = serializers.ChoiceField(choices=["student", "teacher"])
    user_id = serializers.CharField()
    password = serializers.CharField(write_only=True)
    student_id = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        user_id = attrs["user_id"].strip()
        password = attrs["password"]

        if attrs["user_type"] == "teacher":
            teacher = (
                Teacher.objects
                .select_related("user")
                .filter(teacher_id=user_id)
                .first()
            )
            user = teacher.user if teacher else None
            if user is None or user.role != Role.TEACHER:
                raise AuthenticationFailed(LOGIN_FAILED_MESSAGE)
        else:
            student_id = (attrs.get("student_id") or "").strip()
            if not student_id:
                raise serializers.ValidationError({"student_id": "학번을 입력해주세요."})

            student = (
                Student.objects
                .select_related("user")
                .filter(student_id=student_id)
                .first()
            )
            if student is None or not student.is_active:
                raise AuthenticationFailed(LOGIN_FAILED_MESSAGE)

            user = student.user
            # 로그인 아이디와 학번이 같은 계정을 가리켜야 함
            if user.username != user_id:
                raise AuthenticationFailed(LOGIN_FAILED_MESSAGE)

        if not user.is_active or not user.check_password(password):
            raise AuthenticationFailed(LOGIN_FAILED_MESSAGE)

        attrs["user"] = user
        return attrs


class RoleLoginView(APIView):
    """
    POST /api/auth/login
    body: {user_type, user_id, password, student_id?}
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get_authenticate_header(self, request):
        # 인증 클래스가 없어도 로그인 실패는 401 로 응답
        return 'Bearer realm="api"'

    def post(self, request):
        serializer = RoleLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        logger.info("login success user_id=%s role=%s", user.id, user.role)
        return Response(_issue_tokens(user))
