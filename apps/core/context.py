# PATH: apps/core/context.py
"""
요청 단위 컨텍스트

역할 검사는 require_role 한 곳에서만 한다.
뷰는 여기서 받은 RequestContext 를 서비스에 그대로 넘긴다.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from django.utils import timezone
from rest_framework.exceptions import NotAuthenticated, NotFound, PermissionDenied

from apps.core.models import Role
from apps.core.permissions import has_role


@dataclass(frozen=True)
class RequestContext:
    user: Any
    role: str
    now: datetime
    student: Optional[Any] = None
    teacher: Optional[Any] = None


def require_role(user, role) -> RequestContext:
    """
    - 미인증: 401
    - 역할 불일치: 403
    - 역할 프로필(Student/Teacher) 없음: 404
    """
    if user is None or not user.is_authenticated:
        raise NotAuthenticated("로그인이 필요합니다.")

    if not has_role(user, role):
        raise PermissionDenied("권한이 없습니다.")

    now = timezone.now()

    if role == Role.STUDENT:
        student = getattr(user, "student_profile", None)
        if student is None:
            raise NotFound("학생 정보를 찾을 수 없습니다.")
        return RequestContext(user=user, role=role, now=now, student=student)

    teacher = getattr(user, "teacher_profile", None)
    if teacher is None:
        raise NotFound("교사 정보를 찾을 수 없습니다.")
    return RequestContext(user=user, role=role, now=now, teacher=teacher)


class RoleContextMixin:
    """
    APIView / ViewSet 공용
    - permission 검사 후 self.ctx 에 RequestContext 를 채운다
    """
    required_role = None

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.ctx = require_role(request.user, self.required_role)


class StudentContextMixin(RoleContextMixin):
    required_role = Role.STUDENT


class TeacherContextMixin(RoleContextMixin):
    required_role = Role.TEACHER
