#apps/core/permissions.py

from rest_framework.permissions import BasePermission

from apps.core.models import Role


def has_role(user, role) -> bool:
    return bool(
        user
        and user.is_authenticated
        and getattr(user, "role", None) == role
    )


class IsStudent(BasePermission):
    """
    학생 전용 Permission
    - 로그인 필수
    - User.role == STUDENT
    """
    message = "학생 계정만 접근할 수 있습니다."

    def has_permission(self, request, view):
        return has_role(request.user, Role.STUDENT)


class IsTeacher(BasePermission):
    """
    교사 전용 Permission
    """
    message = "교사 계정만 접근할 수 있습니다."

    def has_permission(self, request, view):
        return has_role(request.user, Role.TEACHER)
