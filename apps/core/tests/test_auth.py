import pytest

from apps.core.context import require_role
from apps.core.models import Role

pytestmark = pytest.mark.django_db

LOGIN_URL = "/api/auth/login"


class TestLogin:
    def test_teacher_login_returns_tokens_and_role(self, api_client, teacher):
        res = api_client.post(LOGIN_URL, {
            "user_type": "teacher",
            "user_id": "teacher001",
            "password": "password123",
        }, format="json")

        assert res.status_code == 200
        assert res.data["role"] == Role.TEACHER
        assert res.data["access"]
        assert res.data["refresh"]

    def test_student_login_requires_matching_student_id(self, api_client, student):
        ok = api_client.post(LOGIN_URL, {
            "user_type": "student",
            "user_id": "student001",
            "student_id": "030101",
            "password": "password123",
        }, format="json")
        assert ok.status_code == 200
        assert ok.data["role"] == Role.STUDENT

        wrong = api_client.post(LOGIN_URL, {
            "user_type": "student",
            "user_id": "student001",
            "student_id": "030102",
            "password": "password123",
        }, format="json")
        assert wrong.status_code == 401
        assert "error" in wrong.data

    def test_inactive_student_cannot_login(self, api_client, student):
        student.is_active = False
        student.save()

        res = api_client.post(LOGIN_URL, {
            "user_type": "student",
            "user_id": "student001",
            "student_id": "030101",
            "password": "password123",
        }, format="json")
        assert res.status_code == 401

    def test_wrong_password(self, api_client, teacher):
        res = api_client.post(LOGIN_URL, {
            "user_type": "teacher",
            "user_id": "teacher001",
            "password": "nope",
        }, format="json")
        assert res.status_code == 401
        assert res.data == {"error": "로그인 아이디 또는 비밀번호가 올바르지 않습니다."}

    def test_access_token_authenticates_me(self, api_client, teacher):
        tokens = api_client.post(LOGIN_URL, {
            "user_type": "teacher",
            "user_id": "teacher001",
            "password": "password123",
        }, format="json").data

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        res = api_client.get("/api/auth/me")

        assert res.status_code == 200
        assert res.data["teacher_id"] == "teacher001"
        assert res.data["student_id"] is None


class TestRoleChecks:
    def test_unauthenticated_is_401(self, api_client):
        res = api_client.get("/api/teacher/students")
        assert res.status_code == 401
        assert "error" in res.data

    def test_student_on_teacher_route_is_403(self, student_client):
        res = student_client.get("/api/teacher/students")
        assert res.status_code == 403

    def test_teacher_on_student_route_is_403(self, teacher_client):
        res = teacher_client.get("/api/student/passages")
        assert res.status_code == 403

    def test_require_role_builds_context(self, student):
        ctx = require_role(student.user, Role.STUDENT)
        assert ctx.student == student
        assert ctx.teacher is None
        assert ctx.role == Role.STUDENT


def test_health_check(api_client):
    res = api_client.get("/healthz")
    assert res.status_code == 200
