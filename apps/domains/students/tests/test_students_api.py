import pytest
from django.contrib.auth import get_user_model

from apps.domains.students.models import Student
from apps.domains.students.services import build_student_id

pytestmark = pytest.mark.django_db

URL = "/api/teacher/students"


def test_build_student_id_pads_each_part():
    assert build_student_id(3, 2, 1) == "030201"
    assert build_student_id(1, 12, 30) == "011230"


class TestStudentCrud:
    def test_create_student_creates_user(self, teacher_client):
        res = teacher_client.post(URL, {
            "name": "이영희",
            "grade": 2,
            "class_no": 3,
            "number": 7,
            "password": "pw12345",
        }, format="json")

        assert res.status_code == 201
        assert res.data["student"]["student_id"] == "020307"
        assert res.data["student"]["school_level"] == "고등"

        student = Student.objects.get(student_id="020307")
        assert student.user.username == "020307"
        assert student.user.check_password("pw12345")

    def test_duplicate_student_id_is_400(self, teacher_client, make_student):
        make_student(grade=2, class_no=3, number=7)

        res = teacher_client.post(URL, {
            "name": "중복",
            "grade": 2,
            "class_no": 3,
            "number": 7,
            "password": "pw",
        }, format="json")

        assert res.status_code == 400
        assert "이미 등록된 학번" in res.data["error"]

    def test_missing_required_field_is_400(self, teacher_client):
        res = teacher_client.post(URL, {"name": "누락"}, format="json")
        assert res.status_code == 400
        assert set(res.data) == {"error"}

    def test_list_filters_by_grade(self, teacher_client, make_student):
        make_student(grade=1, class_no=1, number=1, name="일학년")
        make_student(grade=2, class_no=1, number=1, name="이학년")

        res = teacher_client.get(URL, {"grade": 2})

        assert res.status_code == 200
        assert [s["name"] for s in res.data["students"]] == ["이학년"]

    def test_retrieve_includes_recent_exam_results(self, teacher_client, student):
        res = teacher_client.get(f"{URL}/{student.id}")

        assert res.status_code == 200
        assert res.data["user"]["username"] == "student001"
        assert res.data["exam_results"] == []

    def test_update_keeps_student_number(self, teacher_client, student):
        res = teacher_client.put(f"{URL}/{student.id}", {
            "name": "홍길순",
            "school_level": "중등",
            "grade": 1,
        }, format="json")

        assert res.status_code == 200
        student.refresh_from_db()
        assert student.name == "홍길순"
        assert student.school_level == "중등"
        assert student.grade == 3
        assert student.user.name == "홍길순"

    def test_update_rejects_unknown_school_level(self, teacher_client, student):
        res = teacher_client.put(f"{URL}/{student.id}", {
            "name": "홍길동",
            "school_level": "초등",
        }, format="json")

        assert res.status_code == 400
        assert res.data["error"] == "올바른 학교급을 선택해주세요."

    def test_delete_removes_user(self, teacher_client, student):
        user_id = student.user_id

        res = teacher_client.delete(f"{URL}/{student.id}")

        assert res.status_code == 200
        assert not Student.objects.filter(pk=student.pk).exists()
        assert not get_user_model().objects.filter(pk=user_id).exists()

    def test_missing_student_is_404(self, teacher_client):
        res = teacher_client.get(f"{URL}/999999")
        assert res.status_code == 404
        assert res.data["error"] == "학생을 찾을 수 없습니다."
