# PATH: conftest.py
"""
공용 pytest fixture

- api_client: 인증 없는 DRF 클라이언트
- teacher / student: 프로필까지 만들어진 계정
- teacher_client / student_client: force_authenticate 된 클라이언트
- make_* : 도메인 객체 팩토리
"""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.core.models import Role
from apps.domains.exams.models import Exam
from apps.domains.passages.models import Passage
from apps.domains.questions.models import Question
from apps.domains.students.services.accounts import create_student_with_user
from apps.domains.teachers.models import Teacher

PASSWORD = "password123"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_teacher(db):
    def _make(teacher_id="teacher001", name="김선생"):
        user = get_user_model().objects.create_user(
            username=teacher_id,
            password=PASSWORD,
            name=name,
            role=Role.TEACHER,
        )
        return Teacher.objects.create(user=user, teacher_id=teacher_id, name=name)
    return _make


@pytest.fixture
def make_student(db):
    def _make(grade=3, class_no=1, number=1, name="홍길동", **extra):
        data = {
            "name": name,
            "grade": grade,
            "class_no": class_no,
            "number": number,
            "password": PASSWORD,
        }
        data.update(extra)
        return create_student_with_user(data)
    return _make


@pytest.fixture
def teacher(make_teacher):
    return make_teacher()


@pytest.fixture
def student(make_student):
    return make_student(user_id="student001")


@pytest.fixture
def teacher_client(teacher):
    client = APIClient()
    client.force_authenticate(user=teacher.user)
    return client


@pytest.fixture
def student_client(student):
    client = APIClient()
    client.force_authenticate(user=student.user)
    return client


@pytest.fixture
def make_passage(db):
    def _make(**kwargs):
        data = {
            "title": "광합성의 원리",
            "category": "비문학",
            "subcategory": "과학",
            "difficulty": "고1-2",
            "content_blocks": [{"para": "P1", "q": "요약", "a": "식물은 빛으로 양분을 만든다"}],
        }
        data.update(kwargs)
        return Passage.objects.create(**data)
    return _make


@pytest.fixture
def make_question(db):
    def _make(passage=None, **kwargs):
        data = {
            "type": Question.Type.MULTIPLE_CHOICE,
            "text": "알맞은 것은?",
            "options": ["A", "B", "C"],
            "answers": ["B"],
            "explanation": "B 가 정답",
        }
        data.update(kwargs)
        return Question.objects.create(passage=passage, **data)
    return _make


@pytest.fixture
def make_exam(db):
    def _make(items=None, **kwargs):
        data = {
            "title": "3월 모의고사",
            "category": Exam.Category.NON_LITERATURE,
            "target_school": "고등",
            "target_grade": 3,
            "items": items if items is not None else [
                {
                    "passage": "지문 1",
                    "questions": [
                        {"text": "Q1", "type": "객관식", "options": ["1", "2"], "answers": ["1"]},
                        {"text": "Q2", "type": "단답형", "options": [], "answers": ["산소"]},
                    ],
                },
                {
                    "passage": "지문 2",
                    "questions": [
                        {"text": "Q3", "type": "서술형", "options": [], "answers": ["빛 에너지"]},
                    ],
                },
            ],
        }
        data.update(kwargs)
        return Exam.objects.create(**data)
    return _make
