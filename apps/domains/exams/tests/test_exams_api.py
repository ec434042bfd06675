import pytest
from django.utils import timezone

from apps.domains.exams.models import AssignedExam, Exam
from apps.domains.results.models import ExamResult, WrongAnswer

pytestmark = pytest.mark.django_db

TEACHER_URL = "/api/teacher/exams"

VALID_EXAM = {
    "title": "중간 점검",
    "category": "문학",
    "target_grade": 2,
    "items": [
        {"passage": "시", "questions": [{"text": "화자는?", "type": "단답형", "answers": ["나"]}]},
    ],
}


class TestTeacherExams:
    def test_create(self, teacher_client):
        res = teacher_client.post(TEACHER_URL, VALID_EXAM, format="json")

        assert res.status_code == 201
        exam = Exam.objects.get()
        assert exam.target_school == "고등"
        assert exam.exam_type == Exam.ExamType.ASSIGNED
        assert res.data["exam"]["total_questions"] == 1

    @pytest.mark.parametrize("payload, message", [
        ({"category": "수학"}, "올바른 영역을 선택해주세요."),
        ({"items": []}, "필수 항목을 입력해주세요."),
        ({"items": [{"passage": "p", "questions": []}]}, "1번 문항 그룹에 질문이 없습니다."),
        (
            {"items": [{"passage": "p", "questions": [{"text": "q", "answers": []}]}]},
            "1번 문항 그룹의 1번 질문이 유효하지 않습니다.",
        ),
        ({"exam_type": "HOMEWORK"}, "올바른 시험 유형을 선택해주세요."),
        (
            {"items": [{"passage": "p", "questions": [{"text": "q", "type": "OX", "answers": ["O"]}]}]},
            "1번 문항 그룹의 1번 질문 유형이 올바르지 않습니다.",
        ),
        (
            {"items": [
                {"passage": "p", "questions": [{"text": "q", "type": "단답형", "answers": ["a"]}]},
                {"passage": "p", "questions": [{"text": "q", "answers": ["a"]}]},
            ]},
            "2번 문항 그룹의 1번 질문 유형이 올바르지 않습니다.",
        ),
    ])
    def test_create_validation(self, teacher_client, payload, message):
        res = teacher_client.post(TEACHER_URL, dict(VALID_EXAM, **payload), format="json")

        assert res.status_code == 400
        assert res.data["error"] == message

    def test_list_paginated_with_filters(self, teacher_client, make_exam):
        make_exam(title="비문학 1")
        make_exam(title="문학 1", category=Exam.Category.LITERATURE)

        res = teacher_client.get(TEACHER_URL, {"category": "문학"})

        assert res.status_code == 200
        assert [e["title"] for e in res.data["results"]] == ["문학 1"]
        assert res.data["pagination"]["total"] == 1

    def test_update_and_delete(self, teacher_client, make_exam):
        exam = make_exam()

        res = teacher_client.put(f"{TEACHER_URL}/{exam.id}", VALID_EXAM, format="json")
        assert res.status_code == 200
        exam.refresh_from_db()
        assert exam.title == "중간 점검"

        res = teacher_client.delete(f"{TEACHER_URL}/{exam.id}")
        assert res.status_code == 200
        assert not Exam.objects.exists()

    def test_missing_exam_is_404(self, teacher_client):
        res = teacher_client.get(f"{TEACHER_URL}/999999")
        assert res.status_code == 404
        assert res.data["error"] == "시험지를 찾을 수 없습니다."


class TestAssignAndStatus:
    def test_assign_upserts_due_date(self, teacher_client, make_exam, make_student):
        exam = make_exam()
        a = make_student(number=1)
        b = make_student(number=2)
        url = f"{TEACHER_URL}/{exam.id}/assign"

        res = teacher_client.post(url, {
            "student_ids": [a.id, b.id],
            "due_date": "2026-03-01T00:00:00Z",
        }, format="json")
        assert res.status_code == 200
        assert res.data["count"] == 2

        teacher_client.post(url, {
            "student_ids": [a.id],
            "due_date": "2026-04-01T00:00:00Z",
        }, format="json")

        assert AssignedExam.objects.filter(exam=exam).count() == 2
        assert AssignedExam.objects.get(exam=exam, student=a).due_date.month == 4

        listed = teacher_client.get(url)
        assert [row["student"]["number"] for row in listed.data["assignments"]] == [1, 2]

    def test_assign_unknown_student_is_400(self, teacher_client, make_exam, student):
        exam = make_exam()

        res = teacher_client.post(f"{TEACHER_URL}/{exam.id}/assign", {
            "student_ids": [student.id, 999999],
            "due_date": "2026-03-01T00:00:00Z",
        }, format="json")

        assert res.status_code == 400
        assert res.data["error"] == "일부 학생을 찾을 수 없습니다."
        assert not AssignedExam.objects.exists()

    def test_assign_requires_students(self, teacher_client, make_exam):
        exam = make_exam()

        res = teacher_client.post(f"{TEACHER_URL}/{exam.id}/assign", {
            "student_ids": [],
            "due_date": "2026-03-01T00:00:00Z",
        }, format="json")

        assert res.status_code == 400
        assert res.data["error"] == "배정할 학생을 선택해주세요."

    def test_status(self, teacher_client, make_exam, make_student):
        exam = make_exam()
        done = make_student(number=1)
        todo = make_student(number=2)
        for s in (done, todo):
            AssignedExam.objects.create(exam=exam, student=s, due_date=timezone.now())
        ExamResult.objects.create(exam=exam, student=done, score=100, answers=[])

        res = teacher_client.get(f"{TEACHER_URL}/{exam.id}/status")

        assert res.status_code == 200
        assert res.data["statistics"] == {
            "total_assigned": 2,
            "completed_count": 1,
            "incompleted_count": 1,
            "completion_rate": 50,
        }
        assert [s["is_completed"] for s in res.data["students"]] == [True, False]


class TestStudentExams:
    def test_sheet_hides_answers(self, student_client, make_exam):
        exam = make_exam()

        res = student_client.get(f"/api/student/exams/{exam.id}")

        assert res.status_code == 200
        question = res.data["exam"]["items"][0]["questions"][0]
        assert set(question) == {"text", "type", "options"}

    def test_submit_grades_and_records_wrong_answers(self, student_client, student, make_exam):
        exam = make_exam()

        res = student_client.post(f"/api/student/exams/{exam.id}/submit", {
            "answers": [
                {"item_index": 0, "question_index": 0, "answer": ["1"]},
                {"item_index": 0, "question_index": 1, "answer": [" 산 소 "]},
                {"item_index": 1, "question_index": 0, "answer": ["모름"]},
            ],
            "elapsed_time": 120,
        }, format="json")

        assert res.status_code == 200
        assert res.data["correct_count"] == 2
        assert res.data["total_questions"] == 3
        assert res.data["score"] == 67

        wrong = WrongAnswer.objects.get(student=student)
        assert (wrong.item_index, wrong.question_index) == (1, 0)
        assert wrong.correct_answer == "빛 에너지"
        assert wrong.category == exam.category

    def test_submit_multiple_choice_is_not_trimmed(self, student_client, student, make_exam):
        exam = make_exam()

        res = student_client.post(f"/api/student/exams/{exam.id}/submit", {
            "answers": [{"item_index": 0, "question_index": 0, "answer": [" 1"]}],
        }, format="json")

        assert res.status_code == 200
        assert res.data["correct_count"] == 0
        assert WrongAnswer.objects.get(student=student, item_index=0, question_index=0).student_answer == " 1"

    def test_submit_twice_is_400(self, student_client, make_exam):
        exam = make_exam()
        url = f"/api/student/exams/{exam.id}/submit"
        student_client.post(url, {"answers": []}, format="json")

        res = student_client.post(url, {"answers": []}, format="json")

        assert res.status_code == 400
        assert res.data["error"] == "이미 완료한 시험입니다."

    def test_sheet_after_submit_is_400(self, student_client, make_exam):
        exam = make_exam()
        student_client.post(f"/api/student/exams/{exam.id}/submit", {"answers": []}, format="json")

        res = student_client.get(f"/api/student/exams/{exam.id}")

        assert res.status_code == 400

    def test_submit_requires_answer_list(self, student_client, make_exam):
        exam = make_exam()

        res = student_client.post(f"/api/student/exams/{exam.id}/submit", {"answers": "x"}, format="json")

        assert res.status_code == 400
        assert res.data["error"] == "답안이 올바르지 않습니다."

    def test_public_lists(self, student_client, make_exam):
        make_exam(title="자습", exam_type=Exam.ExamType.SELF_STUDY, is_public=True)
        make_exam(title="비공개 자습", exam_type=Exam.ExamType.SELF_STUDY, is_public=False)
        make_exam(title="문법", exam_type=Exam.ExamType.GRAMMAR, is_public=True,
                  category=Exam.Category.GRAMMAR)

        self_study = student_client.get("/api/student/exams/self-study")
        grammar = student_client.get("/api/student/exams/grammar")

        assert [e["title"] for e in self_study.data["exams"]] == ["자습"]
        assert [e["title"] for e in grammar.data["exams"]] == ["문법"]
