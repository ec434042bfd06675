import pytest

from apps.domains.results.models import WrongAnswer

pytestmark = pytest.mark.django_db

URL = "/api/student/wrong-answers"


@pytest.fixture
def wrong_answers(student, make_passage, make_question):
    passage_q = make_question(passage=make_passage(category="문학"))
    grammar_q = make_question(passage=None)
    rows = [
        WrongAnswer.objects.create(
            student=student, question=passage_q, question_text="q1",
            student_answer="A", correct_answer="B", category="문학",
        ),
        WrongAnswer.objects.create(
            student=student, question=passage_q, question_text="q1",
            student_answer="C", correct_answer="B", category="문학", is_reviewed=True,
        ),
        WrongAnswer.objects.create(
            student=student, question=grammar_q, question_text="q2",
            student_answer="A", correct_answer="B",
        ),
    ]
    return rows


class TestWrongAnswerList:
    def test_stats(self, student_client, wrong_answers):
        res = student_client.get(URL)

        assert res.status_code == 200
        assert len(res.data["wrong_answers"]) == 3
        assert res.data["stats"]["total_wrong"] == 3
        assert res.data["stats"]["reviewed_count"] == 1
        assert res.data["stats"]["unreviewed_count"] == 2
        assert res.data["stats"]["category_stats"] == {"문학": 2, "기타": 1}
        assert res.data["stats"]["frequent_categories"][0] == {"category": "문학", "count": 2}

    def test_filters(self, student_client, wrong_answers):
        assert len(student_client.get(URL, {"category": "기타"}).data["wrong_answers"]) == 1
        assert len(student_client.get(URL, {"is_reviewed": "false"}).data["wrong_answers"]) == 2

    def test_other_students_rows_are_hidden(self, wrong_answers, make_student, api_client):
        other = make_student(number=5)
        api_client.force_authenticate(user=other.user)

        assert api_client.get(URL).data["wrong_answers"] == []
        res = api_client.get(f"{URL}/{wrong_answers[0].id}")
        assert res.status_code == 404


class TestWrongAnswerReview:
    def test_detail(self, student_client, wrong_answers):
        res = student_client.get(f"{URL}/{wrong_answers[0].id}")

        assert res.status_code == 200
        assert res.data["wrong_answer"]["options"] == ["A", "B", "C"]
        assert res.data["wrong_answer"]["passage"]["category"] == "문학"

    def test_correct_review_marks_reviewed(self, student_client, wrong_answers):
        wa = wrong_answers[0]

        res = student_client.patch(f"{URL}/{wa.id}", {"is_correct": True}, format="json")

        assert res.data == {"message": "복습이 완료되었습니다.", "is_correct": True}
        wa.refresh_from_db()
        assert wa.is_reviewed is True
        assert wa.reviewed_at is not None

    def test_wrong_review_changes_nothing(self, student_client, wrong_answers):
        wa = wrong_answers[0]

        student_client.patch(f"{URL}/{wa.id}", {"is_correct": False}, format="json")

        wa.refresh_from_db()
        assert wa.is_reviewed is False
