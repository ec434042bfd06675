import pytest

from apps.core.context import require_role
from apps.core.models import Role
from apps.domains.results.models import QuestionAnswer, Result, WrongAnswer
from apps.domains.results.services.grading_service import (
    passage_score,
    submit_passage_reading,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def ctx(student):
    return require_role(student.user, Role.STUDENT)


class TestPassageScore:
    def test_halves(self):
        assert passage_score(1, 2, 1, 1) == 75.0
        assert passage_score(1, 3, 0, 1) == 16.7

    def test_missing_half_carries_full_weight(self):
        assert passage_score(0, 0, 1, 2) == 50.0
        assert passage_score(2, 2, 0, 0) == 100.0
        assert passage_score(0, 0, 0, 0) == 0


class TestSubmitPassageReading:
    def test_multiple_choice_correct_creates_no_wrong_answer(self, ctx, make_passage, make_question):
        passage = make_passage(content_blocks=[{"para": "P1"}])
        question = make_question(passage=passage, answers=["B"])

        out = submit_passage_reading(
            ctx, passage,
            reading_time=30,
            paragraph_answers=[],
            question_answers={str(question.id): "B"},
        )

        qa = QuestionAnswer.objects.get(result_id=out["result_id"])
        assert qa.is_correct is True
        assert out["question_score"] == 1
        assert not WrongAnswer.objects.exists()

    def test_multiple_choice_wrong_creates_one_wrong_answer(self, ctx, make_passage, make_question):
        passage = make_passage(content_blocks=[{"para": "P1"}])
        question = make_question(passage=passage, answers=["B"])

        out = submit_passage_reading(
            ctx, passage,
            reading_time=30,
            paragraph_answers=[],
            question_answers={str(question.id): "A"},
        )

        assert QuestionAnswer.objects.get(result_id=out["result_id"]).is_correct is False
        wrong = WrongAnswer.objects.get()
        assert wrong.correct_answer == "B"
        assert wrong.student_answer == "A"
        assert wrong.result_id == out["result_id"]
        assert wrong.category == passage.category

    def test_score_and_paragraph_snapshot(self, ctx, make_passage, make_question):
        passage = make_passage(content_blocks=[
            {"para": "P1", "q": "요약1", "a": "식물은 빛으로 양분을 만든다"},
            {"para": "P2", "q": "요약2", "a": "산소가 나온다"},
        ])
        q1 = make_question(passage=passage, answers=["B"])
        make_question(passage=passage, type="단답형", options=None, answers=["포도당"])

        out = submit_passage_reading(
            ctx, passage,
            reading_time=95,
            paragraph_answers=["식물은 빛으로 양분을 만든다", "사과"],
            question_answers={str(q1.id): "B"},
        )

        # 문단 1/2, 문제 1/2
        assert out["score"] == 50.0
        assert out["paragraph_score"] == 1

        result = Result.objects.get(pk=out["result_id"])
        assert result.reading_time == 95
        assert [p["is_correct"] for p in result.paragraph_answers] == [True, False]
        assert result.paragraph_answers[1]["answer"] == "사과"

    def test_missing_paragraph_answer_is_graded_as_blank(self, ctx, make_passage):
        passage = make_passage(content_blocks=[
            {"para": "P1", "q": "요약1", "a": "식물은 빛으로 양분을 만든다"},
            {"para": "P2", "q": "요약2", "a": "산소가 나온다"},
        ])

        out = submit_passage_reading(
            ctx, passage,
            reading_time=10,
            paragraph_answers=["사과"],
            question_answers={},
        )

        result = Result.objects.get(pk=out["result_id"])
        assert result.paragraph_answers[1]["answer"] == ""
        # 빈 답안은 포함 관계로 0.7, 서술형 기준을 넘는다
        assert [p["is_correct"] for p in result.paragraph_answers] == [False, True]
        assert out["score"] == 50.0

    def test_repeated_wrong_submission_duplicates_wrong_answers(self, ctx, make_passage, make_question):
        passage = make_passage()
        question = make_question(passage=passage)

        for _ in range(2):
            submit_passage_reading(
                ctx, passage,
                reading_time=10,
                paragraph_answers=[],
                question_answers={str(question.id): "C"},
            )

        assert WrongAnswer.objects.filter(question=question).count() == 2


class TestStudentResultsApi:
    def test_submit_and_list(self, student_client, make_passage, make_question):
        passage = make_passage()
        question = make_question(passage=passage)

        res = student_client.post("/api/student/results", {
            "passage_id": passage.id,
            "reading_time": 60,
            "paragraph_answers": ["식물은 빛으로 양분을 만든다"],
            "question_answers": {str(question.id): "B"},
        }, format="json")
        assert res.status_code == 200
        assert res.data["score"] == 100.0

        listed = student_client.get("/api/student/results")
        assert listed.data["stats"]["total_results"] == 1
        assert listed.data["stats"]["average_score"] == 100.0
        assert listed.data["results"][0]["passage"]["id"] == passage.id

    def test_multiple_choice_answer_is_not_trimmed(self, student_client, make_passage, make_question):
        passage = make_passage(content_blocks=[])
        question = make_question(passage=passage)

        res = student_client.post("/api/student/results", {
            "passage_id": passage.id,
            "question_answers": {str(question.id): " B"},
        }, format="json")

        assert res.status_code == 200
        assert res.data["score"] == 0
        assert QuestionAnswer.objects.get().answer == " B"

    def test_submit_unknown_passage_is_404(self, student_client):
        res = student_client.post("/api/student/results", {"passage_id": 999999}, format="json")
        assert res.status_code == 404

    def test_foreign_result_is_403(self, student_client, make_student, make_passage):
        other = make_student(number=9)
        result = Result.objects.create(student=other, passage=make_passage(), score=10)

        res = student_client.get(f"/api/student/results/{result.id}")

        assert res.status_code == 403
        assert res.data["error"] == "권한이 없습니다."
