import pytest
from rest_framework.exceptions import NotFound

from apps.core.context import require_role
from apps.core.models import Role
from apps.domains.results.models import ExamResult, WrongAnswer
from apps.domains.results.services.grading_service import submit_exam
from apps.domains.results.services.regrade_service import update_grading

pytestmark = pytest.mark.django_db


@pytest.fixture
def all_wrong_result(student, make_exam):
    """2 문항 그룹 / 3 문제, 전부 오답으로 제출된 결과"""
    ctx = require_role(student.user, Role.STUDENT)
    exam = make_exam()
    out = submit_exam(ctx, exam, answers=[
        {"item_index": 0, "question_index": 0, "answer": ["2"]},
    ], elapsed_time=10)
    return ExamResult.objects.get(pk=out["result_id"])


def _wrong_count(exam_result):
    return WrongAnswer.objects.filter(exam_result=exam_result).count()


class TestUpdateGrading:
    def test_submission_starts_with_all_wrong(self, all_wrong_result):
        assert all_wrong_result.score == 0
        assert _wrong_count(all_wrong_result) == 3

    def test_mark_one_correct_gives_33(self, all_wrong_result):
        outcome = update_grading(
            exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=True,
        )

        assert outcome.wrong_count == 2
        assert outcome.total_questions == 3
        assert outcome.score == 33
        all_wrong_result.refresh_from_db()
        assert all_wrong_result.score == 33

    def test_idempotent(self, all_wrong_result):
        first = update_grading(
            exam_result_id=all_wrong_result.id, item_index=1, question_index=0, is_correct=True,
        )
        second = update_grading(
            exam_result_id=all_wrong_result.id, item_index=1, question_index=0, is_correct=True,
        )
        assert first == second

        again_wrong = update_grading(
            exam_result_id=all_wrong_result.id, item_index=1, question_index=0, is_correct=False,
        )
        twice_wrong = update_grading(
            exam_result_id=all_wrong_result.id, item_index=1, question_index=0, is_correct=False,
        )
        assert again_wrong == twice_wrong
        assert _wrong_count(all_wrong_result) == 3

    def test_score_matches_wrong_count_after_any_sequence(self, all_wrong_result):
        steps = [(0, 0, True), (0, 1, True), (0, 0, False), (1, 0, True), (0, 1, False)]
        for item, question, ok in steps:
            outcome = update_grading(
                exam_result_id=all_wrong_result.id,
                item_index=item,
                question_index=question,
                is_correct=ok,
            )
            wrong = _wrong_count(all_wrong_result)
            assert outcome.wrong_count == wrong
            assert outcome.score == round((3 - wrong) / 3 * 100)

    def test_recreated_wrong_answer_keeps_student_answer(self, all_wrong_result):
        update_grading(exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=True)
        update_grading(exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=False)

        wa = WrongAnswer.objects.get(exam_result=all_wrong_result, item_index=0, question_index=0)
        assert wa.student_answer == "2"
        assert wa.correct_answer == "1"
        assert wa.question_text == "Q1"

    @pytest.mark.parametrize("item, question", [(5, 0), (0, 7)])
    def test_out_of_range_is_not_found(self, all_wrong_result, item, question):
        with pytest.raises(NotFound):
            update_grading(
                exam_result_id=all_wrong_result.id,
                item_index=item,
                question_index=question,
                is_correct=True,
            )

    def test_failed_score_save_rolls_back_wrong_answer_delete(self, all_wrong_result, monkeypatch):
        def broken_save(self, *args, **kwargs):
            raise RuntimeError("db down")

        monkeypatch.setattr(ExamResult, "save", broken_save)

        with pytest.raises(RuntimeError):
            update_grading(
                exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=True,
            )

        assert _wrong_count(all_wrong_result) == 3
        assert ExamResult.objects.get(pk=all_wrong_result.pk).score == 0

    def test_failed_score_save_rolls_back_wrong_answer_create(self, all_wrong_result, monkeypatch):
        update_grading(exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=True)

        def broken_save(self, *args, **kwargs):
            raise RuntimeError("db down")

        monkeypatch.setattr(ExamResult, "save", broken_save)

        with pytest.raises(RuntimeError):
            update_grading(
                exam_result_id=all_wrong_result.id, item_index=0, question_index=0, is_correct=False,
            )

        assert _wrong_count(all_wrong_result) == 2
        assert not WrongAnswer.objects.filter(
            exam_result=all_wrong_result, item_index=0, question_index=0,
        ).exists()
        assert ExamResult.objects.get(pk=all_wrong_result.pk).score == 33

    def test_missing_result_is_not_found(self):
        with pytest.raises(NotFound):
            update_grading(exam_result_id=999999, item_index=0, question_index=0, is_correct=True)


class TestUpdateGradingApi:
    def test_patch(self, teacher_client, all_wrong_result):
        res = teacher_client.patch(
            f"/api/teacher/results/{all_wrong_result.id}/update-grading",
            {"item_index": 0, "question_index": 0, "is_correct": True},
            format="json",
        )

        assert res.status_code == 200
        assert res.data == {
            "message": "채점이 수정되었습니다.",
            "success": True,
            "score": 33,
            "wrong_count": 2,
            "total_questions": 3,
        }

    @pytest.mark.parametrize("payload", [
        {"item_index": "0", "question_index": 0, "is_correct": True},
        {"item_index": 0, "question_index": 0, "is_correct": "true"},
        {"item_index": 0, "question_index": 0},
        {"item_index": True, "question_index": 0, "is_correct": True},
    ])
    def test_invalid_body_is_400(self, teacher_client, all_wrong_result, payload):
        res = teacher_client.patch(
            f"/api/teacher/results/{all_wrong_result.id}/update-grading",
            payload,
            format="json",
        )

        assert res.status_code == 400
        assert res.data == {"error": "잘못된 요청입니다."}
