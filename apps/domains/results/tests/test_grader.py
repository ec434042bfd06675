import pytest

from apps.domains.results.services import grader
from apps.domains.results.services.grader import (
    FREE_RESPONSE,
    MULTIPLE_CHOICE,
    SHORT_ANSWER,
    check_exam_answer,
    is_correct,
    is_paragraph_correct,
    similarity,
)


class TestSimilarity:
    @pytest.mark.parametrize("a, c", [
        ("산소", "산소"),
        ("  Photosynthesis ", "photosynthesis"),
        ("", ""),
    ])
    def test_identity_after_normalising(self, a, c):
        assert similarity(a, c) == 1.0

    def test_substring_either_direction(self):
        assert similarity("빛 에너지를 이용", "빛 에너지") == 0.7
        assert similarity("빛", "빛 에너지") == 0.7

    def test_token_overlap_ratio(self):
        # 2 of 4 submitted tokens overlap, longer side has 4 tokens
        assert similarity("the cat sat down", "a cat sat") == 0.5

    def test_no_overlap_is_zero(self):
        assert similarity("사과 바나나", "포도 딸기") == 0

    def test_blank_submission_counts_as_substring(self):
        assert similarity("", "산소") == 0.7
        assert similarity("   ", "산소") == 0.7
        assert similarity(None, "산소") == 0.7
        assert similarity("산소", "") == 0.7


class TestIsCorrect:
    def test_multiple_choice_is_exact_first_answer(self):
        assert is_correct(MULTIPLE_CHOICE, ["B", "C"], "B")
        assert not is_correct(MULTIPLE_CHOICE, ["B", "C"], "C")
        assert not is_correct(MULTIPLE_CHOICE, ["B"], "b")

    def test_short_answer_boundary_is_inclusive(self):
        # 9 of 10 tokens overlap: exactly 0.9
        assert similarity("a b c d e f g h i j", "a b c d e f g h i z") == 0.9
        assert is_correct(SHORT_ANSWER, ["a b c d e f g h i z"], "a b c d e f g h i j")

    def test_short_answer_threshold(self):
        assert is_correct(SHORT_ANSWER, ["드시다", "잡수시다"], " 잡수시다 ")
        # substring only reaches 0.7 < 0.9
        assert not is_correct(SHORT_ANSWER, ["빛 에너지"], "빛")

    def test_free_response_boundary_is_inclusive(self):
        assert is_correct(FREE_RESPONSE, ["빛 에너지"], "빛")
        assert not is_correct(FREE_RESPONSE, ["a b c d"], "a x y z")

    def test_free_response_uses_best_accepted_answer(self):
        assert is_correct(FREE_RESPONSE, ["전혀 다른 답", "식물은 빛을 이용한다"], "식물은 빛을 이용한다")

    def test_unknown_type_is_incorrect(self):
        assert not is_correct("OX", ["O"], "O")

    def test_paragraph_uses_free_response_threshold(self):
        assert is_paragraph_correct("시의 화자는 나", "시의 화자")
        assert not is_paragraph_correct("사과 바나나", "시의 화자")

    def test_blank_answer_passes_free_response_and_paragraph(self):
        assert is_correct(FREE_RESPONSE, ["산소"], "")
        assert is_paragraph_correct("", "시의 화자")
        # 0.7 은 단답형 기준 0.9 에 못 미친다
        assert not is_correct(SHORT_ANSWER, ["산소"], "")

    def test_thresholds_come_from_settings(self, settings):
        settings.READING_SIMILARITY_FREE_RESPONSE = 0.8
        assert not grader.is_correct(FREE_RESPONSE, ["빛 에너지"], "빛")


class TestExamAnswerCheck:
    def test_multiple_choice_is_multiset_equality(self):
        assert check_exam_answer(MULTIPLE_CHOICE, ["1", "3"], ["3", "1"])
        assert not check_exam_answer(MULTIPLE_CHOICE, ["1", "3"], ["1"])

    def test_text_answer_ignores_case_and_whitespace(self):
        assert check_exam_answer(SHORT_ANSWER, ["Light Energy"], ["light  energy"])
        assert check_exam_answer(FREE_RESPONSE, ["산소"], [" 산 소"])

    def test_empty_submission_is_incorrect(self):
        assert not check_exam_answer(SHORT_ANSWER, [""], [])
