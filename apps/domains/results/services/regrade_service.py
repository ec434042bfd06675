# apps/domains/results/services/regrade_service.py
"""
교사 재채점 (시험지 문항 1개)

불변식
- (exam_result, item_index, question_index) 의 WrongAnswer 는
  최근 판정이 "오답"일 때만 존재한다 (최대 1건)
- ExamResult.score 는 현재 WrongAnswer 집합 기준으로 다시 계산한다

같은 요청을 반복해도 결과가 같다.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction
from rest_framework.exceptions import NotFound

from apps.api.common.numbers import ratio_percent
from apps.domains.results.models import ExamResult, WrongAnswer
from apps.domains.results.services.grading_service import build_exam_wrong_answer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegradeOutcome:
    score: int
    wrong_count: int
    total_questions: int


@transaction.atomic
def update_grading(
    *,
    exam_result_id: int,
    item_index: int,
    question_index: int,
    is_correct: bool,
) -> RegradeOutcome:
    exam_result = (
        ExamResult.objects
        .select_for_update()
        .filter(pk=exam_result_id)
        .first()
    )
    if exam_result is None:
        raise NotFound("시험 결과를 찾을 수 없습니다.")

    items = exam_result.exam.items or []
    if not (0 <= item_index < len(items)):
        raise NotFound("문제를 찾을 수 없습니다.")
    questions = items[item_index].get("questions") or []
    if not (0 <= question_index < len(questions)):
        raise NotFound("문제를 찾을 수 없습니다.")
    question = questions[question_index]

    existing = WrongAnswer.objects.filter(
        exam_result=exam_result,
        item_index=item_index,
        question_index=question_index,
    )

    if is_correct:
        deleted, _ = existing.delete()
        if deleted:
            logger.info(
                "regrade: wrong answer removed exam_result=%s item=%s question=%s",
                exam_result.id, item_index, question_index,
            )
    elif not existing.exists():
        submitted = exam_result.find_answer(item_index, question_index) or {}
        wa = build_exam_wrong_answer(
            exam_result,
            item_index,
            question_index,
            question,
            submitted.get("answer") or [],
        )
        wa.save()
        logger.info(
            "regrade: wrong answer created id=%s exam_result=%s item=%s question=%s",
            wa.id, exam_result.id, item_index, question_index,
        )

    total = sum(len(item.get("questions") or []) for item in items)
    wrong_count = WrongAnswer.objects.filter(exam_result=exam_result).count()
    score = ratio_percent(max(total - wrong_count, 0), total)

    if score != exam_result.score:
        logger.info(
            "regrade: exam_result=%s score %s -> %s",
            exam_result.id, exam_result.score, score,
        )
    exam_result.score = score
    exam_result.save(update_fields=["score", "updated_at"])

    return RegradeOutcome(score=score, wrong_count=wrong_count, total_questions=total)
