# apps/domains/results/services/wrong_answer_service.py
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from rest_framework.exceptions import NotFound

from apps.core.context import RequestContext
from apps.domains.results.models import WrongAnswer

logger = logging.getLogger(__name__)

UNCATEGORIZED = "기타"
FREQUENT_CATEGORY_LIMIT = 3


# ======================================================
# Request DTO
# ======================================================
@dataclass(frozen=True)
class WrongAnswerQuery:
    """
    오답노트 조회 파라미터
    - category: 지문/시험지 영역 (없는 오답은 "기타")
    - is_reviewed: None 이면 전체
    """
    category: Optional[str] = None
    is_reviewed: Optional[bool] = None

    @classmethod
    def from_params(cls, params) -> "WrongAnswerQuery":
        raw = params.get("is_reviewed")
        is_reviewed = None
        if raw not in (None, ""):
            is_reviewed = str(raw).lower() == "true"
        return cls(
            category=(params.get("category") or "").strip() or None,
            is_reviewed=is_reviewed,
        )


def category_of(wa: WrongAnswer) -> str:
    if wa.category:
        return wa.category
    passage = wa.question.passage if wa.question_id and wa.question else None
    return passage.category if passage else UNCATEGORIZED


# ======================================================
# Public API
# ======================================================
def list_wrong_answers_for_student(
    ctx: RequestContext,
    q: WrongAnswerQuery,
) -> Tuple[List[WrongAnswer], Dict[str, Any]]:
    """
    반환: (오답 목록, 통계)
    """
    qs = (
        WrongAnswer.objects
        .filter(student=ctx.student)
        .select_related("question__passage", "exam_result__exam")
        .order_by("-created_at", "-id")
    )
    if q.is_reviewed is not None:
        qs = qs.filter(is_reviewed=q.is_reviewed)

    rows = list(qs)
    if q.category:
        rows = [wa for wa in rows if category_of(wa) == q.category]

    category_stats = Counter(category_of(wa) for wa in rows)
    reviewed = sum(1 for wa in rows if wa.is_reviewed)

    stats = {
        "total_wrong": len(rows),
        "reviewed_count": reviewed,
        "unreviewed_count": len(rows) - reviewed,
        "frequent_categories": [
            {"category": cat, "count": count}
            for cat, count in category_stats.most_common(FREQUENT_CATEGORY_LIMIT)
        ],
        "category_stats": dict(category_stats),
    }
    return rows, stats


def get_wrong_answer_for_student(ctx: RequestContext, wrong_answer_id: int) -> WrongAnswer:
    wa = (
        WrongAnswer.objects
        .select_related("question__passage", "exam_result__exam")
        .filter(pk=wrong_answer_id, student=ctx.student)
        .first()
    )
    if wa is None:
        raise NotFound("오답을 찾을 수 없습니다.")
    return wa


def mark_review(ctx: RequestContext, wa: WrongAnswer, *, is_correct: bool) -> WrongAnswer:
    """복습에서 맞힌 경우에만 복습 완료 처리"""
    if is_correct:
        wa.is_reviewed = True
        wa.reviewed_at = ctx.now
        wa.save(update_fields=["is_reviewed", "reviewed_at", "updated_at"])
        logger.info("wrong answer reviewed id=%s student=%s", wa.id, ctx.student.id)
    return wa
