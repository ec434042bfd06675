# PATH: apps/domains/results/aggregations/dashboard.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from django.db.models import Avg
from django.utils import timezone

from apps.api.common.numbers import round_half_up
from apps.core.context import RequestContext
from apps.domains.passages.models import Passage
from apps.domains.questions.models import Question
from apps.domains.results.models import Result
from apps.domains.students.models import Student


def build_dashboard_stats() -> Dict[str, Any]:
    """교사 대시보드 카드"""
    avg = Result.objects.aggregate(v=Avg("score"))["v"]
    return {
        "total_students": Student.objects.count(),
        "active_students": Student.objects.filter(is_active=True).count(),
        "total_passages": Passage.objects.count(),
        "total_questions": Question.objects.count(),
        "average_score": round_half_up(avg, 1) if avg else 0,
    }


def time_ago(then: datetime, now: datetime) -> str:
    """
    "방금 전" / "N분 전" / "N시간 전" / "N일 전" / 7일 이상은 "M월 D일"
    """
    seconds = (now - then).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 1:
        return "방금 전"
    if minutes < 60:
        return f"{minutes}분 전"
    if hours < 24:
        return f"{hours}시간 전"
    if days < 7:
        return f"{days}일 전"

    local = timezone.localtime(then)
    return f"{local.month}월 {local.day}일"


def build_recent_activities(ctx: RequestContext, limit: int = 10) -> List[Dict[str, Any]]:
    results = (
        Result.objects
        .select_related("student__user", "passage")
        .order_by("-created_at", "-id")[:limit]
    )
    return [
        {
            "id": r.id,
            "student_name": r.student.user.name or r.student.name,
            "action": "지문 학습 완료",
            "passage_title": r.passage.title,
            "score": r.score,
            "time": time_ago(r.created_at, ctx.now),
            "created_at": r.created_at,
        }
        for r in results
    ]
