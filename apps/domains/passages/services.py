# PATH: apps/domains/passages/services.py
from __future__ import annotations

from typing import Any, Dict, List

from django.db.models import Count, Q

from apps.api.common.numbers import ratio_percent
from apps.core.context import RequestContext
from apps.domains.results.models import Result

from .models import AssignedPassage, Passage
from .serializers import StudentPassageListSerializer


def assignments_for(student):
    """
    개인 배정 + 학년/반 배정 (target_class 가 없으면 학년 전체)
    """
    return (
        AssignedPassage.objects
        .filter(
            Q(assigned_to=student)
            | (
                Q(assigned_to__isnull=True, target_grade=student.grade)
                & (Q(target_class=student.class_no) | Q(target_class__isnull=True))
            )
        )
        .select_related("passage")
        .annotate(question_count=Count("passage__questions"))
        .order_by("-created_at", "-id")
    )


def build_student_assignments(ctx: RequestContext) -> Dict[str, Any]:
    """
    완료 여부: 배정 이후 제출한 Result 중 가장 최근 것
    """
    rows: List[Dict[str, Any]] = []
    for ap in assignments_for(ctx.student):
        latest = (
            Result.objects
            .filter(
                student=ctx.student,
                passage_id=ap.passage_id,
                submitted_at__gte=ap.created_at,
            )
            .order_by("-submitted_at", "-id")
            .first()
        )
        ap.passage.question_count = ap.question_count
        rows.append({
            "id": ap.id,
            "passage_id": ap.passage_id,
            "passage": StudentPassageListSerializer(ap.passage).data,
            "due_date": ap.due_date,
            "created_at": ap.created_at,
            "is_completed": latest is not None,
            "completed_at": latest.submitted_at if latest else None,
            "score": latest.score if latest else None,
        })

    total = len(rows)
    completed = sum(1 for r in rows if r["is_completed"])
    overdue = sum(
        1 for r in rows
        if not r["is_completed"] and r["due_date"] and r["due_date"] < ctx.now
    )

    return {
        "assignments": rows,
        "stats": {
            "total": total,
            "completed": completed,
            "pending": total - completed,
            "overdue": overdue,
            "completion_rate": ratio_percent(completed, total),
        },
    }


def passage_with_counts():
    return Passage.objects.annotate(
        question_count=Count("questions", distinct=True),
        result_count=Count("results", distinct=True),
    )
