# PATH: apps/domains/results/aggregations/statistics.py
from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db.models import Avg, Case, Count, IntegerField, Value, When
from django.db.models.functions import TruncDate

from apps.api.common.numbers import round_half_up
from apps.core.context import RequestContext
from apps.domains.exams.models import Exam
from apps.domains.passages.models import Passage
from apps.domains.questions.models import Question
from apps.domains.results.models import ExamResult, Result, WrongAnswer
from apps.domains.students.models import Student


def _avg1(v: Optional[float]) -> float:
    return round_half_up(v, 1) if v is not None else 0


def _grouped(qs, keys: Dict[str, str], order_by: List[str]) -> List[Dict[str, Any]]:
    """
    keys: {출력 키: ORM 필드}
    → [{출력 키..., "avg_score", "count"}]
    """
    rows = (
        qs.values(*keys.values())
        .annotate(avg_score=Avg("score"), count=Count("id"))
        .order_by(*order_by)
    )
    out = []
    for r in rows:
        item = {out_key: r[field] for out_key, field in keys.items()}
        item["avg_score"] = _avg1(r["avg_score"])
        item["count"] = r["count"]
        out.append(item)
    return out


def _difficulty_rank():
    """중학교 < 고1-2 < 고3 < 그 외"""
    return Case(
        *[
            When(passage__difficulty=label, then=Value(i))
            for i, label in enumerate(Passage.DIFFICULTY_ORDER)
        ],
        default=Value(len(Passage.DIFFICULTY_ORDER)),
        output_field=IntegerField(),
    )


def build_overview() -> Dict[str, Any]:
    return {
        "total_students": Student.objects.count(),
        "total_passages": Passage.objects.count(),
        "total_questions": Question.objects.count(),
        "total_exams": Exam.objects.count(),
        "total_results": ExamResult.objects.count(),
        "total_wrong_answers": WrongAnswer.objects.count(),
        "avg_score": _avg1(ExamResult.objects.aggregate(v=Avg("score"))["v"]),
    }


def build_recent_trend(ctx: RequestContext) -> List[Dict[str, Any]]:
    since = ctx.now - timedelta(days=settings.READING_TREND_DAYS)
    rows = (
        ExamResult.objects
        .filter(submitted_at__gte=since)
        .annotate(day=TruncDate("submitted_at"))
        .values("day")
        .annotate(avg_score=Avg("score"), count=Count("id"))
        .order_by("day")
    )
    return [
        {
            "date": r["day"].isoformat(),
            "avg_score": _avg1(r["avg_score"]),
            "count": r["count"],
        }
        for r in rows
    ]


def build_statistics(ctx: RequestContext) -> Dict[str, Any]:
    """
    교사 통계 (읽기 전용)

    - 시험지 결과(ExamResult) 기준: grade / class / category / target_grade / recent_trend
    - 지문 풀이(Result) 기준: subcategory / difficulty
    - 평균은 모두 소수 첫째 자리 (사사오입)
    """
    exam_results = ExamResult.objects.all()
    passage_results = Result.objects.all()

    difficulty_rows = (
        passage_results
        .annotate(difficulty_rank=_difficulty_rank())
        .values("passage__difficulty", "difficulty_rank")
        .annotate(avg_score=Avg("score"), count=Count("id"))
        .order_by("difficulty_rank", "passage__difficulty")
    )

    return {
        "overview": build_overview(),
        "grade_stats": _grouped(
            exam_results,
            {"grade": "student__grade"},
            ["student__grade"],
        ),
        "class_stats": _grouped(
            exam_results,
            {"grade": "student__grade", "class_no": "student__class_no"},
            ["student__grade", "student__class_no"],
        ),
        "category_stats": _grouped(
            exam_results,
            {"category": "exam__category"},
            ["exam__category"],
        ),
        "target_grade_stats": _grouped(
            exam_results,
            {"target_school": "exam__target_school", "target_grade": "exam__target_grade"},
            ["exam__target_school", "exam__target_grade"],
        ),
        "subcategory_stats": _grouped(
            passage_results,
            {"subcategory": "passage__subcategory"},
            ["passage__subcategory"],
        ),
        "difficulty_stats": [
            {
                "difficulty": r["passage__difficulty"],
                "avg_score": _avg1(r["avg_score"]),
                "count": r["count"],
            }
            for r in difficulty_rows
        ],
        "recent_trend": build_recent_trend(ctx),
    }
