# apps/domains/results/services/result_query.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Dict, Optional

from django.db.models import Avg, Max, Min, Sum, Count
from django.utils import timezone
from django.utils.dateparse import parse_date
from rest_framework.exceptions import ValidationError

from apps.api.common.numbers import round_half_up
from apps.domains.results.models import Result


# ======================================================
# Request DTO
# ======================================================
@dataclass(frozen=True)
class ResultQuery:
    """
    교사 성적 목록 / 엑셀 다운로드 공용 조회 조건

    - end_date 는 해당 날짜 23:59:59.999999 까지 포함
    - sort_by: submitted_at | score
    """
    student_id: Optional[int] = None
    passage_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sort_by: str = "submitted_at"
    sort_order: str = "desc"

    @classmethod
    def from_params(cls, params) -> "ResultQuery":
        return cls(
            student_id=_int_or_none(params.get("student_id"), "student_id"),
            passage_id=_int_or_none(params.get("passage_id"), "passage_id"),
            start_date=_date_or_none(params.get("start_date"), "start_date"),
            end_date=_date_or_none(params.get("end_date"), "end_date"),
            sort_by="score" if params.get("sort_by") == "score" else "submitted_at",
            sort_order="asc" if params.get("sort_order") == "asc" else "desc",
        )


def _int_or_none(v, name):
    if v in (None, ""):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        raise ValidationError({name: "숫자여야 합니다."})


def _date_or_none(v, name):
    if v in (None, ""):
        return None
    d = parse_date(str(v)[:10])
    if d is None:
        raise ValidationError({name: "날짜 형식(YYYY-MM-DD)이 올바르지 않습니다."})
    return d


def _start_of_day(d: date) -> datetime:
    return timezone.make_aware(datetime.combine(d, time.min))


def _end_of_day(d: date) -> datetime:
    return timezone.make_aware(datetime.combine(d, time.max))


def filter_results(q: ResultQuery):
    qs = Result.objects.select_related("student", "passage")

    if q.student_id is not None:
        qs = qs.filter(student_id=q.student_id)
    if q.passage_id is not None:
        qs = qs.filter(passage_id=q.passage_id)
    if q.start_date is not None:
        qs = qs.filter(submitted_at__gte=_start_of_day(q.start_date))
    if q.end_date is not None:
        qs = qs.filter(submitted_at__lte=_end_of_day(q.end_date))

    prefix = "-" if q.sort_order == "desc" else ""
    return qs.order_by(f"{prefix}{q.sort_by}", f"{prefix}id")


# ======================================================
# 학생 본인 성적 요약
# ======================================================
def student_result_stats(qs) -> Dict[str, Any]:
    agg = qs.aggregate(
        total=Count("id"),
        avg=Avg("score"),
        reading=Sum("reading_time"),
        high=Max("score"),
        low=Min("score"),
    )
    return {
        "total_results": agg["total"] or 0,
        "average_score": round_half_up(agg["avg"], 1) if agg["avg"] is not None else 0,
        "total_reading_time": agg["reading"] or 0,
        "highest_score": agg["high"] if agg["high"] is not None else 0,
        "lowest_score": agg["low"] if agg["low"] is not None else 0,
    }
