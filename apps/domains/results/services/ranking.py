# apps/domains/results/services/ranking.py
"""
학생 순위 (지문 독해 평균 점수 기준)

- 범위: class(같은 학년/반) / grade(같은 학년) / all, 활성 학생만
- 평균: 사사오입 소수 첫째 자리, 응시 0회 학생 제외
- 정렬: 평균 내림차순 → 응시 횟수 내림차순
- 순위: 동점 공동 순위, 다음 순위는 index+1 (1, 1, 3)
- top N 은 이름 비공개, my_rank 에만 이름 포함
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db.models import Avg, Count

from apps.api.common.numbers import round_half_up
from apps.core.context import RequestContext
from apps.domains.students.models import Student

RANKING_TYPES = ("class", "grade", "all")


@dataclass(frozen=True)
class RankedStudent:
    id: int
    name: str
    grade: int
    class_no: int
    number: int
    average_score: float
    total_results: int
    rank: int


def _scope_queryset(student, ranking_type: str):
    qs = Student.objects.filter(is_active=True)
    if ranking_type == "class":
        qs = qs.filter(grade=student.grade, class_no=student.class_no)
    elif ranking_type == "grade":
        qs = qs.filter(grade=student.grade)
    return qs


def assign_ranks(rows: List[dict]) -> List[RankedStudent]:
    """
    rows: {id, name, grade, class_no, number, average_score, total_results}
    정렬 후 경쟁 순위(1, 1, 3) 부여
    """
    ordered = sorted(
        rows,
        key=lambda r: (-r["average_score"], -r["total_results"]),
    )

    ranked: List[RankedStudent] = []
    current_rank = 1
    for index, row in enumerate(ordered):
        if index > 0 and row["average_score"] < ordered[index - 1]["average_score"]:
            current_rank = index + 1
        ranked.append(RankedStudent(rank=current_rank, **row))
    return ranked


def build_ranking(ctx: RequestContext, ranking_type: str) -> Dict[str, Any]:
    student = ctx.student

    qs = (
        _scope_queryset(student, ranking_type)
        .annotate(
            total_results=Count("results"),
            raw_average=Avg("results__score"),
        )
        .filter(total_results__gt=0)
        .values("id", "name", "grade", "class_no", "number", "total_results", "raw_average")
    )

    rows = [
        {
            "id": r["id"],
            "name": r["name"],
            "grade": r["grade"],
            "class_no": r["class_no"],
            "number": r["number"],
            "average_score": round_half_up(r["raw_average"], 1),
            "total_results": r["total_results"],
        }
        for r in qs
    ]
    ranked = assign_ranks(rows)

    top_n = settings.READING_RANKING_TOP_N
    top = [
        {
            "rank": r.rank,
            "grade": r.grade,
            "class_no": r.class_no,
            "number": r.number,
            "average_score": r.average_score,
            "total_results": r.total_results,
            "is_me": r.id == student.id,
        }
        for r in ranked[:top_n]
    ]

    me: Optional[RankedStudent] = next((r for r in ranked if r.id == student.id), None)
    my_rank = None
    if me is not None:
        my_rank = {
            "rank": me.rank,
            "name": me.name,
            "grade": me.grade,
            "class_no": me.class_no,
            "number": me.number,
            "average_score": me.average_score,
            "total_results": me.total_results,
        }

    return {
        "type": ranking_type,
        "total_students": len(ranked),
        "top5": top,
        "my_rank": my_rank,
    }
