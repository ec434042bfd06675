# PATH: apps/domains/exams/services/assignment.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.api.common.numbers import ratio_percent
from apps.domains.exams.models import AssignedExam, Exam
from apps.domains.exams.serializers.assignment import AssignStudentSerializer
from apps.domains.results.models import ExamResult
from apps.domains.students.models import Student

logger = logging.getLogger(__name__)

STUDENT_ORDER = ("student__school_level", "student__grade", "student__class_no", "student__number")


@transaction.atomic
def assign_exam(exam: Exam, student_ids: List[int], due_date) -> int:
    """
    시험지 배정 (이미 배정된 학생은 마감일만 갱신)
    - 없는 학생이 하나라도 있으면 전체 실패
    """
    found = set(Student.objects.filter(id__in=student_ids).values_list("id", flat=True))
    if len(found) != len(student_ids):
        raise ValidationError("일부 학생을 찾을 수 없습니다.")

    for student_id in student_ids:
        AssignedExam.objects.update_or_create(
            exam=exam,
            student_id=student_id,
            defaults={"due_date": due_date},
        )

    logger.info("exam assigned exam=%s students=%s", exam.id, len(student_ids))
    return len(student_ids)


def list_assignments(exam: Exam) -> List[Dict[str, Any]]:
    rows = (
        AssignedExam.objects
        .filter(exam=exam)
        .select_related("student")
        .order_by(*STUDENT_ORDER)
    )
    return [
        {
            "id": a.id,
            "due_date": a.due_date,
            "created_at": a.created_at,
            "student": AssignStudentSerializer(a.student).data,
        }
        for a in rows
    ]


def build_exam_status(exam: Exam) -> Dict[str, Any]:
    """
    배정 학생별 응시 여부 + 통계
    """
    assignments = list(
        AssignedExam.objects
        .filter(exam=exam)
        .select_related("student")
        .order_by(*STUDENT_ORDER[1:])
    )
    results = {
        r.student_id: r
        for r in ExamResult.objects.filter(
            exam=exam,
            student_id__in=[a.student_id for a in assignments],
        )
    }

    students = []
    for a in assignments:
        result = results.get(a.student_id)
        students.append({
            "assignment_id": a.id,
            "due_date": a.due_date,
            "student": AssignStudentSerializer(a.student).data,
            "is_completed": result is not None,
            "result": (
                {"id": result.id, "score": result.score, "submitted_at": result.submitted_at}
                if result else None
            ),
        })

    total = len(students)
    completed = sum(1 for s in students if s["is_completed"])

    return {
        "exam": {
            "id": exam.id,
            "title": exam.title,
            "category": exam.category,
            "target_school": exam.target_school,
            "target_grade": exam.target_grade,
        },
        "statistics": {
            "total_assigned": total,
            "completed_count": completed,
            "incompleted_count": total - completed,
            "completion_rate": ratio_percent(completed, total),
        },
        "students": students,
    }
