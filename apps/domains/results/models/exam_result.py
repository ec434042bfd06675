from __future__ import annotations

from django.db import models
from django.utils import timezone

from apps.api.common.models import BaseModel


class ExamResult(BaseModel):
    """
    시험지 1회 응시 결과

    - score: 정수 0~100 (정답 수 / 전체 문항 수)
    - answers: 학생 답안 스냅샷
        [{"item_index": 0, "question_index": 1, "answer": ["..."]}, ...]
    - 오답은 WrongAnswer(exam_result, item_index, question_index) 로 관리하며
      재채점 시 score 는 WrongAnswer 집합 기준으로 다시 계산한다.
    """

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="exam_results",
    )
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="exam_results",
    )

    score = models.IntegerField(default=0)
    answers = models.JSONField(default=list, blank=True)
    # 초 단위
    total_time = models.PositiveIntegerField(default=0)

    submitted_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "results_exam_result"
        ordering = ["-submitted_at", "-id"]
        indexes = [
            models.Index(fields=["exam", "score"], name="results_exam_score_idx"),
        ]

    def __str__(self):
        return f"ExamResult(exam={self.exam_id}, student={self.student_id}, score={self.score})"

    def find_answer(self, item_index: int, question_index: int):
        for a in self.answers or []:
            if not isinstance(a, dict):
                continue
            if a.get("item_index") == item_index and a.get("question_index") == question_index:
                return a
        return None
