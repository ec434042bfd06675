from __future__ import annotations

from django.db import models
from django.utils import timezone

from apps.api.common.models import BaseModel


class Result(BaseModel):
    """
    지문 독해 1회 풀이 결과

    - score: 0~100, 소수 첫째 자리
    - paragraph_answers: 문단 요약 채점 스냅샷
        [{"q", "answer", "correct_answer", "is_correct", "explanation"}, ...]
    """

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="results",
    )
    passage = models.ForeignKey(
        "passages.Passage",
        on_delete=models.CASCADE,
        related_name="results",
    )

    # 초 단위
    reading_time = models.PositiveIntegerField(default=0)
    score = models.FloatField(default=0.0)

    paragraph_answers = models.JSONField(default=list, blank=True)

    submitted_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "results_result"
        ordering = ["-submitted_at", "-id"]
        indexes = [
            models.Index(fields=["student", "submitted_at"], name="results_student_sub_idx"),
        ]

    def __str__(self):
        return f"Result(student={self.student_id}, passage={self.passage_id}, score={self.score})"


class QuestionAnswer(models.Model):
    """Result 에 속한 문제별 답안"""

    result = models.ForeignKey(
        Result,
        on_delete=models.CASCADE,
        related_name="question_answers",
    )
    question = models.ForeignKey(
        "questions.Question",
        on_delete=models.CASCADE,
        related_name="question_answers",
    )
    answer = models.TextField(blank=True, default="")
    is_correct = models.BooleanField(default=False)

    class Meta:
        db_table = "results_question_answer"
        ordering = ["id"]
