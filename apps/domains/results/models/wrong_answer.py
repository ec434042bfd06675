from __future__ import annotations

from django.db import models

from apps.api.common.models import BaseModel


class WrongAnswer(BaseModel):
    """
    오답 노트 레코드

    출처는 셋 중 하나:
    - 문법 문제 채점: question
    - 지문 풀이: question + result
    - 시험지: exam_result + item_index + question_index (question 없음)

    시험지 경로는 (exam_result, item_index, question_index) 당 최대 1건을 유지한다.
    문법 / 지문 경로는 중복 제거 없이 오답마다 추가한다.
    """

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="wrong_answers",
    )

    question = models.ForeignKey(
        "questions.Question",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="wrong_answers",
    )
    result = models.ForeignKey(
        "results.Result",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="wrong_answers",
    )
    exam_result = models.ForeignKey(
        "results.ExamResult",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="wrong_answers",
    )
    item_index = models.PositiveIntegerField(null=True, blank=True)
    question_index = models.PositiveIntegerField(null=True, blank=True)

    # 채점 당시 스냅샷
    question_text = models.TextField(blank=True, default="")
    question_type = models.CharField(max_length=10, blank=True, default="")
    student_answer = models.TextField(blank=True, default="")
    correct_answer = models.TextField(blank=True, default="")
    explanation = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=50, null=True, blank=True)

    is_reviewed = models.BooleanField(default=False)
    reviewed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "results_wrong_answer"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(
                fields=["exam_result", "item_index", "question_index"],
                name="results_wrong_exam_pos_idx",
            ),
        ]

    def __str__(self):
        return f"WrongAnswer(student={self.student_id}, q={self.question_id or self.question_index})"
