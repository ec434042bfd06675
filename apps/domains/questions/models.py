# PATH: apps/domains/questions/models.py
from django.db import models

from apps.api.common.models import TimestampModel


class Question(TimestampModel):
    """
    문제
    - passage 가 없으면 독립 문제 (문법 / 개념)
    - answers: 허용 답안 목록 (객관식은 answers[0] 만 정답으로 본다)
    """

    class Type(models.TextChoices):
        MULTIPLE_CHOICE = "객관식", "객관식"
        SHORT_ANSWER = "단답형", "단답형"
        FREE_RESPONSE = "서술형", "서술형"

    passage = models.ForeignKey(
        "passages.Passage",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="questions",
    )

    type = models.CharField(max_length=10, choices=Type.choices)
    text = models.TextField()

    # 객관식 선택지
    options = models.JSONField(null=True, blank=True)
    answers = models.JSONField(default=list)

    explanation = models.TextField(null=True, blank=True)
    # {"선택지": "오답 해설"} 형태
    wrong_answer_explanations = models.JSONField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"[{self.type}] {self.text[:30]}"
