# PATH: apps/domains/passages/models.py
from django.db import models

from apps.api.common.models import TimestampModel


class Passage(TimestampModel):
    """
    독해 지문

    content_blocks: 문단 단위 블록 목록 (순서 유지)
        [{"para": 문단, "q": 문단 요약 질문, "a": 모범 답안, "explanation": 해설}, ...]
    """

    # 난이도 정렬 순서 (통계 / 목록 공용)
    DIFFICULTY_ORDER = ("중학교", "고1-2", "고3")

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=50, db_index=True)
    subcategory = models.CharField(max_length=50)
    difficulty = models.CharField(max_length=20)

    content_blocks = models.JSONField(default=list)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title


class AssignedPassage(TimestampModel):
    """
    지문 배정
    - assigned_to 가 있으면 개인 배정
    - 없으면 target_grade / target_class 단위 배정 (target_class 없으면 학년 전체)
    """

    passage = models.ForeignKey(
        Passage,
        on_delete=models.CASCADE,
        related_name="assignments",
    )
    assigned_to = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="assigned_passages",
    )
    target_grade = models.PositiveSmallIntegerField(null=True, blank=True)
    target_class = models.PositiveSmallIntegerField(null=True, blank=True)
    due_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.passage_id} → {self.assigned_to_id or self.target_grade}"
