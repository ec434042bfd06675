from django.db import models
from apps.api.common.models import BaseModel


class Exam(BaseModel):
    """
    시험지

    items: 문항 그룹 목록 (순서 유지)
        [{"passage": 지문 텍스트,
          "questions": [{"text", "type", "options", "answers", "explanation"}, ...]}, ...]
    """

    class Category(models.TextChoices):
        NON_LITERATURE = "비문학", "비문학"
        LITERATURE = "문학", "문학"
        GRAMMAR = "문법", "문법"

    class ExamType(models.TextChoices):
        SELF_STUDY = "SELF_STUDY", "자습"
        ASSIGNED = "ASSIGNED", "배정"
        GRAMMAR = "GRAMMAR", "문법"

    TARGET_SCHOOL_CHOICES = (
        ("중등", "중등"),
        ("고등", "고등"),
    )

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=10, choices=Category.choices)

    target_school = models.CharField(
        max_length=10,
        choices=TARGET_SCHOOL_CHOICES,
        default="고등",
    )
    target_grade = models.PositiveSmallIntegerField()
    target_class = models.PositiveSmallIntegerField(null=True, blank=True)

    exam_type = models.CharField(
        max_length=20,
        choices=ExamType.choices,
        default=ExamType.ASSIGNED,
    )
    is_public = models.BooleanField(default=False)

    items = models.JSONField(default=list)

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title

    @property
    def total_questions(self) -> int:
        return sum(len(item.get("questions") or []) for item in (self.items or []))
