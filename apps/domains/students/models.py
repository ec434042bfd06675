from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Student(TimestampModel):
    # =========================
    # 🔐 로그인 사용자 연결
    # =========================
    # - User 삭제 시 Student 도 함께 삭제
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="student_profile",
    )

    # =========================
    # 기본 정보
    # =========================
    # 학번 GGCCNN (학년 2자리 + 반 2자리 + 번호 2자리)
    student_id = models.CharField(max_length=6, unique=True)
    name = models.CharField(max_length=50)

    # 🔴 중학생 / 고등학생 구분
    SCHOOL_LEVEL_CHOICES = (
        ("중등", "중등"),
        ("고등", "고등"),
    )

    school_level = models.CharField(
        max_length=10,
        choices=SCHOOL_LEVEL_CHOICES,
        default="고등",
    )

    grade = models.PositiveSmallIntegerField()
    class_no = models.PositiveSmallIntegerField()
    number = models.PositiveSmallIntegerField()

    # =========================
    # 이용 기간
    # =========================
    is_active = models.BooleanField(default=True)
    activation_start_date = models.DateTimeField(null=True, blank=True)
    activation_end_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["grade", "class_no", "number"]
        indexes = [
            models.Index(fields=["grade", "class_no"], name="student_grade_class_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.student_id})"
