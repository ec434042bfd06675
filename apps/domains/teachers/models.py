from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Teacher(TimestampModel):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="teacher_profile",
    )
    # 로그인 아이디
    teacher_id = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=50)

    class Meta:
        ordering = ["-id"]

    def __str__(self):
        return f"{self.name} ({self.teacher_id})"
