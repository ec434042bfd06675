from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission


class Role(models.TextChoices):
    STUDENT = "STUDENT", "학생"
    TEACHER = "TEACHER", "교사"


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - username = 로그인 아이디 (교사는 teacher_id 와 동일)
    - role 로 학생 / 교사 구분
    """

    name = models.CharField(max_length=50, blank=True, null=True)
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.STUDENT,
        db_index=True,
    )

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username
