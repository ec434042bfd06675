from django.db import models
from apps.api.common.models import BaseModel


class AssignedExam(BaseModel):
    """
    시험지 ↔ 학생 배정 (학생당 1건, 재배정 시 마감일만 갱신)
    """

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="assigned_exams",
    )
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="assigned_exams",
    )
    due_date = models.DateTimeField()

    class Meta:
        db_table = "exams_assigned_exam"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["exam", "student"],
                name="uniq_assigned_exam_student",
            )
        ]

    def __str__(self):
        return f"{self.exam_id} → {self.student_id}"
