import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Exam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("category", models.CharField(choices=[("비문학", "비문학"), ("문학", "문학"), ("문법", "문법")], max_length=10)),
                ("target_school", models.CharField(choices=[("중등", "중등"), ("고등", "고등")], default="고등", max_length=10)),
                ("target_grade", models.PositiveSmallIntegerField()),
                ("target_class", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("exam_type", models.CharField(choices=[("SELF_STUDY", "자습"), ("ASSIGNED", "배정"), ("GRAMMAR", "문법")], default="ASSIGNED", max_length=20)),
                ("is_public", models.BooleanField(default=False)),
                ("items", models.JSONField(default=list)),
            ],
            options={
                "db_table": "exams_exam",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="AssignedExam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("due_date", models.DateTimeField()),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assigned_exams", to="exams.exam")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assigned_exams", to="students.student")),
            ],
            options={
                "db_table": "exams_assigned_exam",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.AddConstraint(
            model_name="assignedexam",
            constraint=models.UniqueConstraint(fields=("exam", "student"), name="uniq_assigned_exam_student"),
        ),
    ]
