import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("students", "0001_initial"),
        ("passages", "0001_initial"),
        ("questions", "0001_initial"),
        ("exams", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Result",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("reading_time", models.PositiveIntegerField(default=0)),
                ("score", models.FloatField(default=0.0)),
                ("paragraph_answers", models.JSONField(blank=True, default=list)),
                ("submitted_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("passage", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="results", to="passages.passage")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="results", to="students.student")),
            ],
            options={
                "db_table": "results_result",
                "ordering": ["-submitted_at", "-id"],
                "indexes": [models.Index(fields=["student", "submitted_at"], name="results_student_sub_idx")],
            },
        ),
        migrations.CreateModel(
            name="QuestionAnswer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("answer", models.TextField(blank=True, default="")),
                ("is_correct", models.BooleanField(default=False)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="question_answers", to="questions.question")),
                ("result", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="question_answers", to="results.result")),
            ],
            options={
                "db_table": "results_question_answer",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ExamResult",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("score", models.IntegerField(default=0)),
                ("answers", models.JSONField(blank=True, default=list)),
                ("total_time", models.PositiveIntegerField(default=0)),
                ("submitted_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exam_results", to="exams.exam")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exam_results", to="students.student")),
            ],
            options={
                "db_table": "results_exam_result",
                "ordering": ["-submitted_at", "-id"],
                "indexes": [models.Index(fields=["exam", "score"], name="results_exam_score_idx")],
            },
        ),
        migrations.CreateModel(
            name="WrongAnswer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("item_index", models.PositiveIntegerField(blank=True, null=True)),
                ("question_index", models.PositiveIntegerField(blank=True, null=True)),
                ("question_text", models.TextField(blank=True, default="")),
                ("question_type", models.CharField(blank=True, default="", max_length=10)),
                ("student_answer", models.TextField(blank=True, default="")),
                ("correct_answer", models.TextField(blank=True, default="")),
                ("explanation", models.TextField(blank=True, null=True)),
                ("category", models.CharField(blank=True, max_length=50, null=True)),
                ("is_reviewed", models.BooleanField(default=False)),
                ("reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("exam_result", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="wrong_answers", to="results.examresult")),
                ("question", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="wrong_answers", to="questions.question")),
                ("result", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="wrong_answers", to="results.result")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="wrong_answers", to="students.student")),
            ],
            options={
                "db_table": "results_wrong_answer",
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["exam_result", "item_index", "question_index"], name="results_wrong_exam_pos_idx")],
            },
        ),
    ]
