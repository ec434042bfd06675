import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("student_id", models.CharField(max_length=6, unique=True)),
                ("name", models.CharField(max_length=50)),
                ("school_level", models.CharField(choices=[("중등", "중등"), ("고등", "고등")], default="고등", max_length=10)),
                ("grade", models.PositiveSmallIntegerField()),
                ("class_no", models.PositiveSmallIntegerField()),
                ("number", models.PositiveSmallIntegerField()),
                ("is_active", models.BooleanField(default=True)),
                ("activation_start_date", models.DateTimeField(blank=True, null=True)),
                ("activation_end_date", models.DateTimeField(blank=True, null=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="student_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["grade", "class_no", "number"],
                "indexes": [models.Index(fields=["grade", "class_no"], name="student_grade_class_idx")],
            },
        ),
    ]
