import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Passage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("category", models.CharField(db_index=True, max_length=50)),
                ("subcategory", models.CharField(max_length=50)),
                ("difficulty", models.CharField(max_length=20)),
                ("content_blocks", models.JSONField(default=list)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="AssignedPassage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("target_grade", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("target_class", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("due_date", models.DateTimeField(blank=True, null=True)),
                ("assigned_to", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="assigned_passages", to="students.student")),
                ("passage", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assignments", to="passages.passage")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
