import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("passages", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("type", models.CharField(choices=[("객관식", "객관식"), ("단답형", "단답형"), ("서술형", "서술형")], max_length=10)),
                ("text", models.TextField()),
                ("options", models.JSONField(blank=True, null=True)),
                ("answers", models.JSONField(default=list)),
                ("explanation", models.TextField(blank=True, null=True)),
                ("wrong_answer_explanations", models.JSONField(blank=True, null=True)),
                ("passage", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="passages.passage")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
