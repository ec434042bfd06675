from django.apps import AppConfig


class PassagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.passages"
    label = "passages"
