from django.apps import AppConfig


class SamplesConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "samples"
    verbose_name = "Rainfall and yield samples"
