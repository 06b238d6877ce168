from django.apps import AppConfig


class AlumniConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.alumni"
