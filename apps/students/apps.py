from django.apps import AppConfig


class StudentsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.students"
