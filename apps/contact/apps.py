from django.apps import AppConfig


class ContactConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.contact"
