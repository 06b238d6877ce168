from django.apps import AppConfig


class CorecodeConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.corecode"

    def ready(self):
        """Import signals when the app is ready"""
        import apps.corecode.signals  # noqa: F401
