from django.apps import AppConfig


class FinanceConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.finance"
