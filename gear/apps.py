from django.apps import AppConfig


class GearConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gear"
    verbose_name = "Equipment catalog"
