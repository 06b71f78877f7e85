from django.apps import AppConfig


class ValidacionesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "validaciones"
    verbose_name = "Validaciones"
