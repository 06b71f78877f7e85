from django.apps import AppConfig


class NavegacionConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "navegacion"
    verbose_name = "Navegación"
