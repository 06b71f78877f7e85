from django.apps import AppConfig


class RecibosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "recibos"
    verbose_name = "Recibos y facturas"
