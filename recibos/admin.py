from django.contrib import admin

from .models import Factura, Recibo


@admin.register(Recibo)
class ReciboAdmin(admin.ModelAdmin):
    list_display = ("codigo", "fecha", "alumno", "concepto", "importe", "estado", "tipo_pago")
    list_filter = ("estado", "tipo_pago")
    search_fields = ("codigo", "alumno__nombre", "alumno__apellidos")
    date_hierarchy = "fecha"


@admin.register(Factura)
class FacturaAdmin(admin.ModelAdmin):
    list_display = ("tipo", "numero", "fecha", "tercero", "total", "estado")
    list_filter = ("tipo", "estado", "categoria")
    search_fields = ("numero", "tercero", "nif_tercero")
    readonly_fields = ("total",)
