from django.contrib import admin

from .models import RegistroAsistencia


@admin.register(RegistroAsistencia)
class RegistroAsistenciaAdmin(admin.ModelAdmin):
    list_display = ("clase", "alumno", "asistio", "retraso", "falta_justificada", "estado")
    list_filter = ("estado", "asistio", "falta_justificada")
