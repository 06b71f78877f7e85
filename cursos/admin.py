from django.contrib import admin

from .models import Aula, Clase, Curso, Inscripcion, Profesor


@admin.register(Profesor)
class ProfesorAdmin(admin.ModelAdmin):
    list_display = ("apellidos", "nombre", "nif", "activo")
    search_fields = ("nombre", "apellidos", "nif")


@admin.register(Aula)
class AulaAdmin(admin.ModelAdmin):
    list_display = ("nombre", "capacidad", "ubicacion", "orden")


@admin.register(Curso)
class CursoAdmin(admin.ModelAdmin):
    list_display = ("nombre", "nivel", "profesor", "aula", "capacidad_maxima", "estado")
    list_filter = ("estado", "modalidad")
    search_fields = ("nombre", "nivel")


@admin.register(Inscripcion)
class InscripcionAdmin(admin.ModelAdmin):
    list_display = ("alumno", "curso", "fecha_inscripcion", "activa", "fecha_baja")
    list_filter = ("activa",)


@admin.register(Clase)
class ClaseAdmin(admin.ModelAdmin):
    list_display = ("curso", "fecha", "hora_inicio", "hora_fin", "profesor", "estado", "es_sustitucion")
    list_filter = ("estado", "es_sustitucion")
    date_hierarchy = "fecha"
