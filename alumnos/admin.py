from django.contrib import admin

from .models import Alumno, Tutor


class TutorInline(admin.TabularInline):
    model = Tutor
    extra = 0
    max_num = 2


@admin.register(Alumno)
class AlumnoAdmin(admin.ModelAdmin):
    list_display = ("apellidos", "nombre", "dni", "tipo_pago", "activo")
    list_filter = ("activo", "tipo_pago", "es_menor")
    search_fields = ("nombre", "apellidos", "dni", "email")
    inlines = [TutorInline]
