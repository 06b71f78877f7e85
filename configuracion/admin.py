from django.contrib import admin

from .models import PerfilAcademia


@admin.register(PerfilAcademia)
class PerfilAcademiaAdmin(admin.ModelAdmin):
    list_display = ("nombre_publico", "nif", "modulo_cumpleanos")

    def has_add_permission(self, request):
        return not PerfilAcademia.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
