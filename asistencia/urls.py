from django.urls import path
from . import views

app_name = "asistencia"

urlpatterns = [
    path("clase/<int:clase_pk>/", views.pasar_lista, name="pasar_lista"),
    path("alumno/<uuid:alumno_pk>/", views.resumen_alumno, name="resumen_alumno"),
]
