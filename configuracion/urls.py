from django.urls import path
from . import views

app_name = "configuracion"

urlpatterns = [
    path("", views.perfil_academia, name="perfil"),
    path("backend/", views.conexion_baas, name="conexion_baas"),
]
