"""
URLs de la app Usuarios.
========================

.. module:: usuarios.urls
   :synopsis: Enrutamiento de vistas del módulo de usuarios.

Incluye la gestión de usuarios del back office y el cambio de tema.
Las rutas de login y logout se publican en ``GestionAcademia.urls``.
"""

from django.urls import path
from . import views

app_name = "usuarios"

urlpatterns = [
    path("", views.listar_usuarios, name="listar_usuarios"),
    path("nuevo/", views.crear_usuario, name="crear_usuario"),
    path("tema/", views.cambiar_tema, name="cambiar_tema"),
]
