# roles/urls.py
"""
Rutas URL para la aplicación **Roles**.

Define los endpoints para:
    - Panel de roles.
    - Gestión de roles por usuario.
"""
from django.urls import path
from . import views

app_name = "roles"

urlpatterns = [
    path("", views.role_panel, name="role-panel"),
    path("usuario/<int:user_id>/", views.manage_user_roles, name="manage-user-roles"),
]
