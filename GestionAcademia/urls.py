from django.contrib import admin
from django.urls import path, include

from usuarios import views as usuarios_views
from tablero import views as tablero_views

urlpatterns = [
    # Tablero principal
    path("", tablero_views.home, name="home"),

    # Autenticación
    path("cuentas/login/", usuarios_views.login_view, name="login"),
    path("cuentas/logout/", usuarios_views.logout_view, name="logout"),

    # Apps
    path("usuarios/", include("usuarios.urls")),
    path("roles/", include(("roles.urls", "roles"), namespace="roles")),
    path("alumnos/", include("alumnos.urls")),
    path("cursos/", include("cursos.urls")),
    path("asistencia/", include("asistencia.urls")),
    path("recibos/", include("recibos.urls")),
    path("tablero/", include("tablero.urls")),
    path("configuracion/", include("configuracion.urls")),
    path("validaciones/", include("validaciones.urls")),

    # Admin de Django
    path("admin/", admin.site.urls),
]
