# roles/views.py
"""
Módulo de vistas para la aplicación **Roles**.

Contiene las vistas para la gestión de roles de usuarios,
incluyendo:
    - Panel de roles con los usuarios del back office.
    - Asignación de roles a un usuario concreto.
"""
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render

from usuarios.models import CustomUser
from .models import Role

logger = logging.getLogger(__name__)


@login_required
def role_panel(request):
    """
    Renderiza el panel de administración de roles.

    Solo accesible si el usuario tiene el permiso `roles.access_roles_panel`.

    Returns
    -------
    HttpResponse
        Página con listado de usuarios y sus roles.
    """
    if not request.user.has_perm("roles.access_roles_panel"):
        return redirect("home")

    usuarios = CustomUser.objects.prefetch_related("roles").order_by("first_name", "last_name")
    context = {
        "usuarios": usuarios,
        "roles": Role.objects.all(),
    }
    return render(request, "roles/role_admin.html", context)


@login_required
def manage_user_roles(request, user_id):
    """
    Gestiona la asignación de roles a un usuario específico.

    Permiso requerido: `usuarios.access_user_management`.

    Parameters
    ----------
    request : HttpRequest
        Objeto de solicitud HTTP.
    user_id : int
        ID del usuario al que se le asignarán roles.

    Returns
    -------
    HttpResponse
        Redirecciona al panel de roles o renderiza formulario de gestión.
    """
    if not request.user.has_perm("usuarios.access_user_management"):
        return redirect("home")

    user_to_manage = get_object_or_404(CustomUser, id=user_id)

    if request.method == "POST":
        selected_role_ids = request.POST.getlist("roles")
        roles = Role.objects.filter(id__in=selected_role_ids)
        user_to_manage.roles.set(roles)

        logger.info(
            "Roles de %s actualizados por %s: %s",
            user_to_manage.email, request.user.email, ", ".join(r.name for r in roles),
        )
        messages.success(request, f"Roles para {user_to_manage.email} actualizados correctamente.")
        return redirect("roles:role-panel")

    context = {
        "user_to_manage": user_to_manage,
        "all_roles": Role.objects.all(),
        "user_roles": user_to_manage.roles.all(),
    }
    return render(request, "roles/manage_user_roles.html", context)
