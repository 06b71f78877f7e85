"""
Vistas de la aplicación **configuracion**.

.. module:: configuracion.views
   :synopsis: Perfil de la academia y conexión con el backend alojado.
"""
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render

from .forms import ConexionBaasForm, PerfilAcademiaForm
from .models import PerfilAcademia
from .services import comprobar_conexion_baas

logger = logging.getLogger(__name__)


@login_required
def perfil_academia(request):
    """
    Edita el perfil único de la academia.

    **Restricciones**
    -----------------
    - Requiere el permiso ``configuracion.access_config_panel``.

    **Template**
    ------------
    - ``configuracion/perfil_academia.html``
    """
    if not request.user.has_perm("configuracion.access_config_panel"):
        return redirect("home")

    perfil = PerfilAcademia.obtener()
    if request.method == "POST":
        form = PerfilAcademiaForm(request.POST, instance=perfil)
        if form.is_valid():
            form.save()
            logger.info("Perfil de la academia actualizado por %s", request.user)
            messages.success(request, "Perfil de la academia actualizado correctamente.")
            return redirect("configuracion:perfil")
    else:
        form = PerfilAcademiaForm(instance=perfil)
    return render(request, "configuracion/perfil_academia.html", {"form": form, "perfil": perfil})


@login_required
def conexion_baas(request):
    """
    Guarda las credenciales del backend y, con ``accion=probar``, comprueba la conexión.

    La comprobación usa los datos enviados en el formulario aunque no se
    guarden, para poder probar antes de confirmar el cambio.
    """
    if not request.user.has_perm("configuracion.access_config_panel"):
        return redirect("home")

    perfil = PerfilAcademia.obtener()
    resultado = None
    if request.method == "POST":
        form = ConexionBaasForm(request.POST, instance=perfil)
        if form.is_valid():
            if request.POST.get("accion") == "probar":
                resultado = comprobar_conexion_baas(
                    form.cleaned_data["baas_url"], form.cleaned_data["baas_clave"]
                )
                if resultado.ok:
                    messages.success(request, resultado.mensaje)
                else:
                    messages.error(request, resultado.mensaje)
            else:
                form.save()
                messages.success(request, "Conexión con el backend guardada.")
                return redirect("configuracion:conexion_baas")
    else:
        form = ConexionBaasForm(instance=perfil)

    return render(request, "configuracion/conexion_baas.html", {"form": form, "resultado": resultado})
