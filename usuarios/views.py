import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .forms import UsuarioForm
from .models import CustomUser

logger = logging.getLogger(__name__)


def _destino_seguro(request, url, por_defecto="home"):
    if url and url_has_allowed_host_and_scheme(url, allowed_hosts={request.get_host()}):
        return url
    return por_defecto


# ----------------------------
# Login / logout
# ----------------------------

def login_view(request):
    if request.user.is_authenticated:
        return redirect("home")

    if request.method == "GET":
        return render(request, "registration/login.html", {"next": request.GET.get("next", "")})

    email = (request.POST.get("username") or "").strip().lower()
    password = request.POST.get("password") or ""
    next_url = request.POST.get("next") or request.GET.get("next")

    user = authenticate(request, username=email, password=password)
    if user is None:
        logger.warning("Intento de acceso fallido para %s", email)
        messages.error(request, "Correo o contraseña inválidos.")
        return render(request, "registration/login.html", {"next": next_url or ""}, status=401)

    login(request, user)
    return redirect(_destino_seguro(request, next_url))


def logout_view(request):
    logout(request)
    messages.info(request, "Sesión cerrada correctamente.")
    return redirect("login")


# ----------------------------
# Preferencias
# ----------------------------

@login_required
@require_POST
def cambiar_tema(request):
    """Alterna entre tema claro y oscuro y vuelve a la página de origen."""
    request.user.alternar_tema()
    return redirect(_destino_seguro(request, request.POST.get("next")))


# ----------------------------
# Gestión de usuarios
# ----------------------------

@login_required
def listar_usuarios(request):
    if not request.user.has_perm("usuarios.access_user_management"):
        return redirect("home")

    usuarios = CustomUser.objects.all().prefetch_related("roles").order_by("first_name", "last_name")
    return render(request, "usuarios/listar_usuarios.html", {"usuarios": usuarios})


@login_required
def crear_usuario(request):
    if not request.user.has_perm("usuarios.access_user_management"):
        return redirect("home")

    form = UsuarioForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.save()
        logger.info("Usuario %s creado por %s", user.email, request.user.email)
        messages.success(request, f"Usuario {user.email} creado correctamente.")
        return redirect("usuarios:listar_usuarios")

    return render(request, "usuarios/crear_usuario.html", {"form": form})
