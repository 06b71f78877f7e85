from django.urls import reverse

from .menu import MENU, filtrar_menu


def _entrada(nodo, path):
    url = reverse(nodo.destino) if nodo.destino else None

    hijos = [_entrada(h, path) for h in nodo.hijos]
    activos = [h for h in hijos if h["activo"]]
    # Solo queda activo el hijo con la URL más específica.
    for h in activos:
        h["activo"] = h is max(activos, key=lambda x: len(x["url"] or ""))

    if hijos:
        activo = bool(activos)
    elif url == "/":
        activo = path == "/"
    else:
        activo = bool(url) and path.startswith(url)

    return {
        "titulo": nodo.titulo,
        "url": url,
        "icono": nodo.icono,
        "activo": activo,
        "hijos": hijos,
    }


def menu_navegacion(request):
    """
    Expone ``menu`` (entradas visibles para el usuario) y ``tema`` a las plantillas.

    Los usuarios anónimos no ven ninguna entrada.
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return {"menu": [], "tema": "claro"}

    nodos = filtrar_menu(MENU, user.nombres_roles())
    return {
        "menu": [_entrada(n, request.path) for n in nodos],
        "tema": user.tema,
    }
