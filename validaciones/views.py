from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .estados import verificar_campo


@login_required
@require_GET
def validar_campo(request):
    """
    Endpoint JSON para la validación en línea de DNI/NIE/CIF e IBAN.

    Ejemplo: ``/validaciones/campo/?tipo=iban&valor=ES91...`` devuelve
    ``{"estado": "valido", "bic": "CAIXESBBXXX"}``.
    """
    tipo = request.GET.get("tipo", "")
    valor = request.GET.get("valor", "")
    try:
        resultado = verificar_campo(tipo, valor)
    except ValueError as e:
        return JsonResponse({"error": str(e)}, status=400)
    return JsonResponse({"estado": str(resultado["estado"]), "bic": resultado["bic"]})
