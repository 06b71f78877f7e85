from django.db import models
from django.utils.translation import gettext_lazy as _

from .documentos import (
    es_documento_valido,
    es_identificador_fiscal_valido,
    es_nif_persona_valido,
    normalizar_documento,
)
from .iban import es_iban_valido, resolver_bic


class ResultadoValidacion(models.TextChoices):
    SIN_VERIFICAR = "sin_verificar", _("Sin verificar")
    VALIDO = "valido", _("Válido")
    INVALIDO = "invalido", _("Inválido")


COMPROBACIONES = {
    "dni": lambda v: es_documento_valido(normalizar_documento(v)),
    "nif": es_nif_persona_valido,
    "nif_fiscal": es_identificador_fiscal_valido,
    "iban": es_iban_valido,
}


def verificar_campo(tipo, valor):
    """
    Valida un campo al perder el foco en el formulario.

    :param str tipo: ``dni``, ``nif``, ``nif_fiscal`` o ``iban``.
    :param str valor: Contenido del campo.
    :return: ``{"estado": ResultadoValidacion, "bic": str}``. El BIC solo se
        rellena para IBAN válidos de una entidad conocida.
    :raises ValueError: Si ``tipo`` no es uno de los admitidos.
    """
    if tipo not in COMPROBACIONES:
        raise ValueError(f"Tipo de campo desconocido: {tipo}")

    if not (valor or "").strip():
        return {"estado": ResultadoValidacion.SIN_VERIFICAR, "bic": ""}

    valido = COMPROBACIONES[tipo](valor)
    bic = resolver_bic(valor) if (tipo == "iban" and valido) else ""
    estado = ResultadoValidacion.VALIDO if valido else ResultadoValidacion.INVALIDO
    return {"estado": estado, "bic": bic}
