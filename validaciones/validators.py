"""Validadores de campo para modelos y formularios."""
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .documentos import (
    es_documento_valido,
    es_identificador_fiscal_valido,
    es_nif_persona_valido,
    normalizar_documento,
)
from .iban import es_iban_valido


def validar_dni(value):
    if not es_documento_valido(normalizar_documento(value)):
        raise ValidationError(_("El DNI no es válido."), code="dni_invalido")


def validar_nif_persona(value):
    if not es_nif_persona_valido(value):
        raise ValidationError(_("El DNI/NIE no es válido."), code="nif_invalido")


def validar_nif_fiscal(value):
    if not es_identificador_fiscal_valido(value):
        raise ValidationError(_("El NIF/CIF no es válido."), code="nif_fiscal_invalido")


def validar_iban(value):
    if not es_iban_valido(value):
        raise ValidationError(_("El IBAN no es válido."), code="iban_invalido")
