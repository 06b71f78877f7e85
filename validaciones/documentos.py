"""
Validación de documentos de identidad españoles.

.. module:: validaciones.documentos
   :synopsis: Dígito de control de DNI, NIE y CIF.

Todas las funciones devuelven ``bool`` y nunca lanzan excepciones ante
entradas mal formadas; las vistas y formularios deciden cómo informar
el error al usuario.
"""
import re

LETRAS_CONTROL = "TRWAGMYFPDXBNJZSQVHLCKE"
LETRAS_CONTROL_CIF = "JABCDEFGHI"

# Entidades cuyo control es siempre numérico / siempre letra.
CIF_CONTROL_NUMERICO = "ABEH"
CIF_CONTROL_LETRA = "NPQRSW"

PREFIJOS_NIE = {"X": "0", "Y": "1", "Z": "2"}

_DNI_RE = re.compile(r"^[0-9]{8}[A-Za-z]$")
_NIE_RE = re.compile(r"^[XYZ][0-9]{7}[A-Z]$")
_CIF_RE = re.compile(r"^([ABCDEFGHJKLMNPQRSUVW])(\d{7})([0-9A-J])$")


def letra_control(numero: int) -> str:
    """Letra de control que corresponde a un número de DNI."""
    return LETRAS_CONTROL[numero % 23]


def normalizar_documento(valor) -> str:
    """Mayúsculas y sin espacios. ``None`` se convierte en cadena vacía."""
    if not isinstance(valor, str):
        return ""
    return re.sub(r"\s+", "", valor).upper()


def es_documento_valido(valor) -> bool:
    """
    Comprueba un número de DNI: ocho dígitos y letra de control.

    La letra se acepta en minúscula, pero no se recortan espacios:
    ``"12345678 Z"`` no es un DNI válido.

    :param valor: Cadena a comprobar.
    :return: ``True`` si el formato y la letra son correctos.
    :rtype: bool
    """
    if not isinstance(valor, str) or not _DNI_RE.fullmatch(valor):
        return False
    return letra_control(int(valor[:8])) == valor[8].upper()


def es_nie_valido(valor) -> bool:
    """
    Comprueba un NIE (``X``/``Y``/``Z`` + 7 dígitos + letra).

    El prefijo se sustituye por 0, 1 o 2 y se aplica la misma tabla de
    letras que al DNI.
    """
    nie = normalizar_documento(valor)
    if not _NIE_RE.fullmatch(nie):
        return False
    numero = int(PREFIJOS_NIE[nie[0]] + nie[1:8])
    return letra_control(numero) == nie[8]


def _control_cif(digitos: str) -> int:
    suma = 0
    for posicion, caracter in enumerate(digitos):
        cifra = int(caracter)
        if posicion % 2 == 0:
            doble = cifra * 2
            suma += doble // 10 + doble % 10
        else:
            suma += cifra
    return (10 - suma % 10) % 10


def es_cif_valido(valor) -> bool:
    """
    Comprueba un CIF de persona jurídica.

    Las posiciones impares se duplican (sumando sus cifras) y las pares se
    suman tal cual. Según la letra de entidad el control debe ser un
    dígito (``ABEH``), una letra (``NPQRSW``) o cualquiera de los dos.
    """
    cif = normalizar_documento(valor)
    coincidencia = _CIF_RE.fullmatch(cif)
    if not coincidencia:
        return False

    entidad, digitos, control = coincidencia.groups()
    esperado = _control_cif(digitos)
    letra_esperada = LETRAS_CONTROL_CIF[esperado]

    if entidad in CIF_CONTROL_NUMERICO:
        return control == str(esperado)
    if entidad in CIF_CONTROL_LETRA:
        return control == letra_esperada
    return control in (str(esperado), letra_esperada)


def es_nif_persona_valido(valor) -> bool:
    """DNI o NIE, tras normalizar la entrada."""
    documento = normalizar_documento(valor)
    return es_documento_valido(documento) or es_nie_valido(documento)


def es_identificador_fiscal_valido(valor) -> bool:
    """DNI, NIE o CIF. Es lo que se admite como NIF en facturación."""
    return es_nif_persona_valido(valor) or es_cif_valido(valor)
