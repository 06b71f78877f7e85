"""
IBAN y resolución de BIC para cuentas españolas.

El formato admitido es el de dos letras de país seguidas de 22 dígitos
(24 caracteres, como el IBAN español). La comprobación es el mod-97 de
la norma ISO 13616.
"""
import re

BIC_POR_CODIGO_BANCO = {
    "2100": "CAIXESBBXXX",
    "0049": "BSCHESMMXXX",
    "0182": "BBVAESMMXXX",
    "0030": "BOSPESMMXXX",
    "1465": "INGDESMMXXX",
    "0081": "BADEESMMXXX",
    "0128": "BKBKESMMXXX",
    "0130": "BCOEESMMXXX",
    "0075": "POPUESMMXXX",
    "0238": "PSTESMMXXX",
}

_IBAN_RE = re.compile(r"^[A-Z]{2}[0-9]{22}$")


def normalizar_iban(valor) -> str:
    if not isinstance(valor, str):
        return ""
    return re.sub(r"\s+", "", valor).upper()


def _a_digitos(texto: str) -> str:
    # A=10 ... Z=35
    return "".join(str(ord(c) - 55) if c.isalpha() else c for c in texto)


def es_iban_valido(valor) -> bool:
    """
    Comprueba formato y dígitos de control de un IBAN.

    :param valor: IBAN con o sin espacios, en cualquier capitalización.
    :return: ``True`` si el resto módulo 97 del IBAN reordenado es 1.
    """
    iban = normalizar_iban(valor)
    if not _IBAN_RE.fullmatch(iban):
        return False

    reordenado = iban[4:] + iban[:4]
    try:
        return int(_a_digitos(reordenado)) % 97 == 1
    except ValueError:
        return False


def resolver_bic(valor) -> str:
    """
    BIC del banco a partir del código de entidad (posiciones 5 a 8).

    Solo se resuelven IBAN españoles de al menos 12 caracteres; en otro
    caso, o si la entidad no está en la tabla, devuelve ``""``. No
    comprueba que el IBAN sea válido.
    """
    iban = normalizar_iban(valor)
    if not iban.startswith("ES") or len(iban) < 12:
        return ""
    return BIC_POR_CODIGO_BANCO.get(iban[4:8], "")
