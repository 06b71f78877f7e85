"""Lectura tolerante de fechas recibidas por query string."""
from datetime import date, datetime


def parse_fecha(valor, por_defecto=None):
    """``YYYY-MM-DD`` → ``date``; si falta o no es válida devuelve ``por_defecto``."""
    if not valor:
        return por_defecto
    try:
        return datetime.strptime(valor, '%Y-%m-%d').date()
    except ValueError:
        return por_defecto


def parse_mes(valor, por_defecto):
    """``YYYY-MM`` → primer día del mes; si no es válido devuelve ``por_defecto``."""
    if not valor:
        return por_defecto
    try:
        return datetime.strptime(valor, '%Y-%m').date()
    except ValueError:
        return por_defecto


def parse_anio(valor, por_defecto):
    try:
        anio = int(valor)
    except (TypeError, ValueError):
        return por_defecto
    return anio if date.min.year <= anio <= date.max.year else por_defecto
