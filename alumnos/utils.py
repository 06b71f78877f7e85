"""Utilidades de fechas de alumnos y visibilidad del módulo de cumpleaños."""
from roles.models import NombreRol

ROLES_VEN_CUMPLEANOS = {
    NombreRol.ADMINISTRADOR.value,
    NombreRol.COORDINADOR.value,
    NombreRol.GESTOR_FINANCIERO.value,
}


def calcular_edad(fecha_nacimiento, referencia):
    """Años cumplidos a fecha de ``referencia``; 0 sin fecha de nacimiento."""
    if not fecha_nacimiento:
        return 0
    edad = referencia.year - fecha_nacimiento.year
    if (referencia.month, referencia.day) < (fecha_nacimiento.month, fecha_nacimiento.day):
        edad -= 1
    return edad


def es_cumpleanos(fecha_nacimiento, referencia):
    # Los nacidos un 29 de febrero solo cumplen en años bisiestos.
    if not fecha_nacimiento:
        return False
    return (fecha_nacimiento.month, fecha_nacimiento.day) == (referencia.month, referencia.day)


def puede_ver_cumpleanos(nombres_roles, perfil):
    """
    Indica si un usuario ve el aviso de cumpleaños del tablero.

    Requiere el módulo activado en el perfil de la academia. Administración,
    coordinación y gestión financiera lo ven siempre; el profesorado solo
    si el perfil lo permite.
    """
    if not perfil.modulo_cumpleanos:
        return False
    if ROLES_VEN_CUMPLEANOS & set(nombres_roles):
        return True
    if NombreRol.PROFESOR.value in nombres_roles:
        return perfil.notificar_cumpleanos_profesores
    return False
