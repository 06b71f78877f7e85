"""
Servicios de la app Configuración.

.. module:: configuracion.services
   :synopsis: Comprobación de conectividad con el backend alojado.

La comprobación hace una única petición HTTP (sin reintentos) contra la API
REST del backend y reduce cualquier resultado a un éxito o un fallo con un
mensaje legible. Nunca propaga excepciones de red a la vista.
"""
import logging
from dataclasses import dataclass

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

# Tabla ligera que existe en cualquier proyecto inicializado.
TABLA_SONDA = "users"


@dataclass(frozen=True)
class ResultadoConexion:
    ok: bool
    mensaje: str
    status_code: int | None = None


def comprobar_conexion_baas(url: str, clave: str, timeout: float | None = None) -> ResultadoConexion:
    """
    Comprueba que el backend responde con las credenciales indicadas.

    :param url: URL base del proyecto (``https://xxxx.supabase.co``).
    :param clave: Clave pública (anon key) del proyecto.
    :param timeout: Segundos de espera; por defecto ``settings.ACADEMIA_BAAS_TIMEOUT``.
    :return: :class:`ResultadoConexion` con el resultado de la única petición.
    """
    if not url or not clave:
        return ResultadoConexion(False, "Faltan la URL o la clave del backend.")

    if timeout is None:
        timeout = getattr(settings, "ACADEMIA_BAAS_TIMEOUT", 8)

    endpoint = f"{url.rstrip('/')}/rest/v1/{TABLA_SONDA}"
    headers = {
        "apikey": clave,
        "Authorization": f"Bearer {clave}",
        "Prefer": "count=exact",
    }

    try:
        resp = requests.head(endpoint, headers=headers, params={"select": "id"}, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Backend %s no accesible: %s", url, exc)
        return ResultadoConexion(False, f"No se pudo conectar con el backend: {exc}")

    if resp.status_code >= 400:
        logger.warning("Backend %s respondió %s", url, resp.status_code)
        return ResultadoConexion(
            False, f"El backend respondió con el código {resp.status_code}.", resp.status_code
        )

    logger.info("Conexión con el backend %s correcta", url)
    return ResultadoConexion(True, "Conexión correcta con el backend.", resp.status_code)
