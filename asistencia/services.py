"""
Servicios de la app **asistencia**.

.. module:: asistencia.services
   :synopsis: Preparación y cierre del pase de lista de una clase.
"""
import logging

from django.db import transaction
from django.db.models import Q

from cursos.models import Clase, Inscripcion
from .models import RegistroAsistencia

logger = logging.getLogger(__name__)


def inscripciones_vigentes(clase):
    """Inscripciones del curso de la clase vigentes en la fecha de la clase."""
    return Inscripcion.objects.filter(
        curso_id=clase.curso_id,
        fecha_inscripcion__lte=clase.fecha,
    ).filter(
        Q(fecha_baja__isnull=True, activa=True) | Q(fecha_baja__gte=clase.fecha)
    )


@transaction.atomic
def inicializar_registros(clase):
    """
    Crea los registros que falten para los alumnos inscritos en la fecha de la clase.

    :param clase: Clase a la que se pasa lista.
    :type clase: cursos.models.Clase
    :return: Queryset con todos los registros de la clase, ordenados por alumno.
    """
    existentes = set(clase.registros.values_list('alumno_id', flat=True))
    nuevos = [
        RegistroAsistencia(clase=clase, alumno_id=alumno_id)
        for alumno_id in inscripciones_vigentes(clase).values_list('alumno_id', flat=True).distinct()
        if alumno_id not in existentes
    ]
    if nuevos:
        RegistroAsistencia.objects.bulk_create(nuevos)
        logger.info("Clase %s: %d registros de asistencia creados", clase.pk, len(nuevos))

    return clase.registros.select_related('alumno').order_by('alumno__apellidos', 'alumno__nombre')


@transaction.atomic
def cerrar_pase_de_lista(clase, registros):
    """Marca los registros como realizados y la clase como hecha."""
    for registro in registros:
        registro.estado = RegistroAsistencia.Estado.REALIZADO
        registro.save()

    clase.estado = Clase.Estado.HECHA
    clase.save(update_fields=['estado'])
    logger.info("Pase de lista cerrado para la clase %s", clase.pk)
