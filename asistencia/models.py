from django.db import models
from django.utils.translation import gettext_lazy as _


class RegistroAsistencia(models.Model):
    """Asistencia de un alumno a una clase concreta."""

    class Estado(models.TextChoices):
        PENDIENTE = 'Pendiente', _('Pendiente')
        REALIZADO = 'Realizado', _('Realizado')
        ANULADO = 'Anulado', _('Anulado')

    class Retraso(models.TextChoices):
        NO = 'No', _('No')
        CINCO = '5 min', _('5 min')
        DIEZ = '10 min', _('10 min')
        QUINCE = '15 min', _('15 min')
        MAS = '+15 min', _('Más de 15 min')

    clase = models.ForeignKey('cursos.Clase', on_delete=models.CASCADE, related_name='registros')
    alumno = models.ForeignKey('alumnos.Alumno', on_delete=models.CASCADE, related_name='asistencias')
    asistio = models.BooleanField(default=True, verbose_name=_('Asistió'))
    retraso = models.CharField(max_length=10, choices=Retraso.choices, default=Retraso.NO, verbose_name=_('Retraso'))
    falta_justificada = models.BooleanField(default=False, verbose_name=_('Falta justificada'))
    deberes_hechos = models.BooleanField(default=False, verbose_name=_('Deberes hechos'))
    comentarios = models.TextField(blank=True, verbose_name=_('Comentarios'))
    estado = models.CharField(
        max_length=12, choices=Estado.choices, default=Estado.PENDIENTE, verbose_name=_('Estado')
    )

    class Meta:
        verbose_name = _('Registro de asistencia')
        verbose_name_plural = _('Registros de asistencia')
        unique_together = ('clase', 'alumno')
        permissions = [
            ("access_asistencia", "Puede pasar lista y consultar asistencia"),
        ]

    def __str__(self):
        return f"{self.alumno} - {self.clase}"
