"""
Modelos de la app **Cursos**.

.. module:: cursos.models
   :synopsis: Profesores, aulas, cursos, inscripciones y clases.

La ocupación de un curso no se guarda: se deriva de sus inscripciones
activas con las funciones de :mod:`tablero.agregados`.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from tablero import agregados
from validaciones.documentos import normalizar_documento
from validaciones.validators import validar_nif_persona


class Profesor(models.Model):
    nombre = models.CharField(max_length=100, verbose_name=_('Nombre'))
    apellidos = models.CharField(max_length=150, verbose_name=_('Apellidos'))
    nif = models.CharField(max_length=20, blank=True, validators=[validar_nif_persona], verbose_name=_('DNI/NIE'))
    email = models.EmailField(blank=True, verbose_name=_('Correo electrónico'))
    telefono = models.CharField(max_length=30, blank=True, verbose_name=_('Teléfono'))
    activo = models.BooleanField(default=True, verbose_name=_('Activo'))
    usuario = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='profesor',
        verbose_name=_('Usuario del back office')
    )

    class Meta:
        verbose_name = _('Profesor')
        verbose_name_plural = _('Profesores')
        ordering = ['apellidos', 'nombre']
        permissions = [
            ("access_profesores_panel", "Puede gestionar profesores"),
        ]

    def __str__(self):
        return self.nombre_completo

    @property
    def nombre_completo(self):
        return f"{self.nombre} {self.apellidos}".strip()

    def save(self, *args, **kwargs):
        self.nif = normalizar_documento(self.nif)
        super().save(*args, **kwargs)


class Aula(models.Model):
    nombre = models.CharField(max_length=100, unique=True, verbose_name=_('Nombre'))
    capacidad = models.PositiveIntegerField(null=True, blank=True, verbose_name=_('Capacidad'))
    ubicacion = models.CharField(max_length=150, blank=True, verbose_name=_('Ubicación'))
    color = models.CharField(max_length=7, default='#3b82f6', verbose_name=_('Color'))
    orden = models.PositiveIntegerField(default=0, verbose_name=_('Orden en el cuadro'))

    class Meta:
        verbose_name = _('Aula')
        verbose_name_plural = _('Aulas')
        ordering = ['orden', 'nombre']
        permissions = [
            ("access_cuadro_aulas", "Puede ver el cuadro de aulas"),
        ]

    def __str__(self):
        return self.nombre


class Curso(models.Model):
    class Estado(models.TextChoices):
        ACTIVO = 'Activo', _('Activo')
        ARCHIVADO = 'Archivado', _('Archivado')
        COMPLETADO = 'Completado', _('Completado')

    class Modalidad(models.TextChoices):
        PRESENCIAL = 'Presencial', _('Presencial')
        ONLINE = 'Online', _('Online')
        MIXTA = 'Mixta', _('Mixta')

    nombre = models.CharField(max_length=150, verbose_name=_('Nombre'))
    nivel = models.CharField(max_length=50, blank=True, verbose_name=_('Nivel'))
    descripcion = models.TextField(blank=True, verbose_name=_('Descripción'))
    profesor = models.ForeignKey(
        Profesor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cursos',
        verbose_name=_('Profesor')
    )
    aula = models.ForeignKey(
        Aula,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cursos',
        verbose_name=_('Aula')
    )
    modalidad = models.CharField(
        max_length=20, choices=Modalidad.choices, default=Modalidad.PRESENCIAL, verbose_name=_('Modalidad')
    )
    capacidad_minima = models.PositiveIntegerField(default=1, verbose_name=_('Capacidad mínima'))
    capacidad_maxima = models.PositiveIntegerField(default=10, verbose_name=_('Capacidad máxima'))
    estado = models.CharField(
        max_length=20, choices=Estado.choices, default=Estado.ACTIVO, verbose_name=_('Estado')
    )
    fecha_inicio = models.DateField(null=True, blank=True, verbose_name=_('Fecha de inicio'))
    fecha_fin = models.DateField(null=True, blank=True, verbose_name=_('Fecha de fin'))

    class Meta:
        verbose_name = _('Curso')
        verbose_name_plural = _('Cursos')
        ordering = ['nombre']
        permissions = [
            ("access_cursos_panel", "Puede acceder a la gestión de cursos"),
        ]

    def __str__(self):
        return f"{self.nombre} ({self.nivel})" if self.nivel else self.nombre

    # -----------------------------
    # Ocupación derivada
    # -----------------------------
    @property
    def inscripciones_activas(self):
        return self.inscripciones.filter(activa=True).count()

    @property
    def plazas_disponibles(self):
        return agregados.plazas_disponibles(self.capacidad_maxima, self.inscripciones_activas)

    @property
    def ocupacion(self):
        return agregados.clasificar_ocupacion(self.capacidad_maxima, self.inscripciones_activas)


class Inscripcion(models.Model):
    alumno = models.ForeignKey('alumnos.Alumno', on_delete=models.CASCADE, related_name='inscripciones')
    curso = models.ForeignKey(Curso, on_delete=models.CASCADE, related_name='inscripciones')
    fecha_inscripcion = models.DateField(default=timezone.localdate, verbose_name=_('Fecha de inscripción'))
    activa = models.BooleanField(default=True, verbose_name=_('Activa'))
    fecha_baja = models.DateField(null=True, blank=True, verbose_name=_('Fecha de baja'))

    class Meta:
        verbose_name = _('Inscripción')
        verbose_name_plural = _('Inscripciones')
        ordering = ['-fecha_inscripcion']

    def __str__(self):
        return f"{self.alumno} → {self.curso}"

    def dar_de_baja(self, fecha=None):
        self.activa = False
        self.fecha_baja = fecha or timezone.localdate()
        self.save(update_fields=['activa', 'fecha_baja'])


class Clase(models.Model):
    class Estado(models.TextChoices):
        HECHA = 'Hecha', _('Hecha')
        PENDIENTE = 'Pendiente', _('Pendiente')
        ANULADA = 'Anulada', _('Anulada')

    curso = models.ForeignKey(Curso, on_delete=models.CASCADE, related_name='clases')
    fecha = models.DateField(verbose_name=_('Fecha'))
    hora_inicio = models.TimeField(verbose_name=_('Hora de inicio'))
    hora_fin = models.TimeField(verbose_name=_('Hora de fin'))
    profesor = models.ForeignKey(
        Profesor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='clases',
        verbose_name=_('Profesor')
    )
    es_sustitucion = models.BooleanField(default=False, verbose_name=_('Sustitución'))
    estado = models.CharField(
        max_length=20, choices=Estado.choices, default=Estado.PENDIENTE, verbose_name=_('Estado')
    )
    aula = models.ForeignKey(
        Aula,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='clases',
        verbose_name=_('Aula')
    )
    comentario_interno = models.TextField(blank=True, verbose_name=_('Comentario interno'))

    class Meta:
        verbose_name = _('Clase')
        verbose_name_plural = _('Clases')
        ordering = ['fecha', 'hora_inicio']

    def __str__(self):
        return f"{self.curso.nombre} {self.fecha:%d/%m/%Y} {self.hora_inicio:%H:%M}"

    @property
    def aula_efectiva(self):
        return self.aula or self.curso.aula
