"""
Modelos de la aplicación **configuracion**.

.. module:: configuracion.models
   :synopsis: Perfil único de la academia.

El perfil guarda los datos públicos de la academia, los valores por defecto
de cobro de nuevos alumnos, los interruptores del módulo de cumpleaños y la
conexión con el backend alojado. Solo existe una fila (``pk=1``); se obtiene
siempre con :meth:`PerfilAcademia.obtener`.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from alumnos.models import Periodicidad, TipoPago
from validaciones.validators import validar_nif_fiscal


class PerfilAcademia(models.Model):
    """
    Perfil de la academia (singleton).

    **Campos**
    ----------
    nombre_publico, web, email_contacto, telefono_contacto, direccion,
    poblacion, codigo_postal, nif :
        Datos de contacto y fiscales que aparecen en recibos y cabeceras.
    acreedor_sepa_id, acreedor_sepa_nombre :
        Identificación como acreedor en las remesas SEPA.
    tipo_pago_defecto, periodicidad_defecto, dia_cobro_defecto :
        Valores iniciales del formulario de alta de alumnos.
    plazas_defecto_cursos : PositiveIntegerField
        Capacidad máxima inicial de un curso nuevo.
    modulo_cumpleanos : BooleanField
        Activa el aviso de cumpleaños en el tablero.
    notificar_cumpleanos_profesores : BooleanField
        Muestra también el aviso al profesorado.
    baas_url, baas_clave :
        URL y clave pública del backend alojado.
    """
    nombre_publico = models.CharField(max_length=150, default='Mi Academia', verbose_name=_('Nombre público'))
    web = models.CharField(max_length=150, blank=True, verbose_name=_('Web'))
    email_contacto = models.EmailField(blank=True, verbose_name=_('Email de contacto'))
    telefono_contacto = models.CharField(max_length=30, blank=True, verbose_name=_('Teléfono de contacto'))
    direccion = models.CharField(max_length=200, blank=True, verbose_name=_('Dirección'))
    poblacion = models.CharField(max_length=100, blank=True, verbose_name=_('Población'))
    codigo_postal = models.CharField(max_length=10, blank=True, verbose_name=_('Código postal'))
    nif = models.CharField(max_length=20, blank=True, validators=[validar_nif_fiscal], verbose_name=_('NIF/CIF'))

    acreedor_sepa_id = models.CharField(max_length=35, blank=True, verbose_name=_('Identificador de acreedor SEPA'))
    acreedor_sepa_nombre = models.CharField(max_length=150, blank=True, verbose_name=_('Nombre del acreedor SEPA'))

    tipo_pago_defecto = models.CharField(
        max_length=20, choices=TipoPago.choices, default=TipoPago.POR_DEFINIR,
        verbose_name=_('Tipo de pago por defecto')
    )
    periodicidad_defecto = models.CharField(
        max_length=20, choices=Periodicidad.choices, default=Periodicidad.MENSUAL,
        verbose_name=_('Periodicidad por defecto')
    )
    dia_cobro_defecto = models.PositiveSmallIntegerField(
        default=1, validators=[MinValueValidator(1), MaxValueValidator(28)],
        verbose_name=_('Día de cobro por defecto')
    )
    plazas_defecto_cursos = models.PositiveIntegerField(default=10, verbose_name=_('Plazas por defecto en cursos'))

    modulo_cumpleanos = models.BooleanField(default=True, verbose_name=_('Módulo de cumpleaños de alumnos'))
    notificar_cumpleanos_profesores = models.BooleanField(
        default=True, verbose_name=_('Avisar de cumpleaños al profesorado')
    )

    baas_url = models.URLField(blank=True, verbose_name=_('URL del backend'))
    baas_clave = models.CharField(max_length=255, blank=True, verbose_name=_('Clave pública del backend'))

    class Meta:
        verbose_name = _('Perfil de la academia')
        verbose_name_plural = _('Perfil de la academia')
        permissions = [
            ("access_config_panel", "Puede acceder a la configuración de la academia"),
        ]

    def __str__(self):
        return self.nombre_publico

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def obtener(cls):
        """Devuelve el perfil, creándolo con los valores por defecto si no existe."""
        perfil, _creado = cls.objects.get_or_create(pk=1)
        return perfil
