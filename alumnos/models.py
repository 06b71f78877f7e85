import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from validaciones.documentos import normalizar_documento
from validaciones.iban import normalizar_iban
from validaciones.validators import validar_iban, validar_nif_persona

from .utils import calcular_edad, es_cumpleanos


class TipoPago(models.TextChoices):
    FREE = 'Free', _('Free')
    EFECTIVO = 'Efectivo', _('Efectivo')
    TRANSFERENCIA = 'Transferencia', _('Transferencia')
    DOMICILIADO = 'Domiciliado', _('Domiciliado')
    TARJETA = 'Tarjeta', _('Tarjeta')
    TPV = 'TPV', _('TPV')
    BIZUM = 'Bizum', _('Bizum')
    POR_DEFINIR = 'Por definir', _('Por definir')


class Periodicidad(models.TextChoices):
    MENSUAL = 'Mensual', _('Mensual')
    TRIMESTRAL = 'Trimestral', _('Trimestral')
    UNICO = 'Único', _('Único')
    MANUAL = 'Manual', _('Manual')
    POR_DEFINIR = 'Por definir', _('Por definir')
    SIN_PERIODICIDAD = 'Sin periodicidad', _('Sin periodicidad')


class Alumno(models.Model):
    class TipoSepa(models.TextChoices):
        RECURRENTE = 'recurrente', _('Recurrente')
        UNICO = 'unico', _('Único')

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name=_('ID del alumno')
    )

    # Datos personales
    nombre = models.CharField(max_length=100, verbose_name=_('Nombre'))
    apellidos = models.CharField(max_length=150, verbose_name=_('Apellidos'))
    dni = models.CharField(
        max_length=20,
        blank=True,
        validators=[validar_nif_persona],
        verbose_name=_('DNI/NIE')
    )
    fecha_nacimiento = models.DateField(null=True, blank=True, verbose_name=_('Fecha de nacimiento'))
    es_menor = models.BooleanField(default=False, verbose_name=_('Menor de edad'))
    email = models.EmailField(blank=True, verbose_name=_('Correo electrónico'))
    telefono = models.CharField(max_length=30, blank=True, verbose_name=_('Teléfono'))
    direccion = models.CharField(max_length=200, blank=True, verbose_name=_('Dirección'))
    codigo_postal = models.CharField(max_length=10, blank=True, verbose_name=_('Código postal'))
    poblacion = models.CharField(max_length=100, blank=True, verbose_name=_('Población'))

    # Cobro
    tipo_pago = models.CharField(
        max_length=20,
        choices=TipoPago.choices,
        default=TipoPago.POR_DEFINIR,
        verbose_name=_('Tipo de pago')
    )
    periodicidad = models.CharField(
        max_length=20,
        choices=Periodicidad.choices,
        default=Periodicidad.POR_DEFINIR,
        verbose_name=_('Periodicidad')
    )

    # Domiciliación SEPA
    titular_cuenta = models.CharField(max_length=150, blank=True, verbose_name=_('Titular de la cuenta'))
    iban = models.CharField(max_length=34, blank=True, validators=[validar_iban], verbose_name=_('IBAN'))
    bic = models.CharField(max_length=11, blank=True, verbose_name=_('BIC'))
    dia_cobro = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1), MaxValueValidator(28)],
        verbose_name=_('Día de cobro')
    )
    tipo_sepa = models.CharField(
        max_length=12,
        choices=TipoSepa.choices,
        default=TipoSepa.RECURRENTE,
        verbose_name=_('Tipo de mandato SEPA')
    )
    fecha_aceptacion_sepa = models.DateField(null=True, blank=True, verbose_name=_('Fecha de aceptación del mandato'))

    observaciones = models.TextField(blank=True, verbose_name=_('Observaciones'))
    activo = models.BooleanField(default=True, verbose_name=_('Alumno activo'))
    fecha_registro = models.DateTimeField(auto_now_add=True, verbose_name=_('Fecha de registro'))
    ultima_modificacion = models.DateTimeField(auto_now=True, verbose_name=_('Última modificación'))

    class Meta:
        verbose_name = _('Alumno')
        verbose_name_plural = _('Alumnos')
        ordering = ['apellidos', 'nombre']
        permissions = [
            ("access_alumnos_panel", "Puede acceder a la gestión de alumnos"),
        ]

    def __str__(self):
        return self.nombre_completo

    @property
    def nombre_completo(self):
        return f"{self.nombre} {self.apellidos}".strip()

    def edad(self, referencia=None):
        return calcular_edad(self.fecha_nacimiento, referencia or timezone.localdate())

    def cumple_hoy(self, referencia=None):
        return es_cumpleanos(self.fecha_nacimiento, referencia or timezone.localdate())

    def save(self, *args, **kwargs):
        self.dni = normalizar_documento(self.dni)
        self.iban = normalizar_iban(self.iban)
        self.bic = (self.bic or "").strip().upper()
        super().save(*args, **kwargs)


class Tutor(models.Model):
    """Tutor legal de un alumno menor de edad (como máximo dos por alumno)."""
    alumno = models.ForeignKey(Alumno, on_delete=models.CASCADE, related_name='tutores')
    nif = models.CharField(max_length=20, validators=[validar_nif_persona], verbose_name=_('DNI/NIE'))
    nombre_completo = models.CharField(max_length=150, verbose_name=_('Nombre completo'))
    telefono = models.CharField(max_length=30, blank=True, verbose_name=_('Teléfono'))
    email = models.EmailField(blank=True, verbose_name=_('Correo electrónico'))

    class Meta:
        verbose_name = _('Tutor')
        verbose_name_plural = _('Tutores')

    def __str__(self):
        return f"{self.nombre_completo} ({self.nif})"

    def save(self, *args, **kwargs):
        self.nif = normalizar_documento(self.nif)
        super().save(*args, **kwargs)
