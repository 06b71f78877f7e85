"""
Modelos de la app **Recibos**.

.. module:: recibos.models
   :synopsis: Recibos de alumnos y facturas emitidas/recibidas.
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from alumnos.models import TipoPago
from validaciones.documentos import normalizar_documento
from validaciones.validators import validar_nif_fiscal


class Recibo(models.Model):
    class Estado(models.TextChoices):
        COBRADO = 'Cobrado', _('Cobrado')
        PENDIENTE = 'Pendiente', _('Pendiente')
        DEVUELTO = 'Devuelto', _('Devuelto')

    alumno = models.ForeignKey('alumnos.Alumno', on_delete=models.PROTECT, related_name='recibos')
    curso = models.ForeignKey(
        'cursos.Curso', on_delete=models.SET_NULL, null=True, blank=True, related_name='recibos'
    )
    fecha = models.DateField(default=timezone.localdate, verbose_name=_('Fecha del recibo'))
    concepto = models.CharField(max_length=200, verbose_name=_('Concepto'))
    importe = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name=_('Importe')
    )
    estado = models.CharField(
        max_length=12, choices=Estado.choices, default=Estado.PENDIENTE, verbose_name=_('Estado')
    )
    tipo_pago = models.CharField(
        max_length=20, choices=TipoPago.choices, default=TipoPago.POR_DEFINIR, verbose_name=_('Tipo de pago')
    )
    fecha_pago = models.DateField(null=True, blank=True, verbose_name=_('Fecha de cobro'))
    codigo = models.CharField(max_length=30, blank=True, verbose_name=_('Código de recibo'))
    comentario_interno = models.TextField(blank=True, verbose_name=_('Comentario interno'))

    class Meta:
        verbose_name = _('Recibo')
        verbose_name_plural = _('Recibos')
        ordering = ['-fecha', '-id']
        permissions = [
            ("access_recibos_panel", "Puede gestionar recibos"),
        ]

    def __str__(self):
        return f"{self.codigo or self.pk} - {self.alumno} - {self.importe} €"

    def marcar_cobrado(self, fecha=None, tipo_pago=None):
        self.estado = self.Estado.COBRADO
        self.fecha_pago = fecha or timezone.localdate()
        if tipo_pago:
            self.tipo_pago = tipo_pago
        self.save(update_fields=['estado', 'fecha_pago', 'tipo_pago'])

    def save(self, *args, **kwargs):
        # Acepta la fecha como cadena ISO antes del primer guardado.
        self.fecha = self._meta.get_field('fecha').to_python(self.fecha)
        super().save(*args, **kwargs)
        if not self.codigo:
            # REC-AAAA-000123
            self.codigo = f"REC-{self.fecha.year}-{self.pk:06d}"
            super().save(update_fields=['codigo'])


class Factura(models.Model):
    class Tipo(models.TextChoices):
        EMITIDA = 'emitida', _('Emitida')
        RECIBIDA = 'recibida', _('Recibida')

    class Estado(models.TextChoices):
        PENDIENTE = 'pendiente', _('Pendiente')
        PAGADA = 'pagada', _('Pagada')

    tipo = models.CharField(max_length=10, choices=Tipo.choices, verbose_name=_('Tipo'))
    numero = models.CharField(max_length=30, verbose_name=_('Número'))
    fecha = models.DateField(default=timezone.localdate, verbose_name=_('Fecha'))
    tercero = models.CharField(max_length=200, verbose_name=_('Cliente / proveedor'))
    nif_tercero = models.CharField(
        max_length=20, blank=True, validators=[validar_nif_fiscal], verbose_name=_('NIF/CIF')
    )
    categoria = models.CharField(max_length=100, blank=True, verbose_name=_('Categoría de gasto'))
    base_imponible = models.DecimalField(max_digits=12, decimal_places=2, verbose_name=_('Base imponible'))
    importe_iva = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'), verbose_name=_('IVA'))
    importe_irpf = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'), verbose_name=_('IRPF'))
    total = models.DecimalField(max_digits=12, decimal_places=2, editable=False, default=Decimal('0'), verbose_name=_('Total'))
    estado = models.CharField(
        max_length=10, choices=Estado.choices, default=Estado.PENDIENTE, verbose_name=_('Estado')
    )

    class Meta:
        verbose_name = _('Factura')
        verbose_name_plural = _('Facturas')
        ordering = ['-fecha', '-id']
        unique_together = ('tipo', 'numero')
        permissions = [
            ("access_gestoria", "Puede acceder a la gestoría financiera"),
        ]

    def __str__(self):
        return f"{self.get_tipo_display()} {self.numero} - {self.tercero}"

    def calcular_total(self):
        return (self.base_imponible or 0) + (self.importe_iva or 0) - (self.importe_irpf or 0)

    def save(self, *args, **kwargs):
        self.nif_tercero = normalizar_documento(self.nif_tercero)
        self.total = self.calcular_total()
        super().save(*args, **kwargs)
