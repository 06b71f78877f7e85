from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import validaciones.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("alumnos", "0001_initial"),
        ("cursos", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Factura",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tipo", models.CharField(choices=[("emitida", "Emitida"), ("recibida", "Recibida")], max_length=10, verbose_name="Tipo")),
                ("numero", models.CharField(max_length=30, verbose_name="Número")),
                ("fecha", models.DateField(default=django.utils.timezone.localdate, verbose_name="Fecha")),
                ("tercero", models.CharField(max_length=200, verbose_name="Cliente / proveedor")),
                ("nif_tercero", models.CharField(blank=True, max_length=20, validators=[validaciones.validators.validar_nif_fiscal], verbose_name="NIF/CIF")),
                ("categoria", models.CharField(blank=True, max_length=100, verbose_name="Categoría de gasto")),
                ("base_imponible", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="Base imponible")),
                ("importe_iva", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=12, verbose_name="IVA")),
                ("importe_irpf", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=12, verbose_name="IRPF")),
                ("total", models.DecimalField(decimal_places=2, default=Decimal("0"), editable=False, max_digits=12, verbose_name="Total")),
                ("estado", models.CharField(choices=[("pendiente", "Pendiente"), ("pagada", "Pagada")], default="pendiente", max_length=10, verbose_name="Estado")),
            ],
            options={
                "verbose_name": "Factura",
                "verbose_name_plural": "Facturas",
                "ordering": ["-fecha", "-id"],
                "permissions": [("access_gestoria", "Puede acceder a la gestoría financiera")],
                "unique_together": {("tipo", "numero")},
            },
        ),
        migrations.CreateModel(
            name="Recibo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fecha", models.DateField(default=django.utils.timezone.localdate, verbose_name="Fecha del recibo")),
                ("concepto", models.CharField(max_length=200, verbose_name="Concepto")),
                ("importe", models.DecimalField(
                    decimal_places=2, max_digits=10,
                    validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    verbose_name="Importe",
                )),
                ("estado", models.CharField(
                    choices=[("Cobrado", "Cobrado"), ("Pendiente", "Pendiente"), ("Devuelto", "Devuelto")],
                    default="Pendiente", max_length=12, verbose_name="Estado",
                )),
                ("tipo_pago", models.CharField(
                    choices=[("Free", "Free"), ("Efectivo", "Efectivo"), ("Transferencia", "Transferencia"),
                             ("Domiciliado", "Domiciliado"), ("Tarjeta", "Tarjeta"), ("TPV", "TPV"),
                             ("Bizum", "Bizum"), ("Por definir", "Por definir")],
                    default="Por definir", max_length=20, verbose_name="Tipo de pago",
                )),
                ("fecha_pago", models.DateField(blank=True, null=True, verbose_name="Fecha de cobro")),
                ("codigo", models.CharField(blank=True, max_length=30, verbose_name="Código de recibo")),
                ("comentario_interno", models.TextField(blank=True, verbose_name="Comentario interno")),
                ("alumno", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="recibos", to="alumnos.alumno")),
                ("curso", models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="recibos", to="cursos.curso",
                )),
            ],
            options={
                "verbose_name": "Recibo",
                "verbose_name_plural": "Recibos",
                "ordering": ["-fecha", "-id"],
                "permissions": [("access_recibos_panel", "Puede gestionar recibos")],
            },
        ),
    ]
