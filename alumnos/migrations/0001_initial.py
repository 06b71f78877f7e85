import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import validaciones.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Alumno",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name="ID del alumno")),
                ("nombre", models.CharField(max_length=100, verbose_name="Nombre")),
                ("apellidos", models.CharField(max_length=150, verbose_name="Apellidos")),
                ("dni", models.CharField(blank=True, max_length=20, validators=[validaciones.validators.validar_nif_persona], verbose_name="DNI/NIE")),
                ("fecha_nacimiento", models.DateField(blank=True, null=True, verbose_name="Fecha de nacimiento")),
                ("es_menor", models.BooleanField(default=False, verbose_name="Menor de edad")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="Correo electrónico")),
                ("telefono", models.CharField(blank=True, max_length=30, verbose_name="Teléfono")),
                ("direccion", models.CharField(blank=True, max_length=200, verbose_name="Dirección")),
                ("codigo_postal", models.CharField(blank=True, max_length=10, verbose_name="Código postal")),
                ("poblacion", models.CharField(blank=True, max_length=100, verbose_name="Población")),
                ("tipo_pago", models.CharField(
                    choices=[("Free", "Free"), ("Efectivo", "Efectivo"), ("Transferencia", "Transferencia"),
                             ("Domiciliado", "Domiciliado"), ("Tarjeta", "Tarjeta"), ("TPV", "TPV"),
                             ("Bizum", "Bizum"), ("Por definir", "Por definir")],
                    default="Por definir", max_length=20, verbose_name="Tipo de pago",
                )),
                ("periodicidad", models.CharField(
                    choices=[("Mensual", "Mensual"), ("Trimestral", "Trimestral"), ("Único", "Único"),
                             ("Manual", "Manual"), ("Por definir", "Por definir"),
                             ("Sin periodicidad", "Sin periodicidad")],
                    default="Por definir", max_length=20, verbose_name="Periodicidad",
                )),
                ("titular_cuenta", models.CharField(blank=True, max_length=150, verbose_name="Titular de la cuenta")),
                ("iban", models.CharField(blank=True, max_length=34, validators=[validaciones.validators.validar_iban], verbose_name="IBAN")),
                ("bic", models.CharField(blank=True, max_length=11, verbose_name="BIC")),
                ("dia_cobro", models.PositiveSmallIntegerField(
                    default=1,
                    validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(28)],
                    verbose_name="Día de cobro",
                )),
                ("tipo_sepa", models.CharField(
                    choices=[("recurrente", "Recurrente"), ("unico", "Único")],
                    default="recurrente", max_length=12, verbose_name="Tipo de mandato SEPA",
                )),
                ("fecha_aceptacion_sepa", models.DateField(blank=True, null=True, verbose_name="Fecha de aceptación del mandato")),
                ("observaciones", models.TextField(blank=True, verbose_name="Observaciones")),
                ("activo", models.BooleanField(default=True, verbose_name="Alumno activo")),
                ("fecha_registro", models.DateTimeField(auto_now_add=True, verbose_name="Fecha de registro")),
                ("ultima_modificacion", models.DateTimeField(auto_now=True, verbose_name="Última modificación")),
            ],
            options={
                "verbose_name": "Alumno",
                "verbose_name_plural": "Alumnos",
                "ordering": ["apellidos", "nombre"],
                "permissions": [("access_alumnos_panel", "Puede acceder a la gestión de alumnos")],
            },
        ),
        migrations.CreateModel(
            name="Tutor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nif", models.CharField(max_length=20, validators=[validaciones.validators.validar_nif_persona], verbose_name="DNI/NIE")),
                ("nombre_completo", models.CharField(max_length=150, verbose_name="Nombre completo")),
                ("telefono", models.CharField(blank=True, max_length=30, verbose_name="Teléfono")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="Correo electrónico")),
                ("alumno", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tutores", to="alumnos.alumno")),
            ],
            options={
                "verbose_name": "Tutor",
                "verbose_name_plural": "Tutores",
            },
        ),
    ]
