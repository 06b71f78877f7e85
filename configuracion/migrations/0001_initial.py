import django.core.validators
from django.db import migrations, models

import validaciones.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PerfilAcademia",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre_publico", models.CharField(default="Mi Academia", max_length=150, verbose_name="Nombre público")),
                ("web", models.CharField(blank=True, max_length=150, verbose_name="Web")),
                ("email_contacto", models.EmailField(blank=True, max_length=254, verbose_name="Email de contacto")),
                ("telefono_contacto", models.CharField(blank=True, max_length=30, verbose_name="Teléfono de contacto")),
                ("direccion", models.CharField(blank=True, max_length=200, verbose_name="Dirección")),
                ("poblacion", models.CharField(blank=True, max_length=100, verbose_name="Población")),
                ("codigo_postal", models.CharField(blank=True, max_length=10, verbose_name="Código postal")),
                ("nif", models.CharField(blank=True, max_length=20, validators=[validaciones.validators.validar_nif_fiscal], verbose_name="NIF/CIF")),
                ("acreedor_sepa_id", models.CharField(blank=True, max_length=35, verbose_name="Identificador de acreedor SEPA")),
                ("acreedor_sepa_nombre", models.CharField(blank=True, max_length=150, verbose_name="Nombre del acreedor SEPA")),
                ("tipo_pago_defecto", models.CharField(
                    choices=[
                        ("Free", "Free"), ("Efectivo", "Efectivo"), ("Transferencia", "Transferencia"),
                        ("Domiciliado", "Domiciliado"), ("Tarjeta", "Tarjeta"), ("TPV", "TPV"),
                        ("Bizum", "Bizum"), ("Por definir", "Por definir"),
                    ],
                    default="Por definir", max_length=20, verbose_name="Tipo de pago por defecto",
                )),
                ("periodicidad_defecto", models.CharField(
                    choices=[
                        ("Mensual", "Mensual"), ("Trimestral", "Trimestral"), ("Único", "Único"),
                        ("Manual", "Manual"), ("Por definir", "Por definir"), ("Sin periodicidad", "Sin periodicidad"),
                    ],
                    default="Mensual", max_length=20, verbose_name="Periodicidad por defecto",
                )),
                ("dia_cobro_defecto", models.PositiveSmallIntegerField(
                    default=1,
                    validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(28)],
                    verbose_name="Día de cobro por defecto",
                )),
                ("plazas_defecto_cursos", models.PositiveIntegerField(default=10, verbose_name="Plazas por defecto en cursos")),
                ("modulo_cumpleanos", models.BooleanField(default=True, verbose_name="Módulo de cumpleaños de alumnos")),
                ("notificar_cumpleanos_profesores", models.BooleanField(default=True, verbose_name="Avisar de cumpleaños al profesorado")),
                ("baas_url", models.URLField(blank=True, verbose_name="URL del backend")),
                ("baas_clave", models.CharField(blank=True, max_length=255, verbose_name="Clave pública del backend")),
            ],
            options={
                "verbose_name": "Perfil de la academia",
                "verbose_name_plural": "Perfil de la academia",
                "permissions": [("access_config_panel", "Puede acceder a la configuración de la academia")],
            },
        ),
    ]
