import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import validaciones.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("alumnos", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Aula",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=100, unique=True, verbose_name="Nombre")),
                ("capacidad", models.PositiveIntegerField(blank=True, null=True, verbose_name="Capacidad")),
                ("ubicacion", models.CharField(blank=True, max_length=150, verbose_name="Ubicación")),
                ("color", models.CharField(default="#3b82f6", max_length=7, verbose_name="Color")),
                ("orden", models.PositiveIntegerField(default=0, verbose_name="Orden en el cuadro")),
            ],
            options={
                "verbose_name": "Aula",
                "verbose_name_plural": "Aulas",
                "ordering": ["orden", "nombre"],
                "permissions": [("access_cuadro_aulas", "Puede ver el cuadro de aulas")],
            },
        ),
        migrations.CreateModel(
            name="Profesor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=100, verbose_name="Nombre")),
                ("apellidos", models.CharField(max_length=150, verbose_name="Apellidos")),
                ("nif", models.CharField(blank=True, max_length=20, validators=[validaciones.validators.validar_nif_persona], verbose_name="DNI/NIE")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="Correo electrónico")),
                ("telefono", models.CharField(blank=True, max_length=30, verbose_name="Teléfono")),
                ("activo", models.BooleanField(default=True, verbose_name="Activo")),
                ("usuario", models.OneToOneField(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="profesor", to=settings.AUTH_USER_MODEL, verbose_name="Usuario del back office",
                )),
            ],
            options={
                "verbose_name": "Profesor",
                "verbose_name_plural": "Profesores",
                "ordering": ["apellidos", "nombre"],
                "permissions": [("access_profesores_panel", "Puede gestionar profesores")],
            },
        ),
        migrations.CreateModel(
            name="Curso",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=150, verbose_name="Nombre")),
                ("nivel", models.CharField(blank=True, max_length=50, verbose_name="Nivel")),
                ("descripcion", models.TextField(blank=True, verbose_name="Descripción")),
                ("modalidad", models.CharField(
                    choices=[("Presencial", "Presencial"), ("Online", "Online"), ("Mixta", "Mixta")],
                    default="Presencial", max_length=20, verbose_name="Modalidad",
                )),
                ("capacidad_minima", models.PositiveIntegerField(default=1, verbose_name="Capacidad mínima")),
                ("capacidad_maxima", models.PositiveIntegerField(default=10, verbose_name="Capacidad máxima")),
                ("estado", models.CharField(
                    choices=[("Activo", "Activo"), ("Archivado", "Archivado"), ("Completado", "Completado")],
                    default="Activo", max_length=20, verbose_name="Estado",
                )),
                ("fecha_inicio", models.DateField(blank=True, null=True, verbose_name="Fecha de inicio")),
                ("fecha_fin", models.DateField(blank=True, null=True, verbose_name="Fecha de fin")),
                ("aula", models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="cursos", to="cursos.aula", verbose_name="Aula",
                )),
                ("profesor", models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="cursos", to="cursos.profesor", verbose_name="Profesor",
                )),
            ],
            options={
                "verbose_name": "Curso",
                "verbose_name_plural": "Cursos",
                "ordering": ["nombre"],
                "permissions": [("access_cursos_panel", "Puede acceder a la gestión de cursos")],
            },
        ),
        migrations.CreateModel(
            name="Inscripcion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fecha_inscripcion", models.DateField(default=django.utils.timezone.localdate, verbose_name="Fecha de inscripción")),
                ("activa", models.BooleanField(default=True, verbose_name="Activa")),
                ("fecha_baja", models.DateField(blank=True, null=True, verbose_name="Fecha de baja")),
                ("alumno", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="inscripciones", to="alumnos.alumno")),
                ("curso", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="inscripciones", to="cursos.curso")),
            ],
            options={
                "verbose_name": "Inscripción",
                "verbose_name_plural": "Inscripciones",
                "ordering": ["-fecha_inscripcion"],
            },
        ),
        migrations.CreateModel(
            name="Clase",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fecha", models.DateField(verbose_name="Fecha")),
                ("hora_inicio", models.TimeField(verbose_name="Hora de inicio")),
                ("hora_fin", models.TimeField(verbose_name="Hora de fin")),
                ("es_sustitucion", models.BooleanField(default=False, verbose_name="Sustitución")),
                ("estado", models.CharField(
                    choices=[("Hecha", "Hecha"), ("Pendiente", "Pendiente"), ("Anulada", "Anulada")],
                    default="Pendiente", max_length=20, verbose_name="Estado",
                )),
                ("comentario_interno", models.TextField(blank=True, verbose_name="Comentario interno")),
                ("aula", models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="clases", to="cursos.aula", verbose_name="Aula",
                )),
                ("curso", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="clases", to="cursos.curso")),
                ("profesor", models.ForeignKey(
                    blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                    related_name="clases", to="cursos.profesor", verbose_name="Profesor",
                )),
            ],
            options={
                "verbose_name": "Clase",
                "verbose_name_plural": "Clases",
                "ordering": ["fecha", "hora_inicio"],
            },
        ),
    ]
