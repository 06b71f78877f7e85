import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("alumnos", "0001_initial"),
        ("cursos", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="RegistroAsistencia",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("asistio", models.BooleanField(default=True, verbose_name="Asistió")),
                ("retraso", models.CharField(
                    choices=[("No", "No"), ("5 min", "5 min"), ("10 min", "10 min"),
                             ("15 min", "15 min"), ("+15 min", "Más de 15 min")],
                    default="No", max_length=10, verbose_name="Retraso",
                )),
                ("falta_justificada", models.BooleanField(default=False, verbose_name="Falta justificada")),
                ("deberes_hechos", models.BooleanField(default=False, verbose_name="Deberes hechos")),
                ("comentarios", models.TextField(blank=True, verbose_name="Comentarios")),
                ("estado", models.CharField(
                    choices=[("Pendiente", "Pendiente"), ("Realizado", "Realizado"), ("Anulado", "Anulado")],
                    default="Pendiente", max_length=12, verbose_name="Estado",
                )),
                ("alumno", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="asistencias", to="alumnos.alumno")),
                ("clase", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="registros", to="cursos.clase")),
            ],
            options={
                "verbose_name": "Registro de asistencia",
                "verbose_name_plural": "Registros de asistencia",
                "permissions": [("access_asistencia", "Puede pasar lista y consultar asistencia")],
                "unique_together": {("clase", "alumno")},
            },
        ),
    ]
