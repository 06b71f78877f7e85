from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Role",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True, verbose_name="Nombre del Rol")),
                ("description", models.TextField(blank=True, null=True, verbose_name="Descripción")),
                ("permissions", models.ManyToManyField(blank=True, to="auth.permission", verbose_name="Permisos")),
            ],
            options={
                "verbose_name": "Rol",
                "verbose_name_plural": "Roles",
                "ordering": ["name"],
                "default_permissions": (),
                "permissions": [
                    ("access_roles_panel", "Puede acceder al panel de Roles"),
                    ("delete_roles", "Puede eliminar roles"),
                ],
            },
        ),
    ]
