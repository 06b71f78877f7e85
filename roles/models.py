"""
Módulo de modelos para la aplicación **Roles**.

Contiene la definición del modelo Role, que agrupa permisos y se asigna
a los usuarios del back office, y los nombres canónicos de los roles de
la academia.

Modelos incluidos:
    - NombreRol
    - Role
"""
from django.contrib.auth.models import Permission
from django.db import models


class NombreRol(models.TextChoices):
    """Roles con los que trabaja la academia."""
    ADMINISTRADOR = "Administrador", "Administrador"
    COORDINADOR = "Coordinador académico", "Coordinador académico"
    PROFESOR = "Profesor", "Profesor"
    ALUMNO = "Alumno", "Alumno"
    GESTOR_FINANCIERO = "Gestor Financiero", "Gestor Financiero"


class Role(models.Model):
    """
    Representa un **rol de usuario** que agrupa permisos específicos.

    El nombre del rol también decide qué entradas del menú lateral ve el
    usuario (ver :mod:`navegacion.menu`).

    :param str name: Nombre único del rol.
    :param str description: Descripción opcional del rol.
    :param permissions: Conjunto de permisos asignados al rol.
    :type permissions: ManyToManyField[Permission]
    """
    name = models.CharField(max_length=100, unique=True, verbose_name="Nombre del Rol")
    description = models.TextField(blank=True, null=True, verbose_name="Descripción")
    permissions = models.ManyToManyField(
        Permission,
        verbose_name="Permisos",
        blank=True,
    )

    class Meta:
        verbose_name = "Rol"
        verbose_name_plural = "Roles"
        ordering = ["name"]
        default_permissions = ()
        permissions = [
            ("access_roles_panel", "Puede acceder al panel de Roles"),
            ("delete_roles", "Puede eliminar roles"),
        ]

    def __str__(self):
        return self.name
