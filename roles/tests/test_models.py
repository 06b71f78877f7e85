# roles/tests/test_models.py
from django.contrib.auth.models import Permission
from django.test import TestCase

from roles.models import NombreRol, Role


class RoleModelTest(TestCase):
    def setUp(self):
        self.permission = Permission.objects.get(codename="access_roles_panel")
        self.role = Role.objects.create(
            name=NombreRol.COORDINADOR,
            description="Gestión académica."
        )
        self.role.permissions.add(self.permission)

    def test_role_creation(self):
        self.assertEqual(self.role.name, "Coordinador académico")
        self.assertEqual(self.role.description, "Gestión académica.")

    def test_role_permissions_assigned(self):
        self.assertIn(self.permission, self.role.permissions.all())

    def test_role_str(self):
        self.assertEqual(str(self.role), "Coordinador académico")

    def test_role_meta_config(self):
        self.assertEqual(Role._meta.verbose_name, "Rol")
        self.assertEqual(Role._meta.verbose_name_plural, "Roles")

    def test_nombres_canonicos(self):
        self.assertEqual(
            set(NombreRol.values),
            {"Administrador", "Coordinador académico", "Profesor", "Alumno", "Gestor Financiero"},
        )
