# roles/tests/test_views.py
from django.contrib.auth.models import Permission
from django.test import Client, TestCase
from django.urls import reverse

from roles.models import Role
from usuarios.models import CustomUser

HTTP_STATUS_TEXT = {
    200: "Página cargada correctamente",
    302: "Redirección a otra página",
    403: "Acceso prohibido",
    404: "Página o recurso no encontrado",
}


class RoleViewsTestCase(TestCase):
    def setUp(self):
        self.client = Client()

        self.admin_user = CustomUser.objects.create_user(
            email="admin@academia.test",
            password="12345",
            first_name="Admin",
            last_name="User",
        )
        self.normal_user = CustomUser.objects.create_user(
            email="profe@academia.test",
            password="12345",
            first_name="Normal",
            last_name="User",
        )

        perm_roles_panel = Permission.objects.get(codename="access_roles_panel")
        perm_user_mgmt = Permission.objects.get(codename="access_user_management")

        self.role_admin_test = Role.objects.create(name="Rol Admin Test")
        self.role_admin_test.permissions.set([perm_roles_panel, perm_user_mgmt])
        self.admin_user.roles.add(self.role_admin_test)

        self.role_profesor = Role.objects.create(name="Profesor", description="Docente")

    def assertStatus(self, response, expected_status, msg=""):
        message = msg or (
            f"Status recibido: {response.status_code} "
            f"({HTTP_STATUS_TEXT.get(response.status_code, 'Desconocido')}), se esperaba {expected_status}."
        )
        self.assertEqual(response.status_code, expected_status, message)

    def test_role_panel_access_with_login(self):
        self.client.force_login(self.admin_user)
        response = self.client.get(reverse("roles:role-panel"))
        self.assertStatus(response, 200)
        self.assertIn("usuarios", response.context)

    def test_role_panel_access_without_login(self):
        response = self.client.get(reverse("roles:role-panel"))
        self.assertStatus(response, 302)

    def test_role_panel_sin_permiso_redirige_a_inicio(self):
        self.client.force_login(self.normal_user)
        response = self.client.get(reverse("roles:role-panel"))
        self.assertRedirects(response, reverse("home"))

    def test_manage_user_roles_post_assign(self):
        self.client.force_login(self.admin_user)
        response = self.client.post(
            reverse("roles:manage-user-roles", kwargs={"user_id": self.normal_user.id}),
            {"roles": [self.role_profesor.id]}
        )
        self.assertStatus(response, 302)
        self.assertIn(self.role_profesor, self.normal_user.roles.all())

    def test_manage_user_roles_post_clear(self):
        self.normal_user.roles.add(self.role_profesor)
        self.client.force_login(self.admin_user)
        response = self.client.post(
            reverse("roles:manage-user-roles", kwargs={"user_id": self.normal_user.id}),
            {"roles": []}
        )
        self.assertStatus(response, 302)
        self.assertEqual(self.normal_user.roles.count(), 0)

    def test_manage_user_roles_not_found(self):
        self.client.force_login(self.admin_user)
        response = self.client.get(reverse("roles:manage-user-roles", kwargs={"user_id": 999}))
        self.assertStatus(response, 404)
