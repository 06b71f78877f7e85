from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase

from navegacion.context_processors import menu_navegacion
from roles.models import Role
from usuarios.models import CustomUser


class MenuNavegacionTest(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.gestor = CustomUser.objects.create_user(
            email="gestor@academia.test", password="clave-123", first_name="G", last_name="F",
        )
        self.gestor.roles.add(Role.objects.create(name="Gestor Financiero"))

    def _contexto(self, user, path="/"):
        request = self.factory.get(path)
        request.user = user
        return menu_navegacion(request)

    def test_anonimo(self):
        self.assertEqual(self._contexto(AnonymousUser()), {"menu": [], "tema": "claro"})

    def test_entradas_del_gestor(self):
        contexto = self._contexto(self.gestor)
        titulos = [e["titulo"] for e in contexto["menu"]]
        self.assertEqual(titulos, ["Inicio", "Alumnos", "Cursos", "Recibos", "Gestoría"])
        self.assertEqual(contexto["tema"], CustomUser.Tema.CLARO)

    def test_inicio_activo_solo_en_raiz(self):
        menu = self._contexto(self.gestor, "/recibos/")["menu"]
        self.assertFalse(menu[0]["activo"])

    def test_padre_activo_con_hijo_activo(self):
        menu = self._contexto(self.gestor, "/recibos/crear/")["menu"]
        recibos = next(e for e in menu if e["titulo"] == "Recibos")
        self.assertTrue(recibos["activo"])
        self.assertEqual([h["activo"] for h in recibos["hijos"]], [False, True])

    def test_superusuario_ve_todo(self):
        admin = CustomUser.objects.create_superuser(email="root@academia.test", password="clave-123")
        titulos = [e["titulo"] for e in self._contexto(admin)["menu"]]
        self.assertIn("Administración", titulos)
        self.assertIn("Gestoría", titulos)
