from decimal import Decimal

from django.contrib.auth.models import Permission
from django.test import TestCase
from django.urls import reverse

from alumnos.models import Alumno, Tutor
from recibos.models import Recibo
from roles.models import Role
from usuarios.models import CustomUser


def datos_formulario(**extra):
    datos = {
        "nombre": "Marta",
        "apellidos": "Soler Vidal",
        "dni": "00000000T",
        "es_menor": "on",
        "tipo_pago": "Transferencia",
        "periodicidad": "Mensual",
        "dia_cobro": "1",
        "tipo_sepa": "recurrente",
        "activo": "on",
        "tutores-TOTAL_FORMS": "2",
        "tutores-INITIAL_FORMS": "0",
        "tutores-MIN_NUM_FORMS": "0",
        "tutores-MAX_NUM_FORMS": "2",
        "tutores-0-nif": "12345678Z",
        "tutores-0-nombre_completo": "Rosa Vidal",
        "tutores-0-telefono": "600000000",
    }
    datos.update(extra)
    return datos


class AlumnoViewsTest(TestCase):
    def setUp(self):
        rol = Role.objects.create(name="Coordinador académico")
        rol.permissions.add(Permission.objects.get(codename="access_alumnos_panel"))
        self.coordinador = CustomUser.objects.create_user(
            email="coord@academia.test", password="clave-123", first_name="Coord", last_name="Academia",
        )
        self.coordinador.roles.add(rol)
        self.sin_permiso = CustomUser.objects.create_user(
            email="alumno@academia.test", password="clave-123", first_name="Alu", last_name="Mno",
        )

        self.ana = Alumno.objects.create(nombre="Ana", apellidos="Bosch", dni="X1234567L", email="ana@correo.test")
        self.luis = Alumno.objects.create(nombre="Luis", apellidos="Arnau", activo=False, tipo_pago="Bizum")

    def test_lista_requiere_login(self):
        response = self.client.get(reverse("alumnos:lista"))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("login"), response.url)

    def test_lista_sin_permiso_redirige_a_inicio(self):
        self.client.force_login(self.sin_permiso)
        response = self.client.get(reverse("alumnos:lista"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

    def test_lista_ordenada_por_apellidos(self):
        self.client.force_login(self.coordinador)
        response = self.client.get(reverse("alumnos:lista"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["alumnos"]), [self.luis, self.ana])

    def test_lista_busca_y_filtra(self):
        self.client.force_login(self.coordinador)
        response = self.client.get(reverse("alumnos:lista"), {"q": "x1234"})
        self.assertEqual(list(response.context["alumnos"]), [self.ana])

        response = self.client.get(reverse("alumnos:lista"), {"activo": "false"})
        self.assertEqual(list(response.context["alumnos"]), [self.luis])

        response = self.client.get(reverse("alumnos:lista"), {"tipo_pago": "Bizum"})
        self.assertEqual(list(response.context["alumnos"]), [self.luis])

    def test_detalle(self):
        self.client.force_login(self.coordinador)
        response = self.client.get(reverse("alumnos:detalle", args=[self.ana.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["alumno"], self.ana)

    def test_crear_alumno_con_tutor(self):
        self.client.force_login(self.coordinador)
        response = self.client.post(reverse("alumnos:crear"), datos_formulario())
        alumno = Alumno.objects.get(apellidos="Soler Vidal")
        self.assertRedirects(response, reverse("alumnos:detalle", args=[alumno.pk]), fetch_redirect_response=False)
        self.assertEqual(alumno.tutores.count(), 1)
        self.assertEqual(alumno.tutores.get().nif, "12345678Z")

    def test_tutor_invalido_no_guarda_nada(self):
        self.client.force_login(self.coordinador)
        response = self.client.post(reverse("alumnos:crear"), datos_formulario(**{"tutores-0-nif": "12345678A"}))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Alumno.objects.filter(apellidos="Soler Vidal").exists())
        self.assertFalse(Tutor.objects.exists())

    def test_editar_alumno(self):
        self.client.force_login(self.coordinador)
        datos = datos_formulario(nombre="Ana", apellidos="Bosch Pla", dni="X1234567L")
        response = self.client.post(reverse("alumnos:editar", args=[self.ana.pk]), datos)
        self.assertRedirects(response, reverse("alumnos:detalle", args=[self.ana.pk]), fetch_redirect_response=False)
        self.ana.refresh_from_db()
        self.assertEqual(self.ana.apellidos, "Bosch Pla")

    def test_toggle_estado(self):
        self.client.force_login(self.coordinador)
        response = self.client.post(reverse("alumnos:toggle_estado", args=[self.ana.pk]))
        self.assertRedirects(response, reverse("alumnos:lista"), fetch_redirect_response=False)
        self.ana.refresh_from_db()
        self.assertFalse(self.ana.activo)

    def test_toggle_estado_solo_post(self):
        self.client.force_login(self.coordinador)
        response = self.client.get(reverse("alumnos:toggle_estado", args=[self.ana.pk]))
        self.assertEqual(response.status_code, 405)

    def test_eliminar_alumno(self):
        self.client.force_login(self.coordinador)
        response = self.client.post(reverse("alumnos:eliminar", args=[self.luis.pk]))
        self.assertRedirects(response, reverse("alumnos:lista"), fetch_redirect_response=False)
        self.assertFalse(Alumno.objects.filter(pk=self.luis.pk).exists())

    def test_no_elimina_alumno_con_recibos(self):
        Recibo.objects.create(alumno=self.ana, concepto="Matrícula", importe=Decimal("30.00"))
        self.client.force_login(self.coordinador)
        response = self.client.post(reverse("alumnos:eliminar", args=[self.ana.pk]))
        self.assertRedirects(response, reverse("alumnos:detalle", args=[self.ana.pk]), fetch_redirect_response=False)
        self.assertTrue(Alumno.objects.filter(pk=self.ana.pk).exists())
