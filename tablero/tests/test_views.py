from datetime import date
from decimal import Decimal

from django.contrib.auth.models import Permission
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from alumnos.models import Alumno
from configuracion.models import PerfilAcademia
from recibos.models import Factura, Recibo
from roles.models import NombreRol, Role
from usuarios.models import CustomUser


def _usuario(email, rol=None, *codenames):
    user = CustomUser.objects.create_user(email=email, password="clave-123", first_name="Test", last_name="User")
    if rol:
        role, _ = Role.objects.get_or_create(name=rol)
        role.permissions.add(*Permission.objects.filter(codename__in=codenames))
        user.roles.add(role)
    return user


class HomeViewTest(TestCase):
    def setUp(self):
        self.gestor = _usuario(
            "gestor@academia.test", NombreRol.GESTOR_FINANCIERO, "access_recibos_panel", "access_gestoria",
        )
        self.sin_roles = _usuario("nadie@academia.test")
        self.alumno = Alumno.objects.create(nombre="Irene", apellidos="Soto")
        Recibo.objects.create(alumno=self.alumno, fecha=date(2024, 2, 10), concepto="Feb", importe=Decimal("50"),
                              estado=Recibo.Estado.COBRADO)
        Recibo.objects.create(alumno=self.alumno, fecha=date(2024, 2, 11), concepto="Feb 2", importe=Decimal("20"))

    def test_requiere_login(self):
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 302)

    def test_usuario_sin_permisos_ve_tablero_vacio(self):
        self.client.force_login(self.sin_roles)
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("recibos_mes", response.context)
        self.assertNotIn("cumpleanos", response.context)

    def test_gestor_ve_recibos_por_mes(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("home"), {"anio": "2024"})
        self.assertEqual(response.status_code, 200)
        febrero = response.context["recibos_mes"][1]
        self.assertEqual(febrero["cobrado"], Decimal("50"))
        self.assertEqual(febrero["pendiente"], Decimal("20"))

    def test_anio_invalido_usa_el_actual(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("home"), {"anio": "abc"})
        self.assertEqual(response.context["anio"], timezone.localdate().year)

    def test_cumpleanos_segun_perfil(self):
        # 2008 es bisiesto: vale también si hoy es 29 de febrero
        nacimiento = timezone.localdate().replace(year=2008)
        Alumno.objects.filter(pk=self.alumno.pk).update(fecha_nacimiento=nacimiento)
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("home"))
        self.assertEqual([a.pk for a in response.context["cumpleanos"]], [self.alumno.pk])

        perfil = PerfilAcademia.obtener()
        perfil.modulo_cumpleanos = False
        perfil.save()
        response = self.client.get(reverse("home"))
        self.assertNotIn("cumpleanos", response.context)


class DashboardFinancieroTest(TestCase):
    def setUp(self):
        self.gestor = _usuario("gestor@academia.test", NombreRol.GESTOR_FINANCIERO, "access_gestoria")
        self.profesor = _usuario("profe@academia.test", NombreRol.PROFESOR)
        Factura.objects.create(tipo="emitida", numero="E-1", fecha=date(2024, 5, 3), tercero="Cliente",
                               base_imponible=Decimal("1000"), importe_iva=Decimal("210"))
        Factura.objects.create(tipo="recibida", numero="R-1", fecha=date(2024, 5, 8), tercero="Proveedor",
                               base_imponible=Decimal("400"), categoria="Alquiler")
        Factura.objects.create(tipo="emitida", numero="E-0", fecha=date(2024, 4, 3), tercero="Cliente",
                               base_imponible=Decimal("500"), estado="pagada")

    def test_sin_permiso(self):
        self.client.force_login(self.profesor)
        response = self.client.get(reverse("tablero:financiero"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

    def test_periodo_mes(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("tablero:financiero"), {"periodo": "month", "fecha": "2024-05-20"})
        self.assertEqual(response.status_code, 200)
        resumen = response.context["resumen"]
        self.assertEqual(resumen["actual"]["ingresos"], Decimal("1000"))
        self.assertEqual(resumen["actual"]["gastos"], Decimal("400"))
        self.assertEqual(resumen["anterior"]["ingresos"], Decimal("500"))
        self.assertEqual(resumen["variacion"]["ingresos"], 100.0)
        self.assertEqual(response.context["gastos_categoria"][0]["categoria"], "Alquiler")
        self.assertEqual(response.context["pendientes"]["emitida"]["cantidad"], 1)
        self.assertEqual(response.context["fecha_anterior"], "2024-04-30")
        self.assertEqual(response.context["fecha_siguiente"], "2024-06-01")

    def test_periodo_desconocido_usa_mes(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("tablero:financiero"), {"periodo": "semana", "fecha": "2024-05-20"})
        self.assertEqual(response.context["periodo"], "month")

    def test_periodo_anio(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("tablero:financiero"), {"periodo": "year", "fecha": "2024-05-20"})
        self.assertEqual(len(response.context["evolucion"]), 12)
        self.assertEqual(response.context["resumen"]["actual"]["ingresos"], Decimal("1500"))

    def test_fechas_en_el_limite_del_calendario_usan_hoy(self):
        self.client.force_login(self.gestor)
        hoy = timezone.localdate()
        for periodo, fecha in [("year", "9999-06-01"), ("month", "9999-12-15"), ("month", "0001-01-15")]:
            with self.subTest(periodo=periodo, fecha=fecha):
                response = self.client.get(reverse("tablero:financiero"), {"periodo": periodo, "fecha": fecha})
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.context["referencia"], hoy)


class RecibosMesExcelTest(TestCase):
    def test_descarga(self):
        gestor = _usuario("gestor@academia.test", NombreRol.GESTOR_FINANCIERO, "access_recibos_panel")
        self.client.force_login(gestor)
        response = self.client.get(reverse("tablero:recibos_mes_excel"), {"anio": "2024"})
        self.assertEqual(response.status_code, 200)
        self.assertIn("recibos_por_mes_2024.xlsx", response["Content-Disposition"])

    def test_sin_permiso(self):
        self.client.force_login(_usuario("nadie@academia.test"))
        response = self.client.get(reverse("tablero:recibos_mes_excel"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)
