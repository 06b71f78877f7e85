from datetime import date
from decimal import Decimal

from django.contrib.auth.models import Permission
from django.test import TestCase
from django.urls import reverse

from alumnos.models import Alumno
from recibos.models import Factura, Recibo
from roles.models import Role
from usuarios.models import CustomUser


class RecibosViewsTest(TestCase):
    def setUp(self):
        rol = Role.objects.create(name="Gestor Financiero")
        rol.permissions.add(
            Permission.objects.get(codename="access_recibos_panel"),
            Permission.objects.get(codename="access_gestoria"),
        )
        self.gestor = CustomUser.objects.create_user(
            email="gestor@academia.test", password="clave-123", first_name="Gestor", last_name="Academia",
        )
        self.gestor.roles.add(rol)
        self.profesor = CustomUser.objects.create_user(
            email="profe@academia.test", password="clave-123", first_name="Profe", last_name="Academia",
        )

        self.alumno = Alumno.objects.create(
            nombre="Pablo", apellidos="Marín", dni="12345678Z",
            iban="ES9121000418450200051332", tipo_pago="Domiciliado", titular_cuenta="Pablo Marín",
        )
        self.cobrado = Recibo.objects.create(
            alumno=self.alumno, fecha=date(2024, 1, 5), concepto="Enero",
            importe=Decimal("60.00"), estado=Recibo.Estado.COBRADO, fecha_pago=date(2024, 1, 5),
        )
        self.pendiente = Recibo.objects.create(
            alumno=self.alumno, fecha=date(2024, 2, 5), concepto="Febrero", importe=Decimal("45.50"),
        )

    def test_lista_requiere_login(self):
        response = self.client.get(reverse("recibos:lista"))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("login"), response.url)

    def test_lista_sin_permiso_redirige_a_inicio(self):
        self.client.force_login(self.profesor)
        response = self.client.get(reverse("recibos:lista"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

    def test_lista_con_totales(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("recibos:lista"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["total"], Decimal("105.50"))
        self.assertEqual(response.context["total_cobrado"], Decimal("60.00"))
        self.assertEqual(response.context["total_pendiente"], Decimal("45.50"))

    def test_lista_filtra_por_estado(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("recibos:lista"), {"estado": "Pendiente"})
        self.assertEqual(list(response.context["recibos"]), [self.pendiente])
        self.assertEqual(response.context["total"], Decimal("45.50"))

    def test_marcar_cobrado(self):
        self.client.force_login(self.gestor)
        response = self.client.post(reverse("recibos:marcar_cobrado", args=[self.pendiente.pk]))
        self.assertRedirects(response, reverse("recibos:lista"), fetch_redirect_response=False)
        self.pendiente.refresh_from_db()
        self.assertEqual(self.pendiente.estado, Recibo.Estado.COBRADO)
        self.assertIsNotNone(self.pendiente.fecha_pago)

    def test_marcar_cobrado_solo_post(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("recibos:marcar_cobrado", args=[self.pendiente.pk]))
        self.assertEqual(response.status_code, 405)

    def test_recibo_pdf(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("recibos:pdf", args=[self.cobrado.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertTrue(response.content.startswith(b"%PDF"))

    def test_recibos_excel(self):
        self.client.force_login(self.gestor)
        response = self.client.get(reverse("recibos:excel"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response["Content-Type"],
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        self.assertIn("attachment;", response["Content-Disposition"])

    def test_crear_recibo(self):
        self.client.force_login(self.gestor)
        response = self.client.post(reverse("recibos:crear"), {
            "alumno": str(self.alumno.pk),
            "fecha": "2024-03-05",
            "concepto": "Marzo",
            "importe": "60.00",
            "estado": "Cobrado",
            "tipo_pago": "Efectivo",
        })
        self.assertRedirects(response, reverse("recibos:lista"), fetch_redirect_response=False)
        recibo = Recibo.objects.get(concepto="Marzo")
        self.assertEqual(recibo.fecha_pago, date(2024, 3, 5))

    def test_facturas_requieren_gestoria(self):
        rol = Role.objects.create(name="Solo recibos")
        rol.permissions.add(Permission.objects.get(codename="access_recibos_panel"))
        self.profesor.roles.add(rol)
        self.client.force_login(self.profesor)
        response = self.client.get(reverse("recibos:facturas"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

    def test_crear_factura_rechaza_nif_invalido(self):
        self.client.force_login(self.gestor)
        response = self.client.post(reverse("recibos:crear_factura"), {
            "tipo": "recibida", "numero": "P-1", "fecha": "2024-03-01", "tercero": "Proveedor",
            "nif_tercero": "A58818502", "base_imponible": "100", "importe_iva": "21",
            "importe_irpf": "0", "estado": "pendiente",
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn("nif_tercero", response.context["form"].errors)
        self.assertFalse(Factura.objects.exists())

    def test_crear_factura(self):
        self.client.force_login(self.gestor)
        response = self.client.post(reverse("recibos:crear_factura"), {
            "tipo": "recibida", "numero": "P-2", "fecha": "2024-03-01", "tercero": "Proveedor",
            "nif_tercero": "Q2826000H", "categoria": "Material", "base_imponible": "100",
            "importe_iva": "21", "importe_irpf": "0", "estado": "pendiente",
        })
        self.assertRedirects(response, reverse("recibos:facturas"), fetch_redirect_response=False)
        self.assertEqual(Factura.objects.get().total, Decimal("121.00"))
