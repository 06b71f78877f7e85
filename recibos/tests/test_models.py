from datetime import date
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase

from alumnos.models import Alumno, TipoPago
from recibos.models import Factura, Recibo


class ReciboModelTest(TestCase):
    def setUp(self):
        self.alumno = Alumno.objects.create(nombre="Lucía", apellidos="Gómez Ruiz", dni="12345678z")

    def test_codigo_generado_al_guardar(self):
        recibo = Recibo.objects.create(
            alumno=self.alumno, fecha=date(2024, 3, 5), concepto="Marzo", importe=Decimal("60.00")
        )
        self.assertEqual(recibo.codigo, f"REC-2024-{recibo.pk:06d}")

    def test_codigo_con_fecha_en_texto(self):
        recibo = Recibo(alumno=self.alumno, concepto="Mayo", importe=Decimal("60"))
        recibo.fecha = "2023-05-02"
        recibo.save()
        self.assertEqual(recibo.fecha, date(2023, 5, 2))
        self.assertEqual(recibo.codigo, f"REC-2023-{recibo.pk:06d}")

    def test_codigo_manual_se_respeta(self):
        recibo = Recibo.objects.create(
            alumno=self.alumno, concepto="Matrícula", importe=Decimal("30.00"), codigo="MAT-01"
        )
        recibo.refresh_from_db()
        self.assertEqual(recibo.codigo, "MAT-01")

    def test_estado_por_defecto_pendiente(self):
        recibo = Recibo.objects.create(alumno=self.alumno, concepto="Abril", importe=Decimal("60"))
        self.assertEqual(recibo.estado, Recibo.Estado.PENDIENTE)
        self.assertIsNone(recibo.fecha_pago)

    def test_marcar_cobrado(self):
        recibo = Recibo.objects.create(alumno=self.alumno, concepto="Mayo", importe=Decimal("60"))
        recibo.marcar_cobrado(fecha=date(2024, 5, 10), tipo_pago=TipoPago.BIZUM)
        recibo.refresh_from_db()
        self.assertEqual(recibo.estado, Recibo.Estado.COBRADO)
        self.assertEqual(recibo.fecha_pago, date(2024, 5, 10))
        self.assertEqual(recibo.tipo_pago, TipoPago.BIZUM)


class FacturaModelTest(TestCase):
    def test_total_calculado(self):
        factura = Factura.objects.create(
            tipo=Factura.Tipo.RECIBIDA, numero="F-001", tercero="Papelería Sol",
            base_imponible=Decimal("100.00"), importe_iva=Decimal("21.00"), importe_irpf=Decimal("15.00"),
        )
        self.assertEqual(factura.total, Decimal("106.00"))

    def test_nif_normalizado(self):
        factura = Factura.objects.create(
            tipo=Factura.Tipo.EMITIDA, numero="E-001", tercero="Empresa", nif_tercero=" a58818501 ",
            base_imponible=Decimal("50"),
        )
        self.assertEqual(factura.nif_tercero, "A58818501")

    def test_nif_invalido_no_pasa_validacion(self):
        factura = Factura(
            tipo=Factura.Tipo.EMITIDA, numero="E-002", tercero="Empresa", nif_tercero="A58818502",
            base_imponible=Decimal("50"),
        )
        with self.assertRaises(ValidationError):
            factura.full_clean()

    def test_numero_unico_por_tipo(self):
        Factura.objects.create(tipo=Factura.Tipo.EMITIDA, numero="X-1", tercero="A", base_imponible=Decimal("1"))
        Factura.objects.create(tipo=Factura.Tipo.RECIBIDA, numero="X-1", tercero="B", base_imponible=Decimal("1"))
        with self.assertRaises(IntegrityError):
            Factura.objects.create(tipo=Factura.Tipo.EMITIDA, numero="X-1", tercero="C", base_imponible=Decimal("1"))
