from django.test import SimpleTestCase
from django.urls import resolve, reverse

from recibos import views


class TestUrls(SimpleTestCase):
    def test_lista_recibos(self):
        self.assertEqual(resolve(reverse("recibos:lista")).func, views.lista_recibos)

    def test_pdf_y_excel(self):
        self.assertEqual(resolve(reverse("recibos:pdf", args=[3])).func, views.recibo_pdf)
        self.assertEqual(resolve(reverse("recibos:excel")).func, views.recibos_excel)

    def test_facturas(self):
        match = resolve(reverse("recibos:facturas"))
        self.assertEqual(match.func.view_class, views.FacturaListView)
