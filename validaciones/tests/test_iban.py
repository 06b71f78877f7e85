from django.test import SimpleTestCase

from validaciones.iban import BIC_POR_CODIGO_BANCO, es_iban_valido, normalizar_iban, resolver_bic

IBAN_CAIXA = "ES9121000418450200051332"


class IbanTests(SimpleTestCase):
    def test_iban_valido(self):
        self.assertTrue(es_iban_valido(IBAN_CAIXA))

    def test_iban_con_espacios_y_minusculas(self):
        self.assertTrue(es_iban_valido("es91 2100 0418 4502 0005 1332"))

    def test_ultimo_digito_alterado(self):
        self.assertFalse(es_iban_valido("ES9121000418450200051333"))

    def test_formato_incorrecto(self):
        for valor in ["", "ES91", "ES91210004184502000513321", "1291210004184502000513AB", None]:
            with self.subTest(valor=valor):
                self.assertFalse(es_iban_valido(valor))

    def test_normalizar(self):
        self.assertEqual(normalizar_iban(" es91 2100\t0418 "), "ES9121000418")


class ResolverBicTests(SimpleTestCase):
    def test_tabla_completa(self):
        self.assertEqual(len(BIC_POR_CODIGO_BANCO), 10)
        self.assertEqual(BIC_POR_CODIGO_BANCO["0238"], "PSTESMMXXX")

    def test_entidad_conocida(self):
        self.assertEqual(resolver_bic(IBAN_CAIXA), "CAIXESBBXXX")
        self.assertEqual(resolver_bic("ES0000491234"), "BSCHESMMXXX")

    def test_entidad_desconocida(self):
        self.assertEqual(resolver_bic("ES0099991234567890123456"), "")

    def test_no_espanol_o_corto(self):
        self.assertEqual(resolver_bic("DE89370400440532013000"), "")
        self.assertEqual(resolver_bic("ES912100"), "")

    def test_no_comprueba_validez(self):
        self.assertEqual(resolver_bic("ES0021000418450200051332"), "CAIXESBBXXX")
