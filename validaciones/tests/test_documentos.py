from django.test import SimpleTestCase

from validaciones.documentos import (
    LETRAS_CONTROL,
    es_cif_valido,
    es_documento_valido,
    es_identificador_fiscal_valido,
    es_nie_valido,
    es_nif_persona_valido,
    letra_control,
)


class DocumentoTests(SimpleTestCase):
    def test_tabla_de_letras(self):
        self.assertEqual(len(LETRAS_CONTROL), 23)
        self.assertEqual(letra_control(12345678), "Z")
        self.assertEqual(letra_control(0), "T")

    def test_dni_valido(self):
        self.assertTrue(es_documento_valido("12345678Z"))
        self.assertTrue(es_documento_valido("12345678z"))
        self.assertTrue(es_documento_valido("00000000T"))

    def test_dni_letra_incorrecta(self):
        self.assertFalse(es_documento_valido("12345678A"))

    def test_dni_mal_formado(self):
        for valor in ["", "1234567Z", "123456789", "12345678 Z", " 12345678Z", "12345678Z\n", "ABCDEFGHZ", None, 12345678]:
            with self.subTest(valor=valor):
                self.assertFalse(es_documento_valido(valor))

    def test_nie(self):
        self.assertTrue(es_nie_valido("X1234567L"))
        self.assertTrue(es_nie_valido("x1234567l"))
        self.assertFalse(es_nie_valido("X1234567A"))
        self.assertFalse(es_nie_valido("W1234567L"))

    def test_cif_control_numerico(self):
        self.assertTrue(es_cif_valido("A58818501"))
        self.assertFalse(es_cif_valido("A58818502"))
        # A exige dígito
        self.assertFalse(es_cif_valido("A5881850A"))

    def test_cif_control_letra(self):
        self.assertTrue(es_cif_valido("Q2826000H"))
        # Q exige letra
        self.assertFalse(es_cif_valido("Q28260008"))

    def test_cif_entidad_mixta_acepta_ambos(self):
        # G: dígitos 5881850 -> control 1 / letra A
        self.assertTrue(es_cif_valido("G58818501"))
        self.assertTrue(es_cif_valido("G5881850A"))

    def test_cif_b_solo_admite_digito(self):
        self.assertTrue(es_cif_valido("B58818501"))
        self.assertFalse(es_cif_valido("B5881850A"))

    def test_nif_persona(self):
        self.assertTrue(es_nif_persona_valido(" 12345678z "))
        self.assertTrue(es_nif_persona_valido("X1234567L"))
        self.assertFalse(es_nif_persona_valido("A58818501"))

    def test_identificador_fiscal(self):
        for valor in ["12345678Z", "X1234567L", "A58818501"]:
            with self.subTest(valor=valor):
                self.assertTrue(es_identificador_fiscal_valido(valor))
        self.assertFalse(es_identificador_fiscal_valido("12345678A"))
