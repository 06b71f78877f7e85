from django.test import TestCase

from alumnos.forms import AlumnoForm, AlumnoSearchForm, TutorForm


def datos_alumno(**extra):
    datos = {
        "nombre": "Lucía",
        "apellidos": "Ferrer Gil",
        "dni": "12345678z",
        "tipo_pago": "Efectivo",
        "periodicidad": "Mensual",
        "dia_cobro": 5,
        "tipo_sepa": "recurrente",
        "activo": True,
    }
    datos.update(extra)
    return datos


class AlumnoFormTest(TestCase):
    def test_formulario_valido_normaliza_dni(self):
        form = AlumnoForm(data=datos_alumno())
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["dni"], "12345678Z")

    def test_dni_invalido(self):
        form = AlumnoForm(data=datos_alumno(dni="12345678A"))
        self.assertFalse(form.is_valid())
        self.assertIn("dni", form.errors)

    def test_acepta_nie(self):
        form = AlumnoForm(data=datos_alumno(dni="X1234567L"))
        self.assertTrue(form.is_valid(), form.errors)

    def test_domiciliado_exige_iban_y_titular(self):
        form = AlumnoForm(data=datos_alumno(tipo_pago="Domiciliado"))
        self.assertFalse(form.is_valid())
        self.assertIn("iban", form.errors)
        self.assertIn("titular_cuenta", form.errors)

    def test_iban_invalido(self):
        form = AlumnoForm(data=datos_alumno(iban="ES9121000418450200051333"))
        self.assertFalse(form.is_valid())
        self.assertIn("iban", form.errors)

    def test_bic_se_deduce_del_iban(self):
        form = AlumnoForm(data=datos_alumno(
            tipo_pago="Domiciliado",
            titular_cuenta="Lucía Ferrer",
            iban="ES91 2100 0418 4502 0005 1332",
        ))
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["iban"], "ES9121000418450200051332")
        self.assertEqual(form.cleaned_data["bic"], "CAIXESBBXXX")

    def test_bic_indicado_no_se_sobrescribe(self):
        form = AlumnoForm(data=datos_alumno(iban="ES9121000418450200051332", bic="OTROESMMXXX"))
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["bic"], "OTROESMMXXX")

    def test_dia_de_cobro_fuera_de_rango(self):
        form = AlumnoForm(data=datos_alumno(dia_cobro=30))
        self.assertFalse(form.is_valid())
        self.assertIn("dia_cobro", form.errors)


class TutorFormTest(TestCase):
    def test_nif_obligatorio_y_valido(self):
        form = TutorForm(data={"nif": "00000000A", "nombre_completo": "Ana Gil"})
        self.assertFalse(form.is_valid())
        self.assertIn("nif", form.errors)

        form = TutorForm(data={"nif": "00000000t", "nombre_completo": "Ana Gil"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["nif"], "00000000T")


class AlumnoSearchFormTest(TestCase):
    def test_campos_opcionales(self):
        self.assertTrue(AlumnoSearchForm(data={}).is_valid())
        self.assertTrue(AlumnoSearchForm(data={"activo": "false", "tipo_pago": "Bizum"}).is_valid())
