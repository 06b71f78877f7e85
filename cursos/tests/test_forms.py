from datetime import date

from django.test import TestCase

from alumnos.models import Alumno
from cursos.forms import ClaseForm, CursoForm, InscripcionForm, ProfesorForm
from cursos.models import Curso, Inscripcion


class CursoFormTest(TestCase):
    def datos(self, **extra):
        datos = {
            "nombre": "Inglés B2",
            "modalidad": "Presencial",
            "capacidad_minima": 3,
            "capacidad_maxima": 8,
            "estado": "Activo",
        }
        datos.update(extra)
        return datos

    def test_valido(self):
        self.assertTrue(CursoForm(data=self.datos()).is_valid())

    def test_capacidad_maxima_menor_que_minima(self):
        form = CursoForm(data=self.datos(capacidad_minima=9))
        self.assertFalse(form.is_valid())
        self.assertIn("capacidad_maxima", form.errors)

    def test_fecha_fin_anterior_a_inicio(self):
        form = CursoForm(data=self.datos(fecha_inicio="2024-09-01", fecha_fin="2024-06-30"))
        self.assertFalse(form.is_valid())
        self.assertIn("fecha_fin", form.errors)


class ClaseFormTest(TestCase):
    def test_hora_fin_posterior_a_inicio(self):
        form = ClaseForm(data={
            "fecha": "2024-03-04", "hora_inicio": "18:00", "hora_fin": "17:00", "estado": "Pendiente",
        })
        self.assertFalse(form.is_valid())
        self.assertIn("hora_fin", form.errors)


class ProfesorFormTest(TestCase):
    def test_nif_invalido(self):
        form = ProfesorForm(data={"nombre": "Elena", "apellidos": "Costa", "nif": "12345678A"})
        self.assertFalse(form.is_valid())
        self.assertIn("nif", form.errors)

    def test_nif_vacio_permitido(self):
        form = ProfesorForm(data={"nombre": "Elena", "apellidos": "Costa", "activo": True})
        self.assertTrue(form.is_valid(), form.errors)


class InscripcionFormTest(TestCase):
    def setUp(self):
        self.curso = Curso.objects.create(nombre="Italiano A1", capacidad_maxima=1)
        self.alumno = Alumno.objects.create(nombre="Noa", apellidos="Prat")
        self.otro = Alumno.objects.create(nombre="Pau", apellidos="Serra")

    def test_inscribe_en_el_curso(self):
        form = InscripcionForm(data={"alumno": self.alumno.pk, "fecha_inscripcion": "2024-01-08"}, curso=self.curso)
        self.assertTrue(form.is_valid(), form.errors)
        inscripcion = form.save()
        self.assertEqual(inscripcion.curso, self.curso)
        self.assertEqual(inscripcion.fecha_inscripcion, date(2024, 1, 8))

    def test_rechaza_curso_completo(self):
        Inscripcion.objects.create(alumno=self.alumno, curso=self.curso)
        form = InscripcionForm(data={"alumno": self.otro.pk, "fecha_inscripcion": "2024-01-08"}, curso=self.curso)
        self.assertFalse(form.is_valid())
        self.assertIn("completo", form.non_field_errors()[0])

    def test_rechaza_inscripcion_duplicada(self):
        self.curso.capacidad_maxima = 5
        self.curso.save()
        Inscripcion.objects.create(alumno=self.alumno, curso=self.curso)
        form = InscripcionForm(data={"alumno": self.alumno.pk, "fecha_inscripcion": "2024-01-08"}, curso=self.curso)
        self.assertFalse(form.is_valid())
        self.assertIn("alumno", form.errors)

    def test_solo_alumnos_activos(self):
        self.otro.activo = False
        self.otro.save()
        form = InscripcionForm(curso=self.curso)
        self.assertNotIn(self.otro, form.fields["alumno"].queryset)
