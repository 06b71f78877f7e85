from django.test import SimpleTestCase
from django.urls import resolve, reverse

from cursos import views


class TestUrls(SimpleTestCase):
    def test_cuadro_aulas(self):
        self.assertEqual(resolve(reverse("cursos:cuadro_aulas")).func, views.cuadro_aulas)

    def test_inscribir_y_baja(self):
        self.assertEqual(resolve(reverse("cursos:inscribir", args=[1])).func, views.inscribir_alumno)
        self.assertEqual(resolve(reverse("cursos:baja_inscripcion", args=[1])).func, views.dar_baja_inscripcion)

    def test_horas_profesor(self):
        url = reverse("cursos:horas_profesor", args=[7])
        self.assertEqual(url, "/cursos/profesores/7/horas/")
        self.assertEqual(resolve(url).func, views.horas_profesor)
