from django.urls import path
from . import views

app_name = 'cursos'

urlpatterns = [
    path('', views.CursoListView.as_view(), name='lista'),
    path('crear/', views.CursoCreateView.as_view(), name='crear'),
    path('<int:pk>/', views.CursoDetailView.as_view(), name='detalle'),
    path('<int:pk>/editar/', views.CursoUpdateView.as_view(), name='editar'),
    path('<int:pk>/eliminar/', views.CursoDeleteView.as_view(), name='eliminar'),
    path('<int:pk>/inscribir/', views.inscribir_alumno, name='inscribir'),
    path('<int:pk>/clases/nueva/', views.crear_clase, name='crear_clase'),
    path('inscripciones/<int:pk>/baja/', views.dar_baja_inscripcion, name='baja_inscripcion'),
    path('cuadro-aulas/', views.cuadro_aulas, name='cuadro_aulas'),
    path('profesores/', views.ProfesorListView.as_view(), name='profesores'),
    path('profesores/crear/', views.ProfesorCreateView.as_view(), name='crear_profesor'),
    path('profesores/<int:pk>/editar/', views.ProfesorUpdateView.as_view(), name='editar_profesor'),
    path('profesores/<int:pk>/horas/', views.horas_profesor, name='horas_profesor'),
]
