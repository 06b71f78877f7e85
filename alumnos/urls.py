from django.urls import path
from . import views

app_name = 'alumnos'

urlpatterns = [
    path('', views.AlumnoListView.as_view(), name='lista'),
    path('crear/', views.AlumnoCreateView.as_view(), name='crear'),
    path('<uuid:pk>/', views.AlumnoDetailView.as_view(), name='detalle'),
    path('<uuid:pk>/editar/', views.AlumnoUpdateView.as_view(), name='editar'),
    path('<uuid:pk>/eliminar/', views.AlumnoDeleteView.as_view(), name='eliminar'),
    path('<uuid:pk>/toggle-estado/', views.toggle_alumno_estado, name='toggle_estado'),
]
