from django.urls import path
from . import views

app_name = 'recibos'

urlpatterns = [
    path('', views.lista_recibos, name='lista'),
    path('crear/', views.ReciboCreateView.as_view(), name='crear'),
    path('excel/', views.recibos_excel, name='excel'),
    path('<int:pk>/editar/', views.ReciboUpdateView.as_view(), name='editar'),
    path('<int:pk>/cobrar/', views.marcar_cobrado, name='marcar_cobrado'),
    path('<int:pk>/pdf/', views.recibo_pdf, name='pdf'),
    path('facturas/', views.FacturaListView.as_view(), name='facturas'),
    path('facturas/crear/', views.FacturaCreateView.as_view(), name='crear_factura'),
    path('facturas/<int:pk>/editar/', views.FacturaUpdateView.as_view(), name='editar_factura'),
]
