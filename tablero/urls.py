from django.urls import path
from . import views

app_name = "tablero"

urlpatterns = [
    path("financiero/", views.dashboard_financiero, name="financiero"),
    path("recibos-mes/excel/", views.recibos_mes_excel, name="recibos_mes_excel"),
]
