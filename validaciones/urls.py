from django.urls import path
from . import views

app_name = "validaciones"

urlpatterns = [
    path("campo/", views.validar_campo, name="campo"),
]
