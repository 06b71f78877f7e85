from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render

from alumnos.models import Alumno
from cursos.models import Clase
from tablero.agregados import asistencias_realizadas, resumen_asistencia

from .forms import RegistroAsistenciaFormSet
from .models import RegistroAsistencia
from .services import cerrar_pase_de_lista, inicializar_registros


@login_required
def pasar_lista(request, clase_pk):
    """
    Pase de lista de una clase.

    En GET crea los registros que falten y muestra el formulario; en POST
    guarda los registros, los marca como realizados y da la clase por hecha.
    """
    if not request.user.has_perm("asistencia.access_asistencia"):
        return redirect("home")

    clase = get_object_or_404(Clase.objects.select_related("curso", "profesor"), pk=clase_pk)
    if clase.estado == Clase.Estado.ANULADA:
        messages.warning(request, "La clase está anulada.")
        return redirect("cursos:detalle", pk=clase.curso_id)

    registros = inicializar_registros(clase)
    formset = RegistroAsistenciaFormSet(request.POST or None, queryset=registros)

    if request.method == "POST":
        if formset.is_valid():
            cerrar_pase_de_lista(clase, [form.save(commit=False) for form in formset.forms])
            messages.success(request, "Asistencia guardada correctamente.")
            return redirect("asistencia:pasar_lista", clase_pk=clase.pk)
        messages.error(request, "Revisa los datos de asistencia.")

    return render(request, "asistencia/pasar_lista.html", {"clase": clase, "formset": formset})


@login_required
def resumen_alumno(request, alumno_pk):
    if not request.user.has_perm("asistencia.access_asistencia"):
        return redirect("home")

    alumno = get_object_or_404(Alumno, pk=alumno_pk)
    registros = RegistroAsistencia.objects.filter(alumno=alumno).select_related("clase", "clase__curso")
    realizados = asistencias_realizadas(registros, alumno.inscripciones.all(), alumno.pk)
    realizados.sort(key=lambda r: (r.clase.fecha, r.clase.hora_inicio), reverse=True)

    context = {
        "alumno": alumno,
        "registros": realizados,
        "resumen": resumen_asistencia(realizados),
    }
    return render(request, "asistencia/resumen_alumno.html", context)
