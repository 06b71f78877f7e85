"""
Vistas de la aplicación **cursos**.

.. module:: cursos.views
   :synopsis: Cursos, inscripciones, clases, cuadro de aulas y horas de profesores.

- CRUD de cursos y profesores con vistas basadas en clase.
- :func:`inscribir_alumno` / :func:`dar_baja_inscripcion`: altas y bajas,
  rechazando altas en cursos completos.
- :func:`cuadro_aulas`: clases de una semana por aula y día, con la
  ocupación de cada curso.
- :func:`horas_profesor`: resumen mensual de horas impartidas.
"""
import logging
from datetime import timedelta

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db.models import Q
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_POST
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from lib.fechas import parse_fecha, parse_mes
from lib.mixins import PermisoRequeridoMixin
from tablero import agregados

from .forms import ClaseForm, CursoForm, InscripcionForm, ProfesorForm
from .models import Aula, Clase, Curso, Inscripcion, Profesor

logger = logging.getLogger(__name__)


# =========================
# CURSOS
# =========================
class CursoListView(PermisoRequeridoMixin, ListView):
    model = Curso
    template_name = 'cursos/lista_cursos.html'
    context_object_name = 'cursos'
    paginate_by = 20
    permission_required = 'cursos.access_cursos_panel'

    def get_queryset(self):
        queryset = super().get_queryset().select_related('profesor', 'aula')

        search_query = self.request.GET.get('q', '').strip()
        estado = self.request.GET.get('estado', Curso.Estado.ACTIVO)

        if search_query:
            queryset = queryset.filter(
                Q(nombre__icontains=search_query) | Q(nivel__icontains=search_query)
            )
        if estado in Curso.Estado.values:
            queryset = queryset.filter(estado=estado)

        return queryset.order_by('nombre')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        cursos = list(context['cursos'])
        inscripciones = Inscripcion.objects.filter(curso__in=cursos, activa=True)
        ocupacion = agregados.ocupacion_por_curso(cursos, inscripciones)
        for curso in cursos:
            curso.resumen_ocupacion = ocupacion[curso.id]
        context['cursos'] = cursos
        context['estados'] = Curso.Estado.choices
        context['estado_filtro'] = self.request.GET.get('estado', Curso.Estado.ACTIVO)
        context['search_query'] = self.request.GET.get('q', '')
        return context


class CursoDetailView(PermisoRequeridoMixin, DetailView):
    model = Curso
    template_name = 'cursos/detalle_curso.html'
    context_object_name = 'curso'
    permission_required = 'cursos.access_cursos_panel'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        curso = self.object
        context['inscripciones'] = curso.inscripciones.select_related('alumno').order_by('-activa', 'alumno__apellidos')
        context['clases'] = curso.clases.select_related('profesor', 'aula').order_by('-fecha', '-hora_inicio')[:20]
        context['form_inscripcion'] = InscripcionForm(curso=curso)
        context['completo'] = curso.ocupacion == agregados.Ocupacion.COMPLETO
        return context


class CursoCreateView(PermisoRequeridoMixin, CreateView):
    model = Curso
    form_class = CursoForm
    template_name = 'cursos/formulario_curso.html'
    permission_required = 'cursos.access_cursos_panel'

    def get_success_url(self):
        messages.success(self.request, _('Curso creado exitosamente'))
        return reverse('cursos:detalle', args=[self.object.pk])


class CursoUpdateView(PermisoRequeridoMixin, UpdateView):
    model = Curso
    form_class = CursoForm
    template_name = 'cursos/formulario_curso.html'
    permission_required = 'cursos.access_cursos_panel'

    def get_success_url(self):
        messages.success(self.request, _('Curso actualizado exitosamente'))
        return reverse('cursos:detalle', args=[self.object.pk])


class CursoDeleteView(PermisoRequeridoMixin, DeleteView):
    model = Curso
    template_name = 'cursos/confirmar_eliminacion.html'
    success_url = reverse_lazy('cursos:lista')
    permission_required = 'cursos.access_cursos_panel'

    def form_valid(self, form):
        logger.info("Curso %s eliminado por %s", self.object.pk, self.request.user)
        messages.success(self.request, _('Curso eliminado exitosamente'))
        return super().form_valid(form)


# =========================
# INSCRIPCIONES
# =========================
@login_required
@require_POST
def inscribir_alumno(request, pk):
    if not request.user.has_perm('cursos.access_cursos_panel'):
        return redirect('home')

    curso = get_object_or_404(Curso, pk=pk)
    form = InscripcionForm(request.POST, curso=curso)
    if not form.is_valid():
        for error in form.non_field_errors():
            messages.error(request, error)
        for campo, errores in form.errors.items():
            if campo != '__all__':
                for error in errores:
                    messages.error(request, error)
        return redirect('cursos:detalle', pk=curso.pk)

    inscripcion = form.save()
    logger.info("Alumno %s inscrito en curso %s", inscripcion.alumno_id, curso.pk)
    messages.success(request, f'{inscripcion.alumno} inscrito en {curso.nombre}.')
    return redirect('cursos:detalle', pk=curso.pk)


@login_required
@require_POST
def dar_baja_inscripcion(request, pk):
    if not request.user.has_perm('cursos.access_cursos_panel'):
        return redirect('home')

    inscripcion = get_object_or_404(Inscripcion.objects.select_related('alumno', 'curso'), pk=pk)
    if inscripcion.activa:
        inscripcion.dar_de_baja(parse_fecha(request.POST.get('fecha_baja'), timezone.localdate()))
        logger.info("Baja de inscripción %s", inscripcion.pk)
        messages.success(request, f'{inscripcion.alumno} dado de baja de {inscripcion.curso.nombre}.')
    return redirect('cursos:detalle', pk=inscripcion.curso_id)


# =========================
# CLASES
# =========================
@login_required
def crear_clase(request, pk):
    if not request.user.has_perm('cursos.access_cursos_panel'):
        return redirect('home')

    curso = get_object_or_404(Curso, pk=pk)
    clase = Clase(curso=curso, profesor=curso.profesor, aula=curso.aula)
    form = ClaseForm(request.POST or None, instance=clase)
    if request.method == 'POST' and form.is_valid():
        form.save()
        messages.success(request, 'Clase programada correctamente.')
        return redirect('cursos:detalle', pk=curso.pk)

    return render(request, 'cursos/formulario_clase.html', {'form': form, 'curso': curso})


@login_required
def cuadro_aulas(request):
    """
    Cuadro semanal de aulas.

    Filtros (query string)
    ----------------------
    - ``fecha`` (YYYY-MM-DD): cualquier día de la semana a mostrar; por
      defecto hoy.
    """
    if not request.user.has_perm('cursos.access_cuadro_aulas'):
        return redirect('home')

    referencia = parse_fecha(request.GET.get('fecha'), timezone.localdate())
    lunes = agregados.inicio_semana(referencia)
    dias = [lunes + timedelta(days=i) for i in range(7)]

    clases = list(
        Clase.objects.filter(fecha__range=(dias[0], dias[-1]))
        .exclude(estado=Clase.Estado.ANULADA)
        .select_related('curso', 'curso__aula', 'profesor', 'aula')
    )
    cursos = {c.curso_id: c.curso for c in clases}
    ocupacion = agregados.ocupacion_por_curso(
        cursos.values(), Inscripcion.objects.filter(curso_id__in=list(cursos), activa=True)
    )

    aulas = list(Aula.objects.all())
    filas = []
    for aula in aulas + [None]:
        celdas = []
        for dia in dias:
            del_dia = [c for c in clases if c.fecha == dia and c.aula_efectiva == aula]
            for c in del_dia:
                c.resumen_ocupacion = ocupacion[c.curso_id]
            celdas.append(del_dia)
        if aula is not None or any(celdas):
            filas.append({'aula': aula, 'celdas': celdas})

    context = {
        'dias': dias,
        'filas': filas,
        'semana_anterior': (lunes - timedelta(days=7)).isoformat(),
        'semana_siguiente': (lunes + timedelta(days=7)).isoformat(),
    }
    return render(request, 'cursos/cuadro_aulas.html', context)


# =========================
# PROFESORES
# =========================
class ProfesorListView(PermisoRequeridoMixin, ListView):
    model = Profesor
    template_name = 'cursos/lista_profesores.html'
    context_object_name = 'profesores'
    permission_required = 'cursos.access_profesores_panel'


class ProfesorCreateView(PermisoRequeridoMixin, CreateView):
    model = Profesor
    form_class = ProfesorForm
    template_name = 'cursos/formulario_profesor.html'
    success_url = reverse_lazy('cursos:profesores')
    permission_required = 'cursos.access_profesores_panel'


class ProfesorUpdateView(PermisoRequeridoMixin, UpdateView):
    model = Profesor
    form_class = ProfesorForm
    template_name = 'cursos/formulario_profesor.html'
    success_url = reverse_lazy('cursos:profesores')
    permission_required = 'cursos.access_profesores_panel'


@login_required
def horas_profesor(request, pk):
    """
    Horas impartidas por un profesor en un mes (``?mes=YYYY-MM``).

    Un profesor sin permiso de gestión solo puede consultar sus propias horas.
    """
    profesor = get_object_or_404(Profesor, pk=pk)
    es_propio = profesor.usuario_id is not None and profesor.usuario_id == request.user.pk
    if not (es_propio or request.user.has_perm('cursos.access_profesores_panel')):
        return redirect('home')

    referencia = parse_mes(request.GET.get('mes'), timezone.localdate().replace(day=1))
    clases = Clase.objects.filter(
        profesor=profesor,
        fecha__year=referencia.year,
        fecha__month=referencia.month,
    ).select_related('curso', 'curso__aula', 'aula')

    resumen = agregados.resumen_horas_profesor(clases, profesor.pk, referencia)
    context = {
        'profesor': profesor,
        'mes': referencia,
        'resumen': resumen,
    }
    return render(request, 'cursos/horas_profesor.html', context)
