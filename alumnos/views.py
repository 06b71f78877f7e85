import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.db.models import ProtectedError, Q
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse, reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_POST
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from lib.mixins import PermisoRequeridoMixin

from .forms import AlumnoForm, AlumnoSearchForm, TutorFormSet
from .models import Alumno

logger = logging.getLogger(__name__)


class AlumnoListView(PermisoRequeridoMixin, ListView):
    model = Alumno
    template_name = 'alumnos/lista_alumnos.html'
    context_object_name = 'alumnos'
    paginate_by = 15
    permission_required = 'alumnos.access_alumnos_panel'

    def get_queryset(self):
        queryset = super().get_queryset()

        # Filtros
        search_query = self.request.GET.get('q', '').strip()
        tipo_pago = self.request.GET.get('tipo_pago', '')
        activo = self.request.GET.get('activo', '')

        if search_query:
            queryset = queryset.filter(
                Q(nombre__icontains=search_query) |
                Q(apellidos__icontains=search_query) |
                Q(dni__icontains=search_query) |
                Q(email__icontains=search_query)
            )

        if tipo_pago:
            queryset = queryset.filter(tipo_pago=tipo_pago)

        if activo:
            queryset = queryset.filter(activo=(activo.lower() == 'true'))

        return queryset.order_by('apellidos', 'nombre')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['search_form'] = AlumnoSearchForm(self.request.GET or None)
        context['search_query'] = self.request.GET.get('q', '')
        return context


class AlumnoDetailView(PermisoRequeridoMixin, DetailView):
    model = Alumno
    template_name = 'alumnos/detalle_alumno.html'
    context_object_name = 'alumno'
    permission_required = 'alumnos.access_alumnos_panel'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['tutores'] = self.object.tutores.all()
        context['inscripciones'] = self.object.inscripciones.select_related('curso').order_by('-fecha_inscripcion')
        return context


class TutoresFormsetMixin:
    """Guarda el alumno y sus tutores en una sola transacción."""

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        if 'tutores' not in context:
            context['tutores'] = TutorFormSet(instance=self.object or Alumno())
        return context

    def form_valid(self, form):
        tutores = TutorFormSet(self.request.POST, instance=form.instance)
        if not tutores.is_valid():
            return self.render_to_response(self.get_context_data(form=form, tutores=tutores))

        with transaction.atomic():
            self.object = form.save()
            tutores.instance = self.object
            tutores.save()
        return redirect(self.get_success_url())


class AlumnoCreateView(PermisoRequeridoMixin, TutoresFormsetMixin, CreateView):
    model = Alumno
    form_class = AlumnoForm
    template_name = 'alumnos/formulario_alumno.html'
    permission_required = 'alumnos.access_alumnos_panel'

    def get_success_url(self):
        logger.info("Alumno %s dado de alta por %s", self.object.pk, self.request.user)
        messages.success(self.request, _('Alumno creado exitosamente'))
        return reverse('alumnos:detalle', args=[self.object.pk])


class AlumnoUpdateView(PermisoRequeridoMixin, TutoresFormsetMixin, UpdateView):
    model = Alumno
    form_class = AlumnoForm
    template_name = 'alumnos/formulario_alumno.html'
    permission_required = 'alumnos.access_alumnos_panel'

    def get_success_url(self):
        messages.success(self.request, _('Alumno actualizado exitosamente'))
        return reverse('alumnos:detalle', args=[self.object.pk])


class AlumnoDeleteView(PermisoRequeridoMixin, DeleteView):
    model = Alumno
    template_name = 'alumnos/confirmar_eliminacion.html'
    success_url = reverse_lazy('alumnos:lista')
    permission_required = 'alumnos.access_alumnos_panel'

    def form_valid(self, form):
        try:
            response = super().form_valid(form)
        except ProtectedError:
            messages.error(
                self.request,
                _('El alumno tiene recibos asociados y no puede eliminarse. Desactívalo en su lugar.')
            )
            return redirect('alumnos:detalle', pk=self.object.pk)
        logger.info("Alumno %s eliminado por %s", self.kwargs['pk'], self.request.user)
        messages.success(self.request, _('Alumno eliminado exitosamente'))
        return response


@login_required
@require_POST
def toggle_alumno_estado(request, pk):
    if not request.user.has_perm('alumnos.access_alumnos_panel'):
        return redirect('home')

    alumno = get_object_or_404(Alumno, pk=pk)
    alumno.activo = not alumno.activo
    alumno.save(update_fields=['activo', 'ultima_modificacion'])

    action = "activado" if alumno.activo else "desactivado"
    messages.success(request, f'Alumno {action} exitosamente')

    return redirect('alumnos:lista')
