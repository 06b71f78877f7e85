#recibos/views.py
import logging
from decimal import Decimal

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.db.models import Q, Sum
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse_lazy
from django.utils import timezone
from django.utils.timezone import now
from django.views.decorators.http import require_POST
from django.views.generic import CreateView, ListView, UpdateView
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from alumnos.models import TipoPago
from lib.formato import formato_euros
from lib.mixins import PermisoRequeridoMixin

from .forms import FacturaForm, ReciboFiltroForm, ReciboForm
from .models import Factura, Recibo

logger = logging.getLogger(__name__)


def filtrar_recibos(params):
    """Aplica los filtros del listado (query string) a los recibos."""
    recibos = Recibo.objects.select_related('alumno', 'curso')

    form = ReciboFiltroForm(params or None)
    if not form.is_valid():
        return recibos, form

    datos = form.cleaned_data
    if datos.get('q'):
        q = datos['q']
        recibos = recibos.filter(
            Q(alumno__nombre__icontains=q) |
            Q(alumno__apellidos__icontains=q) |
            Q(codigo__icontains=q)
        )
    if datos.get('estado'):
        recibos = recibos.filter(estado=datos['estado'])
    if datos.get('tipo_pago'):
        recibos = recibos.filter(tipo_pago=datos['tipo_pago'])
    if datos.get('fecha_desde'):
        recibos = recibos.filter(fecha__gte=datos['fecha_desde'])
    if datos.get('fecha_hasta'):
        recibos = recibos.filter(fecha__lte=datos['fecha_hasta'])
    return recibos, form


# =========================
# LISTADO DE RECIBOS (WEB)
# =========================
@login_required
def lista_recibos(request):
    if not request.user.has_perm('recibos.access_recibos_panel'):
        return redirect('home')

    recibos, form = filtrar_recibos(request.GET)

    totales = recibos.aggregate(
        total=Sum('importe'),
        cobrado=Sum('importe', filter=Q(estado=Recibo.Estado.COBRADO)),
        pendiente=Sum('importe', filter=Q(estado=Recibo.Estado.PENDIENTE)),
    )

    paginator = Paginator(recibos, 15)
    page_obj = paginator.get_page(request.GET.get('page'))

    params = request.GET.copy()
    params.pop('page', None)

    context = {
        'recibos': page_obj,
        'page_obj': page_obj,
        'filtro_form': form,
        'query_string': params.urlencode(),
        'total': totales['total'] or Decimal('0'),
        'total_cobrado': totales['cobrado'] or Decimal('0'),
        'total_pendiente': totales['pendiente'] or Decimal('0'),
    }
    return render(request, 'recibos/lista_recibos.html', context)


class ReciboCreateView(PermisoRequeridoMixin, CreateView):
    model = Recibo
    form_class = ReciboForm
    template_name = 'recibos/formulario_recibo.html'
    success_url = reverse_lazy('recibos:lista')
    permission_required = 'recibos.access_recibos_panel'

    def get_initial(self):
        initial = super().get_initial()
        if self.request.GET.get('alumno'):
            initial['alumno'] = self.request.GET['alumno']
        return initial

    def form_valid(self, form):
        messages.success(self.request, 'Recibo creado correctamente.')
        return super().form_valid(form)


class ReciboUpdateView(PermisoRequeridoMixin, UpdateView):
    model = Recibo
    form_class = ReciboForm
    template_name = 'recibos/formulario_recibo.html'
    success_url = reverse_lazy('recibos:lista')
    permission_required = 'recibos.access_recibos_panel'


@login_required
@require_POST
def marcar_cobrado(request, pk):
    if not request.user.has_perm('recibos.access_recibos_panel'):
        return redirect('home')

    recibo = get_object_or_404(Recibo, pk=pk)
    if recibo.estado == Recibo.Estado.COBRADO:
        messages.info(request, f'El recibo {recibo.codigo} ya estaba cobrado.')
    else:
        recibo.marcar_cobrado(tipo_pago=request.POST.get('tipo_pago') or None)
        logger.info("Recibo %s cobrado por %s", recibo.codigo, request.user)
        messages.success(request, f'Recibo {recibo.codigo} marcado como cobrado.')
    return redirect(request.POST.get('next') or 'recibos:lista')


# =========================
# RECIBO PDF
# =========================
@login_required
def recibo_pdf(request, pk):
    if not request.user.has_perm('recibos.access_recibos_panel'):
        return redirect('home')

    recibo = get_object_or_404(Recibo.objects.select_related('alumno', 'curso'), pk=pk)

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="recibo_{recibo.codigo}.pdf"'

    doc = SimpleDocTemplate(
        response,
        pagesize=A4,
        rightMargin=40, leftMargin=40,
        topMargin=60, bottomMargin=40
    )

    styles = getSampleStyleSheet()
    elements = []

    alumno = recibo.alumno
    elements.append(Paragraph(f"<b>Recibo {recibo.codigo}</b>", styles["Title"]))
    elements.append(Paragraph(f"Fecha: {recibo.fecha.strftime('%d/%m/%Y')}", styles["Normal"]))
    elements.append(Paragraph(f"Alumno: {alumno.nombre_completo}", styles["Normal"]))
    if alumno.dni:
        elements.append(Paragraph(f"DNI/NIE: {alumno.dni}", styles["Normal"]))
    elements.append(Spacer(1, 18))

    data = [
        ["Concepto", "Curso", "Forma de pago", "Estado", "Importe"],
        [
            recibo.concepto,
            recibo.curso.nombre if recibo.curso else "-",
            recibo.get_tipo_pago_display(),
            recibo.get_estado_display(),
            formato_euros(recibo.importe),
        ],
    ]
    if recibo.tipo_pago == TipoPago.DOMICILIADO and alumno.iban:
        data.append(["", "", "Cuenta de cargo", f"{alumno.iban[:4]} **** {alumno.iban[-4:]}", alumno.bic or ""])

    table = Table(data, hAlign="CENTER")
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ]))
    elements.append(table)

    if recibo.fecha_pago:
        elements.append(Spacer(1, 12))
        elements.append(Paragraph(f"Cobrado el {recibo.fecha_pago.strftime('%d/%m/%Y')}", styles["Normal"]))

    doc.build(elements)
    return response


# =========================
# RECIBOS EXCEL
# =========================
@login_required
def recibos_excel(request):
    if not request.user.has_perm('recibos.access_recibos_panel'):
        return redirect('home')

    recibos, _form = filtrar_recibos(request.GET)

    wb = Workbook()
    ws = wb.active
    ws.title = "Recibos"

    ws.merge_cells('A1:H1')
    ws['A1'] = "Listado de recibos"
    ws['A1'].font = Font(size=14, bold=True)
    ws['A1'].alignment = Alignment(horizontal='center')

    nombre_usuario = getattr(request.user, "email", "Usuario desconocido")
    ws['A3'] = f"Generado por: {nombre_usuario}"
    ws['A4'] = f"Fecha: {now().strftime('%d/%m/%Y %H:%M:%S')}"
    ws.append([])

    headers = ["Código", "Fecha", "Alumno", "Curso", "Concepto", "Forma de pago", "Estado", "Importe (€)"]
    ws.append(headers)

    header_fill = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center")
        cell.fill = header_fill

    total = Decimal('0')
    for r in recibos:
        ws.append([
            r.codigo,
            r.fecha.strftime("%d/%m/%Y"),
            r.alumno.nombre_completo,
            r.curso.nombre if r.curso else "",
            r.concepto,
            r.get_tipo_pago_display(),
            r.get_estado_display(),
            float(r.importe),
        ])
        ws.cell(row=ws.max_row, column=8).number_format = '#,##0.00'
        total += r.importe

    ws.append([])
    ws.append(["", "", "", "", "", "", "Total:", float(total)])
    ws.cell(row=ws.max_row, column=7).font = Font(bold=True)
    ws.cell(row=ws.max_row, column=8).number_format = '#,##0.00'

    for idx, ancho in enumerate([16, 12, 30, 24, 30, 16, 12, 14], start=1):
        ws.column_dimensions[get_column_letter(idx)].width = ancho

    response = HttpResponse(
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="recibos_{timezone.localdate():%Y%m%d}.xlsx"'
    wb.save(response)
    return response


# =========================
# FACTURAS
# =========================
class FacturaListView(PermisoRequeridoMixin, ListView):
    model = Factura
    template_name = 'recibos/lista_facturas.html'
    context_object_name = 'facturas'
    paginate_by = 20
    permission_required = 'recibos.access_gestoria'

    def get_queryset(self):
        queryset = super().get_queryset()
        tipo = self.request.GET.get('tipo', '')
        if tipo in Factura.Tipo.values:
            queryset = queryset.filter(tipo=tipo)
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['tipo_filtro'] = self.request.GET.get('tipo', '')
        context['tipos'] = Factura.Tipo.choices
        return context


class FacturaCreateView(PermisoRequeridoMixin, CreateView):
    model = Factura
    form_class = FacturaForm
    template_name = 'recibos/formulario_factura.html'
    success_url = reverse_lazy('recibos:facturas')
    permission_required = 'recibos.access_gestoria'

    def form_valid(self, form):
        messages.success(self.request, 'Factura registrada correctamente.')
        return super().form_valid(form)


class FacturaUpdateView(PermisoRequeridoMixin, UpdateView):
    model = Factura
    form_class = FacturaForm
    template_name = 'recibos/formulario_factura.html'
    success_url = reverse_lazy('recibos:facturas')
    permission_required = 'recibos.access_gestoria'
