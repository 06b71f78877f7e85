"""
Vistas de la aplicación **tablero**.

.. module:: tablero.views
   :synopsis: Tablero principal, tablero financiero y exportación de recibos por mes.

Las vistas solo consultan la base de datos y delegan todos los cálculos en
:mod:`tablero.agregados`. Cada bloque del tablero principal se muestra según
los permisos del usuario.
"""
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth.decorators import login_required
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.timezone import now
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from alumnos.models import Alumno
from alumnos.utils import puede_ver_cumpleanos
from asistencia.models import RegistroAsistencia
from configuracion.models import PerfilAcademia
from cursos.models import Clase, Inscripcion
from lib.fechas import parse_anio, parse_fecha
from recibos.models import Factura, Recibo

from . import agregados


def _cumpleanos_de_hoy(hoy):
    candidatos = Alumno.objects.filter(
        activo=True, fecha_nacimiento__month=hoy.month, fecha_nacimiento__day=hoy.day
    )
    return [a for a in candidatos if a.cumple_hoy(hoy)]


@login_required
def home(request):
    """
    Tablero principal.

    **Contexto**
    ------------
    - ``alumnos_activos`` / ``inscripciones_activas`` / ``clases_semana`` /
      ``faltas_hoy``: contadores académicos (permiso de cursos o alumnos).
    - ``recibos_pendientes`` y ``recibos_mes``: bloque económico
      (permiso ``recibos.access_recibos_panel``), año por ``?anio=YYYY``.
    - ``cumpleanos``: alumnos que cumplen años hoy, si el perfil y los roles
      del usuario lo permiten.
    - ``mis_clases``: clases de hoy del profesor vinculado al usuario.
    """
    user = request.user
    hoy = timezone.localdate()
    context = {"hoy": hoy}

    if user.has_perm("cursos.access_cursos_panel") or user.has_perm("alumnos.access_alumnos_panel"):
        alumnos_activos, inscripciones_activas = agregados.resumen_alumnos(
            Inscripcion.objects.filter(activa=True, alumno__activo=True)
        )
        lunes = agregados.inicio_semana(hoy)
        clases = Clase.objects.filter(fecha__range=(lunes, lunes + timedelta(days=6))).exclude(
            estado=Clase.Estado.ANULADA
        )
        registros_hoy = RegistroAsistencia.objects.filter(clase__fecha=hoy)
        context.update({
            "alumnos_activos": alumnos_activos,
            "inscripciones_activas": inscripciones_activas,
            "clases_semana": agregados.clases_de_la_semana(clases, hoy),
            "faltas_hoy": agregados.faltas_del_dia(clases, registros_hoy, hoy),
        })

    if user.has_perm("recibos.access_recibos_panel"):
        anio = parse_anio(request.GET.get("anio"), hoy.year)
        recibos_mes = agregados.recibos_por_mes(Recibo.objects.filter(fecha__year=anio), anio)
        context.update({
            "anio": anio,
            "recibos_pendientes": agregados.recibos_pendientes_hasta(
                Recibo.objects.filter(estado=Recibo.Estado.PENDIENTE, fecha__lte=hoy), hoy
            ),
            "recibos_mes": recibos_mes,
            "recibos_mes_grafico": [
                {"etiqueta": m["etiqueta"], "cobrado": float(m["cobrado"]), "pendiente": float(m["pendiente"])}
                for m in recibos_mes
            ],
        })

    if puede_ver_cumpleanos(user.nombres_roles(), PerfilAcademia.obtener()):
        context["cumpleanos"] = _cumpleanos_de_hoy(hoy)

    profesor = getattr(user, "profesor", None)
    if profesor is not None:
        context["mis_clases"] = (
            Clase.objects.filter(profesor=profesor, fecha=hoy)
            .exclude(estado=Clase.Estado.ANULADA)
            .select_related("curso", "aula", "curso__aula")
        )

    return render(request, "tablero/home.html", context)


@login_required
def dashboard_financiero(request):
    """
    Tablero financiero por periodo.

    Filtros (query string)
    ----------------------
    - ``periodo``: ``month`` (por defecto), ``quarter`` o ``year``.
    - ``fecha`` (YYYY-MM-DD): cualquier día del periodo; por defecto hoy.
    """
    if not request.user.has_perm("recibos.access_gestoria"):
        return redirect("home")

    periodo = request.GET.get("periodo", agregados.PERIODO_MES)
    if periodo not in agregados.PERIODOS:
        periodo = agregados.PERIODO_MES
    referencia = parse_fecha(request.GET.get("fecha"), timezone.localdate())
    try:
        inicio, fin, inicio_anterior, siguiente = agregados.limites_periodo(referencia, periodo)
    except (ValueError, OverflowError):
        # Fecha en el borde del calendario: se usa hoy.
        referencia = timezone.localdate()
        inicio, fin, inicio_anterior, siguiente = agregados.limites_periodo(referencia, periodo)

    facturas = list(Factura.objects.filter(fecha__range=(inicio_anterior, fin)))
    del_periodo = [f for f in facturas if inicio <= f.fecha <= fin]

    evolucion = agregados.evolucion_mensual(facturas, referencia, periodo)
    context = {
        "periodo": periodo,
        "periodos": [
            (agregados.PERIODO_MES, "Mes"),
            (agregados.PERIODO_TRIMESTRE, "Trimestre"),
            (agregados.PERIODO_ANIO, "Año"),
        ],
        "referencia": referencia,
        "resumen": agregados.resumen_financiero(facturas, referencia, periodo),
        "gastos_categoria": agregados.gastos_por_categoria(del_periodo),
        "pendientes": agregados.facturas_pendientes(Factura.objects.filter(estado=Factura.Estado.PENDIENTE)),
        "evolucion": evolucion,
        "evolucion_grafico": [
            {"etiqueta": m["etiqueta"], "ingresos": float(m["ingresos"]), "gastos": float(m["gastos"])}
            for m in evolucion
        ],
        "fecha_anterior": (inicio - timedelta(days=1)).isoformat(),
        "fecha_siguiente": siguiente.isoformat(),
    }
    return render(request, "tablero/dashboard_financiero.html", context)


@login_required
def recibos_mes_excel(request):
    """Exporta a Excel la tabla de recibos por mes del año ``?anio=YYYY``."""
    if not request.user.has_perm("recibos.access_recibos_panel"):
        return redirect("home")

    anio = parse_anio(request.GET.get("anio"), timezone.localdate().year)
    meses = agregados.recibos_por_mes(Recibo.objects.filter(fecha__year=anio), anio)

    wb = Workbook()
    ws = wb.active
    ws.title = f"Recibos {anio}"

    ws.merge_cells("A1:D1")
    ws["A1"] = f"Recibos por mes - {anio}"
    ws["A1"].font = Font(size=14, bold=True)
    ws["A1"].alignment = Alignment(horizontal="center")

    nombre_usuario = getattr(request.user, "email", "Usuario desconocido")
    ws["A3"] = f"Generado por: {nombre_usuario}"
    ws["A4"] = f"Fecha: {now().strftime('%d/%m/%Y %H:%M:%S')}"
    ws.append([])

    ws.append(["Mes", "Cobrado (€)", "Pendiente (€)", "Total (€)"])
    header_fill = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center")
        cell.fill = header_fill

    totales = {"cobrado": Decimal("0"), "pendiente": Decimal("0"), "total": Decimal("0")}
    for m in meses:
        ws.append([m["etiqueta"], float(m["cobrado"]), float(m["pendiente"]), float(m["total"])])
        for clave in totales:
            totales[clave] += m[clave]

    ws.append(["Total", float(totales["cobrado"]), float(totales["pendiente"]), float(totales["total"])])
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True)

    for fila in ws.iter_rows(min_row=7, min_col=2, max_col=4):
        for cell in fila:
            cell.number_format = "#,##0.00"

    ws.column_dimensions["A"].width = 12
    for col in ("B", "C", "D"):
        ws.column_dimensions[col].width = 16

    response = HttpResponse(
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    response["Content-Disposition"] = f'attachment; filename="recibos_por_mes_{anio}.xlsx"'
    wb.save(response)
    return response
