"""
Agregados derivados para tableros, horarios y resúmenes.

.. module:: tablero.agregados
   :synopsis: Funciones puras sobre colecciones de registros.

Las funciones de este módulo reciben secuencias de objetos (normalmente
instancias de modelos, pero sirve cualquier objeto con los atributos
documentados), no modifican sus entradas y no dependen del reloj: toda
función relativa al tiempo recibe la fecha de ``referencia`` de forma
explícita. Llamarlas dos veces con los mismos datos da el mismo resultado.

Grupos de funciones:

- Ocupación de cursos: :func:`plazas_disponibles`, :func:`clasificar_ocupacion`,
  :func:`ocupacion_por_curso`.
- Contadores del tablero principal: :func:`resumen_alumnos`,
  :func:`clases_de_la_semana`, :func:`faltas_del_dia`,
  :func:`recibos_pendientes_hasta`, :func:`recibos_por_mes`.
- Horas de profesores: :func:`duracion_minutos`, :func:`resumen_horas_profesor`.
- Tablero financiero: :func:`rango_periodo`, :func:`resumen_financiero`,
  :func:`gastos_por_categoria`, :func:`facturas_pendientes`,
  :func:`evolucion_mensual`.
- Asistencia: :func:`asistencias_realizadas`, :func:`resumen_asistencia`.
"""
from collections import OrderedDict
from datetime import date, datetime, timedelta
from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

UMBRAL_CASI_COMPLETO = 3

MESES_CORTOS = ["Ene", "Feb", "Mar", "Abr", "May", "Jun",
                "Jul", "Ago", "Sep", "Oct", "Nov", "Dic"]

RECIBO_COBRADO = "Cobrado"
RECIBO_PENDIENTE = "Pendiente"
CLASE_HECHA = "Hecha"
ASISTENCIA_REALIZADA = "Realizado"
FACTURA_EMITIDA = "emitida"
FACTURA_RECIBIDA = "recibida"
FACTURA_PENDIENTE = "pendiente"
SIN_CATEGORIA = "Sin categoría"

PERIODO_MES = "month"
PERIODO_TRIMESTRE = "quarter"
PERIODO_ANIO = "year"
PERIODOS = (PERIODO_MES, PERIODO_TRIMESTRE, PERIODO_ANIO)

CERO = Decimal("0")


class Ocupacion(models.TextChoices):
    COMPLETO = "completo", _("Completo")
    CASI_COMPLETO = "casi_completo", _("Casi completo")
    DISPONIBLE = "disponible", _("Plazas libres")


# ---------------------------------------------------------------------------
# Ocupación
# ---------------------------------------------------------------------------

def plazas_disponibles(capacidad, inscripciones_activas):
    return (capacidad or 0) - inscripciones_activas


def clasificar_ocupacion(capacidad, inscripciones_activas):
    """
    Clasifica un curso según sus plazas libres: completo sin plazas,
    casi completo con tres o menos, disponible en otro caso.

    :param int capacidad: Capacidad máxima del curso.
    :param int inscripciones_activas: Número de inscripciones activas.
    :rtype: Ocupacion
    """
    libres = plazas_disponibles(capacidad, inscripciones_activas)
    if libres <= 0:
        return Ocupacion.COMPLETO
    if libres <= UMBRAL_CASI_COMPLETO:
        return Ocupacion.CASI_COMPLETO
    return Ocupacion.DISPONIBLE


def ocupacion_por_curso(cursos, inscripciones):
    """
    Ocupación de cada curso a partir de sus inscripciones activas.

    :param cursos: Objetos con ``id`` y ``capacidad_maxima``.
    :param inscripciones: Objetos con ``curso_id`` y ``activa``.
    :return: ``{curso_id: {"activas", "disponibles", "estado"}}``
    """
    activas = {}
    for inscripcion in inscripciones:
        if inscripcion.activa:
            activas[inscripcion.curso_id] = activas.get(inscripcion.curso_id, 0) + 1

    resultado = {}
    for curso in cursos:
        n = activas.get(curso.id, 0)
        resultado[curso.id] = {
            "activas": n,
            "disponibles": plazas_disponibles(curso.capacidad_maxima, n),
            "estado": clasificar_ocupacion(curso.capacidad_maxima, n),
        }
    return resultado


# ---------------------------------------------------------------------------
# Tablero principal
# ---------------------------------------------------------------------------

def resumen_alumnos(inscripciones):
    """Devuelve ``(alumnos_activos, inscripciones_activas)``; un alumno con varias inscripciones cuenta una vez."""
    activas = [i for i in inscripciones if i.activa]
    return len({i.alumno_id for i in activas}), len(activas)


def inicio_semana(referencia):
    """Lunes de la semana de ``referencia``."""
    return referencia - timedelta(days=referencia.weekday())


def clases_de_la_semana(clases, referencia):
    """Clases con fecha entre el lunes y el domingo de la semana de referencia."""
    lunes = inicio_semana(referencia)
    domingo = lunes + timedelta(days=6)
    return sum(1 for c in clases if lunes <= c.fecha <= domingo)


def faltas_del_dia(clases, registros, referencia):
    """Registros de asistencia con ``asistio=False`` de las clases del día de referencia."""
    clases_hoy = {c.id for c in clases if c.fecha == referencia}
    return sum(1 for r in registros if r.clase_id in clases_hoy and not r.asistio)


def recibos_pendientes_hasta(recibos, referencia):
    """Recibos en estado pendiente con fecha igual o anterior a la referencia."""
    return sum(1 for r in recibos if r.estado == RECIBO_PENDIENTE and r.fecha <= referencia)


def recibos_por_mes(recibos, anio):
    """
    Totales de recibos por mes de un año, en orden de calendario.

    Los recibos cobrados suman en ``cobrado``; cualquier otro estado
    (pendiente o devuelto) suma en ``pendiente``. Siempre devuelve doce
    entradas, también para meses sin recibos.

    :param recibos: Objetos con ``fecha``, ``estado`` e ``importe``.
    :param int anio: Año a agregar; el resto se ignora.
    :return: Lista de dicts ``{"mes", "etiqueta", "cobrado", "pendiente", "total"}``.
    """
    meses = [
        {"mes": i + 1, "etiqueta": etiqueta, "cobrado": CERO, "pendiente": CERO, "total": CERO}
        for i, etiqueta in enumerate(MESES_CORTOS)
    ]
    for recibo in recibos:
        if recibo.fecha.year != anio:
            continue
        cubeta = meses[recibo.fecha.month - 1]
        importe = Decimal(recibo.importe or 0)
        if recibo.estado == RECIBO_COBRADO:
            cubeta["cobrado"] += importe
        else:
            cubeta["pendiente"] += importe
        cubeta["total"] += importe
    return meses


# ---------------------------------------------------------------------------
# Horas de profesores
# ---------------------------------------------------------------------------

def _a_minutos(hora):
    if isinstance(hora, str):
        hora = datetime.strptime(hora, "%H:%M").time()
    return hora.hour * 60 + hora.minute


def duracion_minutos(inicio, fin):
    """Minutos entre dos horas (``datetime.time`` o ``"HH:MM"``); nunca negativo."""
    return max(_a_minutos(fin) - _a_minutos(inicio), 0)


def _horas(minutos):
    return round(minutos / 60, 2)


def resumen_horas_profesor(clases, profesor_id, referencia):
    """
    Horas impartidas por un profesor en el mes de ``referencia``.

    Solo cuentan las clases del profesor en estado ``Hecha``. Las horas de
    sustitución se acumulan aparte. La ubicación de cada grupo es la del
    aula de la clase o, si no tiene, la del aula del curso.

    :return: ``{"total_horas", "total_sustitucion", "por_curso": [...]}``,
        con ``por_curso`` ordenado por nombre de curso.
    """
    grupos = {}
    total = sustitucion = 0

    for clase in clases:
        if clase.profesor_id != profesor_id or clase.estado != CLASE_HECHA:
            continue
        if (clase.fecha.year, clase.fecha.month) != (referencia.year, referencia.month):
            continue

        minutos = duracion_minutos(clase.hora_inicio, clase.hora_fin)
        curso = clase.curso
        aula = clase.aula or curso.aula
        grupo = grupos.setdefault(curso.id, {
            "curso": curso.nombre,
            "ubicacion": getattr(aula, "ubicacion", "") or "",
            "minutos": 0,
            "minutos_sustitucion": 0,
        })
        if clase.es_sustitucion:
            grupo["minutos_sustitucion"] += minutos
            sustitucion += minutos
        else:
            grupo["minutos"] += minutos
            total += minutos

    por_curso = [
        {
            "curso": g["curso"],
            "ubicacion": g["ubicacion"],
            "horas": _horas(g["minutos"]),
            "horas_sustitucion": _horas(g["minutos_sustitucion"]),
        }
        for g in sorted(grupos.values(), key=lambda g: g["curso"])
    ]
    return {
        "total_horas": _horas(total),
        "total_sustitucion": _horas(sustitucion),
        "por_curso": por_curso,
    }


# ---------------------------------------------------------------------------
# Tablero financiero
# ---------------------------------------------------------------------------

def rango_periodo(referencia, periodo):
    """
    Primer y último día del mes, trimestre o año que contiene ``referencia``.

    :raises ValueError: si ``periodo`` no es ``month``, ``quarter`` o ``year``.
    """
    if periodo == PERIODO_MES:
        inicio = referencia.replace(day=1)
        meses = 1
    elif periodo == PERIODO_TRIMESTRE:
        inicio = date(referencia.year, 3 * ((referencia.month - 1) // 3) + 1, 1)
        meses = 3
    elif periodo == PERIODO_ANIO:
        inicio = date(referencia.year, 1, 1)
        meses = 12
    else:
        raise ValueError(f"Periodo desconocido: {periodo}")
    return inicio, _sumar_meses(inicio, meses) - timedelta(days=1)


def _sumar_meses(dia, meses):
    total = dia.month - 1 + meses
    return date(dia.year + total // 12, total % 12 + 1, 1)


def referencia_anterior(referencia, periodo):
    """Una fecha dentro del periodo inmediatamente anterior."""
    inicio, _ = rango_periodo(referencia, periodo)
    return inicio - timedelta(days=1)


def limites_periodo(referencia, periodo):
    """
    Fechas que necesita el tablero financiero: inicio y fin del periodo,
    inicio del periodo anterior y primer día del siguiente.

    :raises ValueError: o ``OverflowError`` si algún límite cae fuera del
        calendario (años 1 a 9999).
    """
    inicio, fin = rango_periodo(referencia, periodo)
    inicio_anterior, _ = rango_periodo(referencia_anterior(referencia, periodo), periodo)
    return inicio, fin, inicio_anterior, fin + timedelta(days=1)


def _en_rango(facturas, inicio, fin):
    return [f for f in facturas if inicio <= f.fecha <= fin]


def metricas_financieras(facturas):
    """
    Ingresos, gastos e impuestos netos de un conjunto de facturas.

    Los impuestos son ``iva - irpf`` de las emitidas menos lo mismo de
    las recibidas.
    """
    ingresos = gastos = impuestos = CERO
    for f in facturas:
        neto_impuestos = Decimal(f.importe_iva or 0) - Decimal(f.importe_irpf or 0)
        if f.tipo == FACTURA_EMITIDA:
            ingresos += Decimal(f.base_imponible or 0)
            impuestos += neto_impuestos
        elif f.tipo == FACTURA_RECIBIDA:
            gastos += Decimal(f.base_imponible or 0)
            impuestos -= neto_impuestos
    return {"ingresos": ingresos, "gastos": gastos, "impuestos": impuestos}


def variacion_porcentual(actual, anterior):
    if not anterior:
        return 0.0
    return round(float((Decimal(actual) - Decimal(anterior)) / abs(Decimal(anterior)) * 100), 1)


def resumen_financiero(facturas, referencia, periodo):
    """
    KPIs del periodo actual comparados con el periodo anterior.

    :return: dict con ``actual`` y ``anterior`` (ver
        :func:`metricas_financieras`, más ``beneficio_neto``), ``proyeccion``
        (ingresos actuales * 1.2), ``variacion`` por KPI y los rangos de
        fechas de ambos periodos.
    """
    facturas = list(facturas)
    inicio, fin = rango_periodo(referencia, periodo)
    inicio_ant, fin_ant = rango_periodo(referencia_anterior(referencia, periodo), periodo)

    actual = metricas_financieras(_en_rango(facturas, inicio, fin))
    anterior = metricas_financieras(_en_rango(facturas, inicio_ant, fin_ant))
    for m in (actual, anterior):
        m["beneficio_neto"] = m["ingresos"] - m["gastos"]

    return {
        "periodo": periodo,
        "inicio": inicio,
        "fin": fin,
        "inicio_anterior": inicio_ant,
        "fin_anterior": fin_ant,
        "actual": actual,
        "anterior": anterior,
        "proyeccion": (actual["ingresos"] * Decimal("1.2")).quantize(Decimal("0.01")),
        "variacion": {
            clave: variacion_porcentual(actual[clave], anterior[clave])
            for clave in ("ingresos", "gastos", "impuestos", "beneficio_neto")
        },
    }


def gastos_por_categoria(facturas):
    """Base imponible de las facturas recibidas por categoría, de mayor a menor."""
    totales = OrderedDict()
    for f in facturas:
        if f.tipo != FACTURA_RECIBIDA:
            continue
        categoria = f.categoria or SIN_CATEGORIA
        totales[categoria] = totales.get(categoria, CERO) + Decimal(f.base_imponible or 0)
    return sorted(
        ({"categoria": c, "importe": v} for c, v in totales.items()),
        key=lambda x: x["importe"],
        reverse=True,
    )


def facturas_pendientes(facturas):
    resultado = {
        FACTURA_EMITIDA: {"cantidad": 0, "importe": CERO},
        FACTURA_RECIBIDA: {"cantidad": 0, "importe": CERO},
    }
    for f in facturas:
        if f.estado != FACTURA_PENDIENTE or f.tipo not in resultado:
            continue
        resultado[f.tipo]["cantidad"] += 1
        resultado[f.tipo]["importe"] += Decimal(f.total or 0)
    return resultado


def evolucion_mensual(facturas, referencia, periodo):
    """Ingresos y gastos por mes dentro del periodo, en orden de calendario."""
    inicio, fin = rango_periodo(referencia, periodo)
    meses = OrderedDict()
    cursor = inicio
    while cursor <= fin:
        meses[(cursor.year, cursor.month)] = {
            "etiqueta": f"{MESES_CORTOS[cursor.month - 1]} {cursor.year}",
            "ingresos": CERO,
            "gastos": CERO,
        }
        cursor = _sumar_meses(cursor, 1)

    for f in _en_rango(facturas, inicio, fin):
        cubeta = meses[(f.fecha.year, f.fecha.month)]
        if f.tipo == FACTURA_EMITIDA:
            cubeta["ingresos"] += Decimal(f.base_imponible or 0)
        elif f.tipo == FACTURA_RECIBIDA:
            cubeta["gastos"] += Decimal(f.base_imponible or 0)
    return list(meses.values())


# ---------------------------------------------------------------------------
# Asistencia
# ---------------------------------------------------------------------------

def asistencias_realizadas(registros, inscripciones, alumno_id):
    """
    Registros realizados de un alumno dentro de la vigencia de sus inscripciones.

    Un registro cuenta si su estado es ``Realizado`` y la fecha de la clase
    cae entre la fecha de inscripción y la de baja (sin límite superior si
    no hay baja) de alguna inscripción del alumno en el curso de la clase.

    :param registros: Objetos con ``alumno_id``, ``estado`` y ``clase``
        (con ``curso_id`` y ``fecha``).
    :param inscripciones: Objetos con ``alumno_id``, ``curso_id``,
        ``fecha_inscripcion`` y ``fecha_baja``.
    """
    ventanas = {}
    for i in inscripciones:
        if i.alumno_id == alumno_id:
            ventanas.setdefault(i.curso_id, []).append((i.fecha_inscripcion, i.fecha_baja))

    resultado = []
    for r in registros:
        if r.alumno_id != alumno_id or r.estado != ASISTENCIA_REALIZADA:
            continue
        clase = r.clase
        if clase is None:
            continue
        for desde, hasta in ventanas.get(clase.curso_id, ()):
            if clase.fecha >= desde and (hasta is None or clase.fecha <= hasta):
                resultado.append(r)
                break
    return resultado


def resumen_asistencia(registros):
    registros = list(registros)
    total = len(registros)
    asistidas = sum(1 for r in registros if r.asistio)
    justificadas = sum(1 for r in registros if not r.asistio and r.falta_justificada)
    return {
        "total": total,
        "asistidas": asistidas,
        "faltas": total - asistidas,
        "justificadas": justificadas,
        "porcentaje": round(asistidas * 100 / total, 1) if total else 0.0,
    }
