"""
Menú lateral filtrado por roles.

.. module:: navegacion.menu
   :synopsis: Árbol estático del menú y poda por roles.

``MENU`` es un árbol fijo de :class:`NodoMenu`. Los nodos de primer nivel
indican qué roles los ven; un hijo sin roles hereda la visibilidad de su
padre. :func:`filtrar_menu` devuelve un árbol nuevo sin tocar el original.
"""
from dataclasses import dataclass, field, replace

from roles.models import NombreRol

ADMIN = NombreRol.ADMINISTRADOR.value
COORDINADOR = NombreRol.COORDINADOR.value
PROFESOR = NombreRol.PROFESOR.value
ALUMNO = NombreRol.ALUMNO.value
GESTOR = NombreRol.GESTOR_FINANCIERO.value

TODOS = frozenset({ADMIN, COORDINADOR, PROFESOR, ALUMNO, GESTOR})
EQUIPO = frozenset({ADMIN, COORDINADOR, PROFESOR, GESTOR})


@dataclass(frozen=True)
class NodoMenu:
    titulo: str
    destino: str | None = None
    roles: frozenset = frozenset()
    hijos: tuple = ()
    icono: str = ""


MENU = (
    NodoMenu("Inicio", "home", TODOS, icono="bi-house"),
    NodoMenu("Alumnos", roles=EQUIPO, icono="bi-people", hijos=(
        NodoMenu("Listado de alumnos", "alumnos:lista"),
        NodoMenu("Nuevo alumno", "alumnos:crear", frozenset({ADMIN, COORDINADOR})),
    )),
    NodoMenu("Cursos", roles=EQUIPO, icono="bi-journal-bookmark", hijos=(
        NodoMenu("Listado de cursos", "cursos:lista"),
        NodoMenu("Cuadro de aulas", "cursos:cuadro_aulas", EQUIPO - {GESTOR}),
        NodoMenu("Profesores", "cursos:profesores", frozenset({ADMIN, COORDINADOR})),
    )),
    NodoMenu("Recibos", roles=frozenset({ADMIN, COORDINADOR, GESTOR}), icono="bi-receipt", hijos=(
        NodoMenu("Listado de recibos", "recibos:lista"),
        NodoMenu("Nuevo recibo", "recibos:crear"),
    )),
    NodoMenu("Gestoría", roles=frozenset({ADMIN, GESTOR}), icono="bi-graph-up", hijos=(
        NodoMenu("Tablero financiero", "tablero:financiero"),
        NodoMenu("Facturas", "recibos:facturas"),
    )),
    NodoMenu("Administración", roles=frozenset({ADMIN}), icono="bi-gear", hijos=(
        NodoMenu("Usuarios", "usuarios:listar_usuarios"),
        NodoMenu("Roles", "roles:role-panel"),
        NodoMenu("Perfil de la academia", "configuracion:perfil"),
        NodoMenu("Conexión con el backend", "configuracion:conexion_baas"),
    )),
)


def filtrar_menu(nodos, roles):
    """
    Poda el árbol dejando solo lo visible para ``roles``.

    Un nodo con roles se ve si comparte alguno con el usuario; uno sin roles
    hereda la visibilidad del padre. Un padre cuyos hijos quedan todos
    podados desaparece también.

    :param nodos: Secuencia de :class:`NodoMenu`.
    :param roles: Nombres de rol del usuario.
    :rtype: list[NodoMenu]
    """
    roles = set(roles)
    visibles = []
    for nodo in nodos:
        if nodo.roles and not (nodo.roles & roles):
            continue
        if nodo.hijos:
            hijos = filtrar_menu(nodo.hijos, roles)
            if not hijos:
                continue
            nodo = replace(nodo, hijos=tuple(hijos))
        visibles.append(nodo)
    return visibles
