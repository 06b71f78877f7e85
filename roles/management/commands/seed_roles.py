from django.contrib.auth.models import Permission
from django.core.management.base import BaseCommand
from django.db import transaction

from roles.models import NombreRol, Role

PERMISOS_COORDINACION = [
    "access_alumnos_panel",
    "access_cursos_panel",
    "access_profesores_panel",
    "access_cuadro_aulas",
    "access_asistencia",
    "access_recibos_panel",
]

PERMISOS_POR_ROL = {
    NombreRol.ADMINISTRADOR: PERMISOS_COORDINACION + [
        "access_roles_panel",
        "delete_roles",
        "access_user_management",
        "access_gestoria",
        "access_config_panel",
    ],
    NombreRol.COORDINADOR: PERMISOS_COORDINACION,
    NombreRol.PROFESOR: [
        "access_alumnos_panel",
        "access_cursos_panel",
        "access_cuadro_aulas",
        "access_asistencia",
    ],
    NombreRol.GESTOR_FINANCIERO: [
        "access_alumnos_panel",
        "access_cursos_panel",
        "access_recibos_panel",
        "access_gestoria",
    ],
    # Sin acceso al back office.
    NombreRol.ALUMNO: [],
}

DESCRIPCIONES = {
    NombreRol.ADMINISTRADOR: "Acceso total.",
    NombreRol.COORDINADOR: "Gestión académica de alumnos, cursos y profesores.",
    NombreRol.PROFESOR: "Consulta de cursos y pase de lista.",
    NombreRol.GESTOR_FINANCIERO: "Recibos, facturas y tablero financiero.",
    NombreRol.ALUMNO: "Alumno de la academia.",
}


class Command(BaseCommand):
    help = "Crea/actualiza los roles de la academia y sus permisos."

    def _get_perms(self, codenames):
        perms = list(Permission.objects.filter(codename__in=codenames))
        faltan = set(codenames) - {p.codename for p in perms}
        if faltan:
            self.stdout.write(self.style.WARNING(f"Permisos no encontrados: {', '.join(sorted(faltan))}"))
        return perms

    @transaction.atomic
    def handle(self, *args, **opts):
        self.stdout.write(self.style.SUCCESS("Configurando roles…"))

        for nombre, codenames in PERMISOS_POR_ROL.items():
            rol, creado = Role.objects.get_or_create(
                name=nombre.value, defaults={"description": DESCRIPCIONES[nombre]}
            )
            rol.permissions.set(self._get_perms(codenames))
            accion = "creado" if creado else "actualizado"
            self.stdout.write(f"  - {rol.name}: {accion} ({len(codenames)} permisos)")

        self.stdout.write(self.style.SUCCESS("Roles listos."))
