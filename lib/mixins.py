from django.contrib.auth.mixins import LoginRequiredMixin, PermissionRequiredMixin
from django.shortcuts import redirect


class PermisoRequeridoMixin(LoginRequiredMixin, PermissionRequiredMixin):
    """
    Acceso a vistas basadas en clase según ``permission_required``.

    Sin sesión se envía al login; con sesión pero sin permiso, al tablero.
    """

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            return super().handle_no_permission()
        return redirect('home')
