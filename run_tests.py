import os
import sys
import django
from django.core.management import call_command
from io import StringIO
import warnings
import re

# -----------------------------
# Configuración inicial
# -----------------------------
warnings.filterwarnings("ignore", category=UserWarning, module="django")

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, BASE_DIR)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "GestionAcademia.settings")
django.setup()

APPS = [
    "validaciones", "roles", "usuarios", "alumnos", "cursos",
    "asistencia", "recibos", "configuracion", "tablero", "navegacion",
]

# -----------------------------
# Ejecutar tests
# -----------------------------
etiquetas = sys.argv[1:] or APPS
out = StringIO()
try:
    call_command("test", *etiquetas, verbosity=0, stdout=out, stderr=out)
    result = out.getvalue()

    match = re.search(r"Ran (\d+) test", result)
    if match:
        print(f"Se ejecutaron {match.group(1)} pruebas.")

    if "\nOK\n" in result or "OK\n" in result:
        print("Pruebas unitarias exitosas")
    else:
        print(result)

except SystemExit:
    # call_command termina con sys.exit() si hay fallos
    print(out.getvalue())
