"""
Configuración de la aplicación, leída de variables de entorno
"""
import os


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


DEFAULT_PAGE_SIZE = 10

DATA_FILE = os.getenv("TAREAS_DATA_FILE", "tareas.json")
PAGE_SIZE = _env_int("TAREAS_PAGE_SIZE", DEFAULT_PAGE_SIZE)

HOST = os.getenv("TAREAS_HOST", "0.0.0.0")
PORT = _env_int("TAREAS_PORT", 5000)
LOG_LEVEL = os.getenv("TAREAS_LOG_LEVEL", "INFO").upper()


def as_dict():
    """Devuelve la configuración lista para cargar en app.config"""
    return {
        "DATA_FILE": DATA_FILE,
        "PAGE_SIZE": PAGE_SIZE,
        "HOST": HOST,
        "PORT": PORT,
        "LOG_LEVEL": LOG_LEVEL,
    }
