"""
Configuración de logging para la aplicación
"""
import logging
import sys


def setup_logging(level="INFO"):
    """
    Configura el logger raíz con un único handler a stderr.

    Se llama una sola vez, antes del primer log. Los handlers previos se
    reemplazan para no duplicar líneas.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    # Werkzeug loguea cada request en INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
