"""
Servicio de tareas - lectura y escritura del archivo JSON

Cada operación lee el documento completo y, si corresponde, lo reescribe
completo. Un archivo ausente o ilegible se trata como una lista vacía.
"""
import json
import logging
import os
import stat
import tempfile

from tareas_web.models import Tarea
from tareas_web.services.errors import StoreError

logger = logging.getLogger(__name__)


def ensure_data_file(data_file):
    """Crea el archivo con una lista vacía si no existe"""
    if os.path.exists(data_file):
        return
    save_tareas(data_file, [])
    logger.info("Archivo de tareas creado: %s", data_file)


def load_tareas(data_file):
    """Obtiene todas las tareas; nunca lanza por errores de lectura"""
    if not os.path.exists(data_file):
        return []

    try:
        with open(data_file, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError, RecursionError) as e:
        logger.error("No se pudo leer %s: %s", data_file, e)
        return []

    if not isinstance(data, list):
        logger.error("Formato inválido en %s: se esperaba una lista", data_file)
        return []

    tareas = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Registro %d de %s ignorado: no es un objeto", i, data_file)
            continue
        tareas.append(Tarea.from_dict(item))
    return tareas


def repair_ids(tareas):
    """
    Asigna id a las tareas con id 0 o repetido.

    Se parte del mayor id existente en toda la lista, así un id nuevo nunca
    choca con uno que aparece más adelante. Aplicarlo dos veces no cambia nada.
    """
    max_id = max((t.id for t in tareas if t.id != 0), default=0)
    max_id = max(max_id, 0)
    vistos = set()
    for t in tareas:
        if t.id == 0 or t.id in vistos:
            max_id += 1
            logger.debug("Id reasignado: %r -> %d (%s)", t.id, max_id, t.nombre)
            t.id = max_id
        vistos.add(t.id)
    return tareas


def _modo_destino(data_file):
    """Permisos que debe tener el documento: los actuales, o los de un archivo nuevo"""
    try:
        return stat.S_IMODE(os.stat(data_file).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def load_tareas_with_ids(data_file):
    """Obtiene todas las tareas con ids únicos y distintos de cero"""
    return repair_ids(load_tareas(data_file))


def save_tareas(data_file, tareas):
    """
    Reemplaza el archivo con la lista completa.

    Se escribe a un temporal en el mismo directorio y se mueve encima del
    original: si falla, el documento anterior queda intacto.
    """
    contenido = json.dumps([t.to_dict() for t in tareas], indent=4, ensure_ascii=False)
    directorio = os.path.dirname(os.path.abspath(data_file))
    tmp_path = None
    try:
        os.makedirs(directorio, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".tareas-", suffix=".json", dir=directorio)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(contenido)
        # mkstemp crea el temporal con 0600
        os.chmod(tmp_path, _modo_destino(data_file))
        os.replace(tmp_path, data_file)
        tmp_path = None
    except OSError as e:
        logger.error("No se pudo guardar %s: %s", data_file, e)
        raise StoreError("No se pudo guardar la tarea.") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
    logger.debug("Guardadas %d tareas en %s", len(tareas), data_file)
