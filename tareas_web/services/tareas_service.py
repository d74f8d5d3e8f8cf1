"""
Servicio de tareas - altas, bajas y modificaciones

Todas siguen el mismo ciclo: leer con ids reparados, modificar en memoria y
guardar la lista completa. Las validaciones se hacen antes de tocar el archivo.
"""
import logging

from tareas_web.models import (
    ESTADO_CANCELADA,
    ESTADO_FINALIZADA,
    ESTADO_PENDIENTE,
    Tarea,
    parse_fecha,
)
from tareas_web.services.errors import TareaNoEncontrada, ValidacionError
from tareas_web.services.tareas_store import load_tareas_with_ids, save_tareas

logger = logging.getLogger(__name__)


def _validar_nombre(nombre):
    if not isinstance(nombre, str) or not nombre.strip():
        raise ValidacionError("El nombre es obligatorio.")
    return nombre.strip()


def _validar_estado(estado, default):
    """Estado recortado; None o vacío devuelven default"""
    if estado is None:
        return default
    if not isinstance(estado, str):
        raise ValidacionError("El estado debe ser un texto.")
    return estado.strip() or default


def _buscar(tareas, tarea_id):
    tarea = next((t for t in tareas if t.id == tarea_id), None)
    if tarea is None:
        raise TareaNoEncontrada(tarea_id)
    return tarea


def next_id(tareas):
    """Próximo id libre: el mayor existente + 1 (1 si no hay tareas)"""
    return max((t.id for t in tareas), default=0) + 1


def get_tarea(data_file, tarea_id):
    """Obtiene una tarea por ID"""
    return _buscar(load_tareas_with_ids(data_file), tarea_id)


def create_tarea(data_file, nombre, fecha_vencimiento=None, estado=None):
    nombre = _validar_nombre(nombre)
    estado = _validar_estado(estado, ESTADO_PENDIENTE)

    tareas = load_tareas_with_ids(data_file)
    tarea = Tarea(
        id=next_id(tareas),
        nombre=nombre,
        fecha_vencimiento=parse_fecha(fecha_vencimiento),
        estado=estado,
    )
    tareas.append(tarea)
    save_tareas(data_file, tareas)

    logger.info("Tarea creada: %d %s", tarea.id, tarea.nombre)
    return tarea


def edit_tarea(data_file, tarea_id, nombre, fecha_vencimiento=None, estado=None):
    """
    Reemplaza nombre, fecha y estado.

    Una fecha no enviada (None) o un estado vacío conservan el valor actual;
    una fecha vacía o inválida la deja en SIN_FECHA.
    """
    nombre = _validar_nombre(nombre)
    estado = _validar_estado(estado, None)

    tareas = load_tareas_with_ids(data_file)
    tarea = _buscar(tareas, tarea_id)
    tarea.nombre = nombre
    if fecha_vencimiento is not None:
        tarea.fecha_vencimiento = parse_fecha(fecha_vencimiento)
    tarea.estado = estado or tarea.estado
    save_tareas(data_file, tareas)

    logger.info("Tarea editada: %d", tarea_id)
    return tarea


def change_estado(data_file, tarea_id, estado):
    estado = _validar_estado(estado, "")
    if not estado:
        raise ValidacionError("El estado es obligatorio.")

    tareas = load_tareas_with_ids(data_file)
    tarea = _buscar(tareas, tarea_id)
    tarea.estado = estado
    save_tareas(data_file, tareas)

    logger.info("Tarea %d -> %s", tarea_id, estado)
    return tarea


def finish_tarea(data_file, tarea_id):
    return change_estado(data_file, tarea_id, ESTADO_FINALIZADA)


def cancel_tarea(data_file, tarea_id):
    return change_estado(data_file, tarea_id, ESTADO_CANCELADA)


def delete_tarea(data_file, tarea_id):
    """Elimina la tarea; si no existe se informa y no se escribe nada"""
    tareas = load_tareas_with_ids(data_file)
    tarea = _buscar(tareas, tarea_id)
    tareas.remove(tarea)
    save_tareas(data_file, tareas)

    logger.info("Tarea eliminada: %d", tarea_id)
    return tarea
