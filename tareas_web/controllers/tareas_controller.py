"""
Blueprint de tareas

Adaptador HTTP: arma los parámetros del listado desde el query string, llama
a los servicios y responde siempre con el listado vuelto a consultar, de modo
que después de una modificación se ve la misma página con los mismos filtros.
"""
import logging

from flask import Blueprint, current_app, jsonify, request

from tareas_web.services.consulta import ParametrosConsulta, query_tareas
from tareas_web.services.errors import StoreError, TareaNoEncontrada, ValidacionError
from tareas_web.services.tareas_service import (
    cancel_tarea,
    change_estado,
    create_tarea,
    delete_tarea,
    edit_tarea,
    finish_tarea,
    get_tarea,
)
from tareas_web.services.tareas_store import load_tareas_with_ids

logger = logging.getLogger(__name__)

tareas_bp = Blueprint('tareas', __name__)


def _data_file():
    return current_app.config["DATA_FILE"]


def _params():
    return ParametrosConsulta.from_args(request.args, current_app.config["PAGE_SIZE"])


def _body():
    """Datos del request: JSON o formulario"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def _campo(data, *nombres):
    for nombre in nombres:
        valor = data.get(nombre)
        if valor is not None:
            return valor
    return None


def _listado(params, status=200, mensaje=None, error=None, tarea=None):
    resultado = query_tareas(load_tareas_with_ids(_data_file()), params)
    body = {
        "data": [t.to_dict() for t in resultado.tareas],
        "paginacion": resultado.paginacion(),
        "params": params.to_args(),
    }
    if mensaje:
        body["mensaje"] = mensaje
    if error:
        body["error"] = error
    if tarea is not None:
        body["tarea"] = tarea.to_dict()
    return jsonify(body), status


def _ejecutar(operacion, mensaje, status_ok=200):
    params = _params()
    try:
        tarea = operacion()
    except ValidacionError as e:
        return _listado(params, 400, error=str(e))
    except TareaNoEncontrada as e:
        return _listado(params, 404, error=str(e))
    except StoreError as e:
        return _listado(params, 500, error=str(e))
    except Exception:
        logger.exception("Error inesperado en %s %s", request.method, request.path)
        return jsonify({"error": "No se pudo completar la operación."}), 500
    return _listado(params, status_ok, mensaje=mensaje, tarea=tarea)


@tareas_bp.route("/tareas", methods=["GET"])
def get_tareas():
    try:
        return _listado(_params())
    except Exception:
        logger.exception("Error al listar tareas")
        return jsonify({"error": "No se pudieron obtener las tareas."}), 500


@tareas_bp.route("/tareas/<int:tarea_id>", methods=["GET"])
def get_tarea_by_id(tarea_id):
    try:
        tarea = get_tarea(_data_file(), tarea_id)
    except TareaNoEncontrada as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"data": tarea.to_dict()}), 200


@tareas_bp.route("/tareas", methods=["POST"])
def add_tarea():
    data = _body()
    return _ejecutar(
        lambda: create_tarea(
            _data_file(),
            _campo(data, "nombre", "nombreTarea"),
            _campo(data, "fechaVencimiento", "fecha"),
            _campo(data, "estado"),
        ),
        "Tarea registrada.",
        status_ok=201,
    )


@tareas_bp.route("/tareas/<int:tarea_id>", methods=["PUT"])
@tareas_bp.route("/tareas/<int:tarea_id>/editar", methods=["POST"])
def update_tarea(tarea_id):
    data = _body()
    return _ejecutar(
        lambda: edit_tarea(
            _data_file(),
            tarea_id,
            _campo(data, "nombre", "nombreTarea"),
            _campo(data, "fechaVencimiento", "fecha"),
            _campo(data, "estado"),
        ),
        "Tarea actualizada.",
    )


@tareas_bp.route("/tareas/<int:tarea_id>/estado", methods=["POST"])
def update_estado(tarea_id):
    data = _body()
    return _ejecutar(
        lambda: change_estado(_data_file(), tarea_id, _campo(data, "estado")),
        "Estado actualizado.",
    )


@tareas_bp.route("/tareas/<int:tarea_id>/finalizar", methods=["POST"])
def finalizar_tarea(tarea_id):
    return _ejecutar(lambda: finish_tarea(_data_file(), tarea_id), "Tarea finalizada.")


@tareas_bp.route("/tareas/<int:tarea_id>/cancelar", methods=["POST"])
def cancelar_tarea(tarea_id):
    return _ejecutar(lambda: cancel_tarea(_data_file(), tarea_id), "Tarea cancelada.")


@tareas_bp.route("/tareas/<int:tarea_id>", methods=["DELETE"])
@tareas_bp.route("/tareas/<int:tarea_id>/eliminar", methods=["POST"])
def remove_tarea(tarea_id):
    return _ejecutar(lambda: delete_tarea(_data_file(), tarea_id), "Tarea eliminada.")
