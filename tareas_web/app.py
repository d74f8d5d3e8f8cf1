"""
Aplicación principal
Registra el blueprint de tareas y prepara el archivo de datos
"""
import logging

from flask import Flask, jsonify

from tareas_web import config
from tareas_web.controllers.tareas_controller import tareas_bp
from tareas_web.logging_setup import setup_logging
from tareas_web.services.errors import StoreError
from tareas_web.services.tareas_store import ensure_data_file

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(config.as_dict())
    if overrides:
        app.config.update(overrides)

    # Crear archivo si no existe
    try:
        ensure_data_file(app.config["DATA_FILE"])
    except StoreError:
        logger.warning("Se continúa sin archivo de tareas: %s", app.config["DATA_FILE"])

    app.register_blueprint(tareas_bp)

    @app.route("/health", methods=["GET"])
    def health():
        """Endpoint de salud"""
        return jsonify({"status": "ok", "service": "tareas-web"}), 200

    return app


def main():
    setup_logging(config.LOG_LEVEL)
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"])


if __name__ == "__main__":
    main()
