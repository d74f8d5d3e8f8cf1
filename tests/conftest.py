import json
from datetime import date

import pytest

from tareas_web.app import create_app
from tareas_web.models import Tarea


@pytest.fixture()
def data_file(tmp_path):
    return str(tmp_path / "tareas.json")


@pytest.fixture()
def write_doc(data_file):
    """Escribe el documento JSON tal cual, para simular archivos existentes"""
    def _write(items):
        with open(data_file, "w", encoding="utf-8") as f:
            json.dump(items, f)
    return _write


@pytest.fixture()
def read_doc(data_file):
    def _read():
        with open(data_file, encoding="utf-8") as f:
            return json.load(f)
    return _read


@pytest.fixture()
def ejemplo():
    return [
        Tarea(1, "Buy milk", date(2024, 1, 10), "Pending"),
        Tarea(2, "Pay rent", date(2024, 1, 5), "Finished"),
    ]


@pytest.fixture()
def app(data_file):
    return create_app({"DATA_FILE": data_file, "PAGE_SIZE": 10, "TESTING": True})


@pytest.fixture()
def client(app):
    return app.test_client()
