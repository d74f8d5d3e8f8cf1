import math
from datetime import date

import pytest
from werkzeug.datastructures import MultiDict

from tareas_web.models import Tarea
from tareas_web.services.consulta import ParametrosConsulta, query_tareas


def _pendientes(*nombres):
    return [Tarea(i, n, date(2024, 1, i), "Pending") for i, n in enumerate(nombres, start=1)]


def test_escenario_filtro_por_estado(ejemplo):
    res = query_tareas(ejemplo, ParametrosConsulta(estados=frozenset({"Pending"})))
    assert [t.id for t in res.tareas] == [1]
    assert res.total_paginas == 1
    assert res.total == 1
    assert res.pagina == 1


def test_estados_por_defecto_pendiente_y_en_progreso():
    tareas = [
        Tarea(1, "a", estado="Pending"),
        Tarea(2, "b", estado="In Progress"),
        Tarea(3, "c", estado="Finished"),
        Tarea(4, "d", estado="Cancelled"),
    ]
    res = query_tareas(tareas, ParametrosConsulta())
    assert [t.id for t in res.tareas] == [1, 2]


def test_estado_ignora_mayusculas():
    tareas = [Tarea(1, "a", estado="PENDING"), Tarea(2, "b", estado="in progress")]
    res = query_tareas(tareas, ParametrosConsulta())
    assert res.total == 2


def test_estado_unico_reemplaza_seleccion_multiple():
    tareas = [Tarea(1, "a", estado="Pending"), Tarea(2, "b", estado="Finished")]
    params = ParametrosConsulta(estado="finished", estados=frozenset({"Pending"}))
    assert [t.id for t in query_tareas(tareas, params).tareas] == [2]


def test_busqueda_por_nombre_sin_mayusculas():
    tareas = _pendientes("Comprar LECHE", "Pagar alquiler", "leche de almendras")
    res = query_tareas(tareas, ParametrosConsulta(buscar="  leche "))
    assert [t.id for t in res.tareas] == [1, 3]


def test_busqueda_en_blanco_no_filtra():
    tareas = _pendientes("a", "b")
    assert query_tareas(tareas, ParametrosConsulta(buscar="   ")).total == 2


@pytest.mark.parametrize("orden, esperado", [
    ("az", [2, 3, 1]),
    ("za", [1, 3, 2]),
    ("fasc", [1, 2, 3]),
    ("fdesc", [3, 2, 1]),
    ("cualquiera", [2, 3, 1]),
])
def test_ordenes(orden, esperado):
    tareas = _pendientes("zeta", "alfa", "Medio")
    res = query_tareas(tareas, ParametrosConsulta(orden=orden))
    assert [t.id for t in res.tareas] == esperado


@pytest.mark.parametrize("orden", ["az", "za", "fasc", "fdesc"])
def test_orden_estable(orden):
    tareas = [Tarea(i, "igual", date(2024, 1, 1), "Pending") for i in (4, 1, 3, 2)]
    res = query_tareas(tareas, ParametrosConsulta(orden=orden))
    assert [t.id for t in res.tareas] == [4, 1, 3, 2]


def test_pagina_fuera_de_rango_se_ajusta_a_la_ultima():
    tareas = _pendientes("a", "b", "c")
    res = query_tareas(tareas, ParametrosConsulta(pagina=5, tam_pagina=1))
    assert res.pagina == 3
    assert res.total_paginas == 3
    assert [t.nombre for t in res.tareas] == ["c"]


def test_lista_vacia_tiene_una_pagina():
    res = query_tareas([], ParametrosConsulta(pagina=3))
    assert res.tareas == []
    assert res.pagina == 1
    assert res.total_paginas == 1
    assert res.total == 0


@pytest.mark.parametrize("total", [0, 1, 4, 5, 6, 11])
@pytest.mark.parametrize("tam", [1, 2, 5])
def test_propiedades_de_paginacion(total, tam):
    tareas = _pendientes(*[f"t{i:02d}" for i in range(total)])
    esperado_paginas = max(1, math.ceil(total / tam))
    for pagina in range(1, esperado_paginas + 2):
        res = query_tareas(tareas, ParametrosConsulta(pagina=pagina, tam_pagina=tam))
        assert res.total_paginas == esperado_paginas
        efectiva = min(pagina, esperado_paginas)
        assert res.pagina == efectiva
        assert len(res.tareas) == max(0, min(tam, total - (efectiva - 1) * tam))


def test_query_no_modifica_la_lista(ejemplo):
    copia = list(ejemplo)
    query_tareas(ejemplo, ParametrosConsulta(orden="za", estados=frozenset({"Pending", "Finished"})))
    assert ejemplo == copia


def test_parametros_normalizados():
    params = ParametrosConsulta(pagina=0, tam_pagina=-3, orden="xx")
    assert params.pagina == 1
    assert params.tam_pagina == 10
    assert params.orden == "az"


def test_from_args_multidict():
    args = MultiDict([
        ("pagina", "2"), ("tam", "5"), ("q", "leche"), ("order", "fdesc"),
        ("estados", "Pending"), ("estados", "Finished"),
    ])
    params = ParametrosConsulta.from_args(args)
    assert params == ParametrosConsulta(
        pagina=2, tam_pagina=5, buscar="leche", orden="fdesc",
        estados=frozenset({"Pending", "Finished"}),
    )


def test_from_args_valores_invalidos():
    params = ParametrosConsulta.from_args({"pagina": "x", "tam": "0"}, default_tam_pagina=5)
    assert params.pagina == 1
    assert params.tam_pagina == 5


def test_from_args_estados_separados_por_coma():
    params = ParametrosConsulta.from_args({"estados": "Pending, Cancelled"})
    assert params.estados == frozenset({"Pending", "Cancelled"})


def test_to_args_ida_y_vuelta():
    params = ParametrosConsulta(
        pagina=3, tam_pagina=4, buscar="x", orden="za", estado="Finished",
        estados=frozenset({"Pending"}),
    )
    assert ParametrosConsulta.from_args(params.to_args()) == params
