"""
Consulta del listado: filtro por estado -> búsqueda -> orden -> paginación.

query_tareas es una función pura: recibe la lista completa y los parámetros,
y devuelve la página pedida sin tocar el archivo.
"""
import math
from dataclasses import dataclass

from tareas_web.config import DEFAULT_PAGE_SIZE
from tareas_web.models import ESTADO_EN_PROGRESO, ESTADO_PENDIENTE

ORDEN_AZ = "az"
ORDEN_ZA = "za"
ORDEN_FECHA_ASC = "fasc"
ORDEN_FECHA_DESC = "fdesc"

# orden -> (clave, descendente)
ORDENES = {
    ORDEN_AZ: (lambda t: t.nombre.casefold(), False),
    ORDEN_ZA: (lambda t: t.nombre.casefold(), True),
    ORDEN_FECHA_ASC: (lambda t: t.fecha_vencimiento, False),
    ORDEN_FECHA_DESC: (lambda t: t.fecha_vencimiento, True),
}

ESTADOS_POR_DEFECTO = frozenset({ESTADO_PENDIENTE, ESTADO_EN_PROGRESO})


def _to_int(valor, default):
    if valor is None:
        return default
    try:
        return int(valor)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class ParametrosConsulta:
    """Filtros, orden y página del listado; viaja sin cambios entre requests"""
    pagina: int = 1
    tam_pagina: int = DEFAULT_PAGE_SIZE
    buscar: str = ""
    orden: str = ORDEN_AZ
    estado: str = ""
    estados: frozenset = frozenset()

    def __post_init__(self):
        # Normalización: página >= 1, tamaño positivo, orden conocido
        if not isinstance(self.pagina, int) or self.pagina < 1:
            object.__setattr__(self, "pagina", 1)
        if not isinstance(self.tam_pagina, int) or self.tam_pagina < 1:
            object.__setattr__(self, "tam_pagina", DEFAULT_PAGE_SIZE)
        if self.orden not in ORDENES:
            object.__setattr__(self, "orden", ORDEN_AZ)
        object.__setattr__(self, "buscar", (self.buscar or "").strip())
        object.__setattr__(self, "estado", (self.estado or "").strip())
        object.__setattr__(self, "estados", frozenset(
            e.strip() for e in (self.estados or ()) if e and e.strip()
        ))

    @property
    def estados_efectivos(self):
        """El estado único manda sobre la selección múltiple"""
        if self.estado:
            return frozenset({self.estado})
        if self.estados:
            return self.estados
        return ESTADOS_POR_DEFECTO

    @classmethod
    def from_args(cls, args, default_tam_pagina=DEFAULT_PAGE_SIZE):
        """
        Arma los parámetros desde los argumentos del request.

        Acepta un MultiDict de Flask (estados repetidos) o un dict común,
        donde 'estados' puede ser una lista o un texto separado por comas.
        """
        if hasattr(args, "getlist"):
            estados = args.getlist("estados")
        else:
            estados = args.get("estados") or []
        if isinstance(estados, str):
            estados = estados.split(",")
        else:
            estados = [p for e in estados for p in str(e).split(",")]

        tam_pagina = _to_int(args.get("tam"), default_tam_pagina)
        if tam_pagina < 1:
            tam_pagina = default_tam_pagina

        return cls(
            pagina=_to_int(args.get("pagina"), 1),
            tam_pagina=tam_pagina,
            buscar=args.get("q") or "",
            orden=args.get("order") or ORDEN_AZ,
            estado=args.get("estado") or "",
            estados=frozenset(estados),
        )

    def to_args(self):
        """Parámetros para volver a pedir el mismo listado"""
        args = {
            "pagina": self.pagina,
            "tam": self.tam_pagina,
            "order": self.orden,
        }
        if self.buscar:
            args["q"] = self.buscar
        if self.estado:
            args["estado"] = self.estado
        if self.estados:
            args["estados"] = sorted(self.estados)
        return args


@dataclass(frozen=True)
class ResultadoConsulta:
    tareas: list
    pagina: int
    total_paginas: int
    tam_pagina: int
    total: int

    def paginacion(self):
        return {
            "pagina": self.pagina,
            "total_paginas": self.total_paginas,
            "tam_pagina": self.tam_pagina,
            "total": self.total,
        }


def query_tareas(tareas, params):
    """Aplica filtros, orden y paginación sobre una copia de la lista"""
    estados = {e.casefold() for e in params.estados_efectivos}
    filtradas = [t for t in tareas if (t.estado or "").casefold() in estados]

    if params.buscar:
        buscar = params.buscar.casefold()
        filtradas = [t for t in filtradas if buscar in t.nombre.casefold()]

    # sorted es estable también con reverse=True
    clave, descendente = ORDENES[params.orden]
    ordenadas = sorted(filtradas, key=clave, reverse=descendente)

    total = len(ordenadas)
    tam = params.tam_pagina
    total_paginas = max(1, math.ceil(total / tam))
    pagina = min(params.pagina, total_paginas)

    inicio = (pagina - 1) * tam
    return ResultadoConsulta(
        tareas=ordenadas[inicio:inicio + tam],
        pagina=pagina,
        total_paginas=total_paginas,
        tam_pagina=tam,
        total=total,
    )
