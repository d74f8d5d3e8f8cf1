"""
Modelo de tarea y convención de fechas del archivo JSON.

Las fechas se escriben siempre como dd/MM/yyyy. Al leer se prueban varios
formatos en orden y gana el primero que funcione; si ninguno sirve la fecha
queda en SIN_FECHA en lugar de fallar.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime

ESTADO_PENDIENTE = "Pending"
ESTADO_EN_PROGRESO = "In Progress"
ESTADO_FINALIZADA = "Finished"
ESTADO_CANCELADA = "Cancelled"

# Fecha "sin asignar"
SIN_FECHA = date.min

# Claves que se escriben en el documento, en este orden
CAMPO_ID = "Id"
CAMPO_NOMBRE = "nombreTarea"
CAMPO_FECHA = "fechaVencimiento"
CAMPO_ESTADO = "estado"

# Alias aceptados al leer (comparados en minúsculas)
_ALIAS = {
    "id": CAMPO_ID,
    "nombretarea": CAMPO_NOMBRE,
    "nombre": CAMPO_NOMBRE,
    "fechavencimiento": CAMPO_FECHA,
    "fecha": CAMPO_FECHA,
    "estado": CAMPO_ESTADO,
    "status": CAMPO_ESTADO,
}

_DD_MM_YYYY = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
_D_M_YYYY = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


def _parse_dia_mes_anio(pattern, texto):
    m = pattern.match(texto)
    if not m:
        return None
    dia, mes, anio = (int(g) for g in m.groups())
    return date(anio, mes, dia)


def _parse_dd_mm_yyyy(texto):
    return _parse_dia_mes_anio(_DD_MM_YYYY, texto)


def _parse_d_m_yyyy(texto):
    return _parse_dia_mes_anio(_D_M_YYYY, texto)


def _parse_iso(texto):
    m = _ISO.match(texto)
    if not m:
        return None
    anio, mes, dia = (int(g) for g in m.groups())
    return date(anio, mes, dia)


# El orden importa: el primero que devuelve una fecha gana
PARSERS_FECHA = (_parse_dd_mm_yyyy, _parse_d_m_yyyy, _parse_iso)


def parse_fecha(valor):
    """Convierte un literal de fecha a date; SIN_FECHA si está vacío o no se entiende"""
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str):
        return SIN_FECHA

    texto = valor.strip()
    if not texto:
        return SIN_FECHA

    for parser in PARSERS_FECHA:
        try:
            fecha = parser(texto)
        except ValueError:
            # Día o mes fuera de rango: se prueba el siguiente formato
            continue
        if fecha is not None:
            return fecha
    return SIN_FECHA


def format_fecha(fecha):
    """Formatea una fecha como dd/MM/yyyy (año siempre con 4 dígitos)"""
    return f"{fecha.day:02d}/{fecha.month:02d}/{fecha.year:04d}"


def _parse_id(valor):
    if isinstance(valor, bool):
        return 0
    if isinstance(valor, int):
        return valor
    if isinstance(valor, str) and valor.strip().lstrip("-").isdigit():
        return int(valor.strip())
    return 0


@dataclass
class Tarea:
    """Una tarea del listado"""
    id: int = 0
    nombre: str = ""
    fecha_vencimiento: date = SIN_FECHA
    estado: str = ESTADO_PENDIENTE

    @classmethod
    def from_dict(cls, data):
        """
        Construye una tarea desde un objeto del documento JSON.

        Los nombres de campo se comparan sin distinguir mayúsculas. Un Id que
        no es entero queda en 0 para que el store lo repare.
        """
        campos = {}
        for key, value in data.items():
            canonica = _ALIAS.get(str(key).lower())
            if canonica and canonica not in campos:
                campos[canonica] = value

        nombre = campos.get(CAMPO_NOMBRE)
        estado = campos.get(CAMPO_ESTADO)
        return cls(
            id=_parse_id(campos.get(CAMPO_ID)),
            nombre=nombre if isinstance(nombre, str) else "",
            fecha_vencimiento=parse_fecha(campos.get(CAMPO_FECHA)),
            estado=estado if isinstance(estado, str) else ESTADO_PENDIENTE,
        )

    def to_dict(self):
        return {
            CAMPO_ID: self.id,
            CAMPO_NOMBRE: self.nombre,
            CAMPO_FECHA: format_fecha(self.fecha_vencimiento),
            CAMPO_ESTADO: self.estado,
        }
