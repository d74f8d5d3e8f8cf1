"""
Errores de las operaciones sobre tareas.

El mensaje de cada excepción es el texto que se le muestra al usuario.
"""


class TareaError(Exception):
    """Error base: termina la operación actual sin cambiar el archivo"""


class StoreError(TareaError):
    """No se pudo escribir el archivo de tareas"""


class ValidacionError(TareaError):
    """Datos inválidos (por ejemplo, nombre vacío)"""


class TareaNoEncontrada(TareaError):
    """No existe una tarea con ese id"""

    def __init__(self, tarea_id):
        super().__init__(f"Tarea {tarea_id} no encontrada")
        self.tarea_id = tarea_id
