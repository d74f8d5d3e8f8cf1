"""
Gestor de tareas: listado paginado y ABM sobre un archivo JSON
"""
