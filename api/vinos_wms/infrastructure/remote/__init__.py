"""
Acceso a la base remota (fuente de verdad).

- client: consultas y mutaciones que devuelven filas o un error, sin lanzar.
- types: resultados, errores y mapeos declarativos campo <-> columna.
- table_mappings: un mapeo por entidad.
"""
