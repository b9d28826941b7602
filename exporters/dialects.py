"""
Sintaxis específica de cada dialecto SQL de salida.

Cada dialecto define cómo expresar "insertar salvo duplicado" y la expresión
de fecha actual, que se evalúa en el servidor al ejecutar la sentencia
(nunca un literal del momento de generación).

- mysql: INSERT IGNORE INTO ... ;
- postgres: INSERT INTO ... ON CONFLICT DO NOTHING;
"""

DIALECTS = {
    "mysql": {
        "insert": "INSERT IGNORE INTO",
        "on_conflict": "",
        "identifier_quote": "`",
        "now": "sysdate()",
    },
    "postgres": {
        "insert": "INSERT INTO",
        "on_conflict": "\nON CONFLICT DO NOTHING",
        "identifier_quote": '"',
        "now": "now()",
    },
}

DEFAULT_DIALECT = "mysql"


def get_dialect(name: str) -> dict:
    """
    Obtiene la definición de un dialecto por nombre.

    Raises:
        KeyError: Si el dialecto no existe
    """
    if name not in DIALECTS:
        available = ", ".join(DIALECTS.keys())
        raise KeyError(
            f"Dialecto '{name}' no soportado.\n" f"Dialectos disponibles: {available}"
        )
    return DIALECTS[name]
