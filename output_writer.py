"""
Escritura del archivo .sql de salida.

Las sentencias se concatenan tal cual (cada una termina en ";\\n") en un
archivo nuevo <output_dir>/YYYYMMDD_HHMMSS.sql. El directorio debe existir.
Si la escritura falla a mitad, el archivo queda truncado: no hay recuperación.
"""

import os
from datetime import datetime

from errors import WriteError

FILENAME_FORMAT = "%Y%m%d_%H%M%S"


def build_output_filename(now=None) -> str:
    """Nombre del archivo para un instante dado (ej: '20261019_183300.sql')."""
    if now is None:
        now = datetime.now()
    return f"{now.strftime(FILENAME_FORMAT)}.sql"


def write_output(statements, output_dir, now=None) -> str:
    """
    Escribe las sentencias en un archivo nuevo con marca de tiempo.

    Args:
        statements: Lista de sentencias SQL en orden (users, stores, tags)
        output_dir: Directorio destino (debe existir)
        now: Instante de generación (por defecto datetime.now())

    Returns:
        str: Ruta del archivo escrito

    Raises:
        WriteError: Si el directorio no existe, el archivo ya existe o
                    falla la escritura
    """
    if not os.path.isdir(output_dir):
        raise WriteError(f"El directorio de salida no existe: {output_dir}")

    filename = os.path.join(output_dir, build_output_filename(now))

    try:
        # 'x': nunca sobrescribir una exportación anterior
        with open(filename, "x", encoding="utf-8") as f:
            for statement in statements:
                f.write(statement)
    except OSError as e:
        raise WriteError(f"No se pudo escribir '{filename}': {e}") from e

    return filename
