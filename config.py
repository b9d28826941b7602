"""
Configuración centralizada para la exportación Firestore → SQL.

ARQUITECTURA:
Cada colección de Firestore se exporta a una única tabla SQL mediante un
exportador (ver exporters/), que se carga dinámicamente por convención:
- users → exporters.users → UsersExporter
- shops → exporters.stores → StoresExporter
- tags  → exporters.tags  → TagsExporter

FLUJO DE EXPORTACIÓN:
1. Validar configuración (validate_config) ANTES de cualquier llamada de red
2. Exportar colecciones en el orden de EXPORT_ORDER
3. Escribir las tres sentencias en un único archivo output/<timestamp>.sql

USO DE LAS FUNCIONES HELPER:
    # Obtener la tabla destino de una colección
    table = get_table_for_collection('shops')  # 'stores'

    # Validar .env antes de conectar
    validate_config()
"""

import os
from dotenv import load_dotenv

from errors import ConfigError
from exporters.dialects import DIALECTS

# Carga las variables del archivo .env en las variables de entorno del sistema
load_dotenv(override=True)

# --- Configuración de Firestore (Origen) ---
FIRESTORE_CONFIG = {
    "project_id": os.getenv("PROJECT_ID") or "",
    "credentials_path": os.getenv("SERVICE_ACCOUNT_FILE") or "./service-account.json",
}

# Documentos por página al recorrer una colección
PAGE_SIZE = os.getenv("FIRESTORE_PAGE_SIZE") or "500"

# --- Configuración de Salida (Destino) ---
OUTPUT_DIR = os.getenv("OUTPUT_DIR") or "output"
SQL_DIALECT = os.getenv("SQL_DIALECT") or "mysql"

# --- Configuración Multi-Colección ---
# Cada colección de Firestore define:
# - sql_table: Tabla destino (también nombre del módulo en exporters/)
# - description: Descripción de negocio de la colección

COLLECTIONS = {
    "users": {
        "sql_table": "users",
        "description": "Usuarios registrados (uid + email)",
    },
    "shops": {
        "sql_table": "stores",
        "description": "Tiendas conectadas (url + plataforma)",
    },
    "tags": {
        "sql_table": "tags",
        "description": "Etiquetas de catálogo",
    },
}

# --- Orden de Exportación ---
# Fijo para que el contenido del archivo sea determinista.
EXPORT_ORDER = [
    "users",
    "shops",
    "tags",
]


# --- Funciones Helper ---


def get_collection_config(collection_name: str) -> dict:
    """
    Obtiene la configuración de una colección por nombre.

    Args:
        collection_name: Nombre de la colección en Firestore (ej: 'shops')

    Returns:
        dict: Configuración con keys 'sql_table' y 'description'

    Raises:
        KeyError: Si la colección no está configurada

    Ejemplo:
        >>> get_collection_config('shops')['sql_table']
        'stores'
    """
    if collection_name not in COLLECTIONS:
        available = ", ".join(COLLECTIONS.keys())
        raise KeyError(
            f"Colección '{collection_name}' no está configurada.\n"
            f"Colecciones disponibles: {available}"
        )
    return COLLECTIONS[collection_name]


def get_table_for_collection(collection_name: str) -> str:
    """Atajo para obtener la tabla SQL destino de una colección."""
    return get_collection_config(collection_name)["sql_table"]


def parse_page_size(value) -> int:
    """
    Convierte el tamaño de página configurado a entero positivo.

    Raises:
        ConfigError: Si no es un entero >= 1
    """
    try:
        page_size = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"FIRESTORE_PAGE_SIZE inválido: {value!r}")
    if page_size < 1:
        raise ConfigError(f"FIRESTORE_PAGE_SIZE debe ser >= 1 (recibido {page_size})")
    return page_size


def validate_config(firestore_config=None, dialect=None, page_size=None):
    """
    Valida la configuración completa antes de cualquier llamada a Firestore.

    Los argumentos omitidos toman los valores cargados desde .env.

    Args:
        firestore_config: Dict con 'project_id' y 'credentials_path'
        dialect: Nombre del dialecto SQL de salida
        page_size: Documentos por página

    Returns:
        int: Tamaño de página ya convertido

    Raises:
        ConfigError: Si falta PROJECT_ID, no existe el archivo de credenciales,
                     el dialecto es desconocido o el tamaño de página es inválido
    """
    if firestore_config is None:
        firestore_config = FIRESTORE_CONFIG
    if dialect is None:
        dialect = SQL_DIALECT
    if page_size is None:
        page_size = PAGE_SIZE

    if not firestore_config.get("project_id"):
        raise ConfigError("Falta PROJECT_ID en el entorno (.env)")

    credentials_path = firestore_config.get("credentials_path")
    if not credentials_path or not os.path.isfile(credentials_path):
        raise ConfigError(
            f"No existe el archivo de credenciales de servicio: {credentials_path!r}"
        )

    if dialect not in DIALECTS:
        available = ", ".join(DIALECTS.keys())
        raise ConfigError(
            f"Dialecto SQL '{dialect}' no soportado. Disponibles: {available}"
        )

    return parse_page_size(page_size)
