r"""
Script principal de exportación de colecciones Firestore a sentencias SQL.

Arquitectura con carga dinámica de exportadores:
- firesql.py: Orquestación (validación, orden, salida, códigos de error)
- firestore_reader.py: Lectura paginada de colecciones
- exporters/*.py: Mapeo documento → fila por colección (implementan BaseExporter)
- output_writer.py: Archivo output/<timestamp>.sql
- config.py: Configuración centralizada (.env)

Flujo de ejecución:
1. Validar configuración (PROJECT_ID, credenciales, dialecto) sin tocar la red
2. Para cada colección de config.EXPORT_ORDER (users, shops, tags):
   a. Cargar el exportador correspondiente
   b. Leer todos los documentos (paginación por cursor)
   c. Mapear cada documento y construir un único INSERT
3. Escribir las sentencias en un archivo con marca de tiempo

Manejo de errores:
Cualquier fallo (config, lectura, mapeo, escritura) aborta la exportación
completa con código 1 y NO se escribe archivo. No se generan exportaciones
parciales con sentencias vacías.

Prerrequisitos:
- .env con PROJECT_ID (y opcionalmente SERVICE_ACCOUNT_FILE, SQL_DIALECT...)
- Archivo de cuenta de servicio (por defecto ./service-account.json)
- Directorio de salida existente (por defecto output/)

Uso:
    python firesql.py                # users, shops y tags
    python firesql.py users tags     # solo algunas colecciones (mismo orden)
"""

from pathlib import Path
import sys
import importlib

# Asegurar que el directorio raíz esté en sys.path para imports dinámicos
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import config
from errors import ConfigError, ExportError
from exporters.base import BaseExporter
from firestore_reader import fetch_firestore_data
from output_writer import write_output


def load_exporter_for_collection(collection_name, dialect="mysql"):
    """
    Carga dinámicamente el exportador correspondiente a una colección.

    Convención de nombres (la tabla destino define el módulo):
        users → exporters.users → UsersExporter
        shops → exporters.stores → StoresExporter

    Args:
        collection_name: Nombre de la colección en Firestore
        dialect: Dialecto SQL de salida

    Returns:
        BaseExporter: Instancia del exportador específico

    Raises:
        ConfigError: Si no existe el módulo o la clase, o no hereda de BaseExporter
    """
    table = config.get_table_for_collection(collection_name)

    # stores → StoresExporter
    class_name = "".join(word.capitalize() for word in table.split("_")) + "Exporter"

    try:
        module = importlib.import_module(f"exporters.{table}")
        exporter_class = getattr(module, class_name)
    except ModuleNotFoundError as e:
        # Un import roto dentro del exportador no es "exportador inexistente"
        if e.name != f"exporters.{table}":
            raise
        raise ConfigError(
            f"No existe exportador para '{collection_name}' "
            f"(se esperaba exporters/{table}.py)"
        ) from e
    except AttributeError as e:
        raise ConfigError(
            f"El módulo exporters.{table} no tiene la clase '{class_name}'"
        ) from e

    # Verificar que hereda de BaseExporter (type safety en runtime)
    if not issubclass(exporter_class, BaseExporter):
        raise ConfigError(f"{class_name} no hereda de BaseExporter")

    return exporter_class(table=table, dialect=dialect)


def export_collection(collection_name, firestore_config, page_size, dialect="mysql"):
    """
    Exporta una colección completa a una sentencia SQL.

    Args:
        collection_name: Nombre de la colección en Firestore
        firestore_config: Dict con 'project_id' y 'credentials_path'
        page_size: Documentos por página
        dialect: Dialecto SQL de salida

    Returns:
        str: Sentencia INSERT multi-fila

    Raises:
        RetrievalError, MappingError: Se propagan sin capturar
    """
    exporter = load_exporter_for_collection(collection_name, dialect)

    print(f"\n🚚 Exportando '{collection_name}' → {exporter.table}...")
    snapshots = fetch_firestore_data(collection_name, firestore_config, page_size)
    print(f"   📊 Documentos leídos: {len(snapshots):,}")

    statement = exporter.generate_sql(snapshots)
    print(f"   ✅ Sentencia generada ({len(snapshots):,} filas)")

    return statement


def select_collections(args):
    """
    Determina qué colecciones exportar a partir de los argumentos.

    Sin argumentos se exportan todas. El resultado respeta siempre el orden
    de config.EXPORT_ORDER, sin importar el orden en que se pasaron.

    Raises:
        ConfigError: Si algún nombre no está configurado
    """
    if not args:
        return list(config.EXPORT_ORDER)

    unknown = [name for name in args if name not in config.COLLECTIONS]
    if unknown:
        available = ", ".join(config.EXPORT_ORDER)
        raise ConfigError(
            f"Colecciones desconocidas: {', '.join(unknown)}. "
            f"Disponibles: {available}"
        )

    return [name for name in config.EXPORT_ORDER if name in args]


def run_export(collections, firestore_config, page_size, dialect, output_dir):
    """
    Exporta las colecciones en orden y escribe el archivo de salida.

    Si una colección falla, la excepción se propaga antes de escribir nada.

    Returns:
        str: Ruta del archivo .sql escrito
    """
    statements = []
    for collection_name in collections:
        statements.append(
            export_collection(collection_name, firestore_config, page_size, dialect)
        )

    return write_output(statements, output_dir)


def main(argv=None):
    """
    Función principal que coordina el flujo completo de exportación.

    Exit Codes:
        0: Éxito
        1: Error de configuración, lectura, mapeo o escritura
    """
    if argv is None:
        argv = sys.argv[1:]

    print("=" * 70)
    print("🚀 EXPORTACIÓN FIRESTORE → SQL")
    print("=" * 70)
    print(f"📍 Proyecto: {config.FIRESTORE_CONFIG['project_id'] or '(sin definir)'}")
    print(f"📍 Dialecto: {config.SQL_DIALECT}")

    try:
        page_size = config.validate_config()
        collections = select_collections(argv)
    except ConfigError as e:
        print(f"❌ Error de configuración: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        filename = run_export(
            collections,
            config.FIRESTORE_CONFIG,
            page_size,
            config.SQL_DIALECT,
            config.OUTPUT_DIR,
        )
    except ExportError as e:
        print(f"\n❌ Error durante la exportación: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)

    print("\n" + "=" * 70)
    print("✅ PROCESO COMPLETADO EXITOSAMENTE")
    print(f"   Archivo: {filename}")
    print("=" * 70)


if __name__ == "__main__":
    main()
