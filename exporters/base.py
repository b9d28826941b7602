"""
Módulo base para exportadores de colecciones Firestore → SQL.

Define la interfaz común (contrato) que todos los exportadores específicos
deben implementar. Esto permite que firesql.py funcione con cualquier
exportador sin conocer sus detalles internos.

Patrón de diseño: Strategy Pattern
- firesql.py = Contexto (orquestador)
- BaseExporter = Estrategia abstracta
- UsersExporter, StoresExporter, TagsExporter = Estrategias concretas

Flujo de uso:
1. firesql.py carga dinámicamente un exportador
2. Obtiene los snapshots de la colección (firestore_reader)
3. Llama a extract_record() por cada snapshot (falla si el documento no
   tiene la forma esperada)
4. Llama a build_statement() para generar un único INSERT multi-fila

Ejemplo de implementación:
    class MiExportador(BaseExporter):
        collection = 'mi_coleccion'
        columns = ['ref_id', 'name']

        def extract_record(self, snapshot):
            return MiRecord(snapshot.id, require_field(snapshot, 'name', collection=self.collection))

        def row_values(self, record):
            return [quote_literal(record.ref_id), quote_literal(record.name)]
"""

from abc import ABC, abstractmethod

from errors import MappingError
from .dialects import DEFAULT_DIALECT, get_dialect


def require_field(snapshot, field: str, expected_type=str, collection: str = ""):
    """
    Lee un campo de un snapshot verificando su tipo.

    Es el paso de decodificación explícito: o retorna el valor tipado o
    lanza MappingError. Nunca rellena con un valor vacío.

    Args:
        snapshot: DocumentSnapshot de Firestore (o cualquier objeto con
                  .id y .to_dict())
        field: Nombre del campo en el documento
        expected_type: Tipo escalar esperado
        collection: Nombre de la colección (solo para el mensaje de error)

    Returns:
        Valor del campo

    Raises:
        MappingError: Si el campo no existe o no es del tipo esperado
    """
    data = snapshot.to_dict() or {}

    if field not in data:
        raise MappingError(collection, snapshot.id, field, expected_type, "missing")

    value = data[field]
    if not isinstance(value, expected_type):
        raise MappingError(
            collection, snapshot.id, field, expected_type, type(value).__name__
        )

    return value


def quote_literal(value: str) -> str:
    """Literal SQL entre comillas simples (las comillas internas se duplican)."""
    return "'" + value.replace("'", "''") + "'"


class BaseExporter(ABC):
    """
    Clase abstracta que define la interfaz para exportadores de colecciones.

    Attributes:
        collection (str): Colección de Firestore origen
        columns (list): Columnas de la tabla destino, en orden
        table (str): Tabla SQL destino
        dialect (dict): Definición del dialecto de salida (ver dialects.py)
    """

    collection = None
    columns = []

    def __init__(self, table: str, dialect: str = DEFAULT_DIALECT):
        """
        Constructor base que almacena la tabla y el dialecto destino.

        Args:
            table: Nombre de la tabla SQL (ej: 'stores')
            dialect: Nombre del dialecto ('mysql' o 'postgres')
        """
        self.table = table
        self.dialect_name = dialect
        self.dialect = get_dialect(dialect)

    @property
    def now(self) -> str:
        """Expresión de fecha actual del dialecto (evaluada por el servidor)."""
        return self.dialect["now"]

    @abstractmethod
    def extract_record(self, snapshot):
        """
        Convierte un snapshot de Firestore en un registro tipado.

        El identificador del registro (uid / ref_id) debe ser siempre el id
        del documento, para que la reimportación sea idempotente.

        Raises:
            MappingError: Si falta un campo o su tipo no es el esperado
        """
        pass

    @abstractmethod
    def row_values(self, record) -> list:
        """
        Retorna los valores SQL de una fila, en el orden de `columns`.

        Cada valor es un fragmento SQL ya formateado: literales entre
        comillas, constantes (NULL, códigos) o la expresión self.now.
        """
        pass

    def format_row(self, record) -> str:
        return "\t(" + ", ".join(self.row_values(record)) + ")"

    def build_header(self) -> str:
        quote = self.dialect["identifier_quote"]
        columns = ", ".join(f"{quote}{column}{quote}" for column in self.columns)
        return f"{self.dialect['insert']} {self.table}({columns})\nVALUES\n"

    def build_statement(self, records) -> str:
        """
        Genera un único INSERT multi-fila a partir de los registros.

        Las filas se separan con ",\\n" y la última cierra la sentencia
        con ";\\n". Sin registros se emite el encabezado seguido de ";"
        en cualquier dialecto (sin cláusula ON CONFLICT).

        Args:
            records: Secuencia ordenada de registros de este exportador

        Returns:
            str: Sentencia SQL completa
        """
        rows = ",\n".join(self.format_row(record) for record in records)
        if not rows:
            return self.build_header() + ";\n"
        return self.build_header() + rows + self.dialect["on_conflict"] + ";\n"

    def generate_sql(self, snapshots) -> str:
        """
        Mapea todos los snapshots y construye la sentencia.

        Falla con el primer documento mal formado; no se omiten filas.
        """
        records = [self.extract_record(snapshot) for snapshot in snapshots]
        return self.build_statement(records)
