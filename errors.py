"""
Excepciones del sistema de exportación Firestore → SQL.

Todas heredan de ExportError para que firesql.main() pueda tratarlas
como fatales con un único except. Cualquier otra excepción se considera
un bug y se propaga con su traceback.
"""


class ExportError(Exception):
    """Error base de la exportación."""


class ConfigError(ExportError):
    """Configuración de entorno ausente o inválida (.env, credenciales)."""


class RetrievalError(ExportError):
    """Fallo al construir el cliente de Firestore o al paginar una colección."""


class MappingError(ExportError):
    """
    Un documento no tiene la forma esperada para su tabla destino.

    Attributes:
        collection (str): Colección de Firestore del documento
        doc_id (str): Identificador del documento
        field (str): Campo que falta o tiene tipo incorrecto
        expected (type): Tipo esperado del campo
        actual (str): Nombre del tipo encontrado, o 'missing' si no existe
    """

    def __init__(self, collection, doc_id, field, expected, actual):
        self.collection = collection
        self.doc_id = doc_id
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Documento '{doc_id}' de '{collection}': campo '{field}' "
            f"esperado {expected.__name__}, encontrado {actual}"
        )


class WriteError(ExportError):
    """No se pudo crear o escribir el archivo .sql de salida."""
