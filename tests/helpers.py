"""
Funciones helper compartidas para todos los tests.

Proporciona:
- Carga dinámica de exportadores basándose en config.py
- Dobles de Firestore (snapshots, consultas y cliente) sin red
"""

import sys
import os
import importlib

# Agregar directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config


# === DOBLES DE FIRESTORE ===


class FakeSnapshot:
    """Imita un DocumentSnapshot: id + to_dict()."""

    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeQuery:
    """
    Imita la consulta paginada de Firestore.

    Registra cada página pedida en client.requests para poder verificar
    cuántas páginas se leyeron. Si fail_on_page está definido, esa página
    lanza la excepción indicada.
    """

    def __init__(self, client, documents, page_size=None, after=None):
        self.client = client
        self.documents = documents
        self.page_size = page_size
        self.after = after

    def order_by(self, field_path):
        self.client.order_by = field_path
        return self

    def limit(self, count):
        return FakeQuery(self.client, self.documents, count, self.after)

    def start_after(self, snapshot):
        return FakeQuery(self.client, self.documents, self.page_size, snapshot)

    def stream(self):
        start = 0
        if self.after is not None:
            ids = [doc.id for doc in self.documents]
            start = ids.index(self.after.id) + 1

        page_number = len(self.client.requests)
        self.client.requests.append(start)

        if self.client.fail_on_page == page_number:
            raise self.client.error

        return iter(self.documents[start : start + self.page_size])


class FakeClient:
    """Cliente de Firestore en memoria: {colección: [FakeSnapshot, ...]}."""

    def __init__(self, collections, fail_on_page=None, error=None):
        self.collections = collections
        self.fail_on_page = fail_on_page
        self.error = error
        self.requests = []
        self.order_by = None
        self.closed = False

    def collection(self, name):
        documents = sorted(self.collections.get(name, []), key=lambda doc: doc.id)
        return FakeQuery(self, documents)

    def close(self):
        self.closed = True


# === CARGA DINÁMICA DE EXPORTADORES ===


def get_exporter_class_for_collection(collection_name):
    """
    Carga dinámicamente la clase exportador para una colección.

    Sigue la convención de nombres:
    - users → UsersExporter (en exporters/users.py)
    - shops → StoresExporter (en exporters/stores.py)
    """
    table = config.get_table_for_collection(collection_name)
    class_name = "".join(word.capitalize() for word in table.split("_")) + "Exporter"
    module = importlib.import_module(f"exporters.{table}")
    return getattr(module, class_name)


def get_all_exporter_classes():
    """Retorna lista de tuplas (nombre_clase, clase) en orden de exportación."""
    return [
        (cls.__name__, cls)
        for cls in map(get_exporter_class_for_collection, config.EXPORT_ORDER)
    ]


def get_all_exporter_instances(dialect="mysql"):
    """Retorna lista de tuplas (nombre_clase, instancia) en orden de exportación."""
    instances = []
    for collection_name in config.EXPORT_ORDER:
        exporter_class = get_exporter_class_for_collection(collection_name)
        table = config.get_table_for_collection(collection_name)
        instances.append((exporter_class.__name__, exporter_class(table, dialect)))
    return instances
